"""
Move ordering heuristics for alpha-beta search.

Good move ordering is critical for alpha-beta pruning efficiency. The goal is to
search the best moves first to maximize cutoffs.

Ordering priority (high to low):
1. Corners (cost is pushed below zero by subtracting the side length)
2. Cells close to the centre (Euclidean distance to the centre cell)
3. Tie-break: heuristic utility of the position after the move, ascending

The same ordering serves the maximizing and the minimizing side: corners and
central cells are strong for whoever plays them.
"""

import math
from itertools import groupby

from othello_ai.engine.evaluation import h_utility


def distance_from_center(side_length, position):
    half = side_length // 2
    distance_x = abs(half - position.row)
    distance_y = abs(half - position.col)
    return math.sqrt(distance_x * distance_x + distance_y * distance_y)


def is_corner(side_length, position):
    edge = side_length - 1
    return position.row in (0, edge) and position.col in (0, edge)


def ordering_cost(side_length, position):
    """Lower is searched first."""
    cost = distance_from_center(side_length, position)
    if is_corner(side_length, position):
        cost -= side_length
    return cost


def order_moves_simple(state, moves=None):
    """
    Ordering by positional cost only.

    Args:
        state: Game state whose moves are ordered
        moves: Candidate coordinates (defaults to state.legal_moves())

    Returns:
        List of coordinates, lowest cost first; ties keep their input order
    """
    if moves is None:
        moves = state.legal_moves()
    side_length = state.side_length
    return sorted(moves, key=lambda move: ordering_cost(side_length, move))


class MoveOrdering:
    """
    Move ordering for alpha-beta search.

    Sorting is stable, so two calls on the same state always produce the same
    sequence.
    """

    def __init__(self, use_tie_break=True):
        """
        Args:
            use_tie_break: Break equal positional costs by the heuristic
                utility of the resulting position
        """
        self.use_tie_break = use_tie_break

    def order_moves(self, state, moves=None):
        """
        Order moves for optimal alpha-beta pruning.

        Args:
            state: Current game state
            moves: Candidate coordinates (defaults to state.legal_moves())

        Returns:
            List of coordinates sorted by priority (best first)
        """
        side_length = state.side_length
        ordered = order_moves_simple(state, moves)
        if not self.use_tie_break:
            return ordered

        # Only runs of equal cost need the (expensive) child evaluation
        result = []
        for _, group in groupby(ordered, key=lambda move: ordering_cost(side_length, move)):
            group = list(group)
            if len(group) > 1:
                group.sort(key=lambda move: h_utility(state.apply_move(move)))
            result.extend(group)
        return result
