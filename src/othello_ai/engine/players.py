"""
Move-choosing strategies.

Every strategy answers decide_move(state) with a Coordinate, or None when the
side to move has no legal move (the caller then passes the turn).
"""
from abc import ABC, abstractmethod

import numpy as np

from othello_ai.engine.evaluation import h_utility


class Player(ABC):
    """
    Abstract Base Class for anything that can pick a move.
    """

    @abstractmethod
    def decide_move(self, state):
        """
        Returns the chosen Coordinate, or None if there is nothing to play.
        """
        pass


class RandomPlayer(Player):
    """Uniformly random legal move. Baseline opponent."""

    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def decide_move(self, state):
        moves = state.legal_moves()
        if not moves:
            return None
        return moves[self.rng.integers(len(moves))]


class GreedyPlayer(Player):
    """
    1-ply heuristic opponent.

    Strategy:
    1. Play a corner if one is available
    2. Otherwise pick the move whose resulting position scores best on the
       static heuristic for the side to move (first one on ties)
    """

    def decide_move(self, state):
        moves = state.legal_moves()
        if not moves:
            return None

        edge = state.side_length - 1
        for move in moves:
            if move.row in (0, edge) and move.col in (0, edge):
                return move

        player = state.side_to_move
        return max(moves, key=lambda move: h_utility(state.apply_move(move), player))
