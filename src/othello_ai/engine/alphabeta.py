"""
Alpha-beta minimax search engine for Othello.

Depth-bounded minimax with two mutually recursive roles (maximize for the
engine's side, minimize for its opponent), alpha-beta pruning and a static
heuristic at the depth cutoff.

Key features:
- Alpha-beta pruning (cut branches that can't affect final result)
- Forced passes handled inside the recursion
- Heuristic cutoff once depth exceeds the configured maximum
- Move ordering for efficient pruning
- Root move attribution without bookkeeping: the first-ply coordinate is
  threaded down the recursion and comes back with every leaf value


Algorithm overview:

    def maximize(state, position, alpha, beta, depth):
        if terminal:
            return (utility(state), position)
        if no legal moves:
            return minimize(pass(state), position, alpha, beta, depth + 1)
        if depth > max_depth:
            return (h_utility(state), position)

        best = (-infinity, position)
        for move in ordered_moves:
            carried = move if position is None else position
            result = minimize(play(state, move), carried, alpha, beta, depth + 1)
            best = max(best, result)
            alpha = max(alpha, result.utility)
            if alpha > beta:
                break  # Cutoff
        return best

minimize mirrors it with +infinity, min and beta.
"""

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Optional

from othello_ai.config import SearchConfig
from othello_ai.engine.evaluation import h_utility, utility
from othello_ai.engine.move_ordering import MoveOrdering
from othello_ai.engine.players import Player
from othello_ai.game.game import Coordinate
from othello_ai.game.othello import PLAYER_TWO


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """
    Utility paired with the first-ply move whose subtree produced it.

    position is None only above the first ply (the root itself).
    """
    utility: float
    position: Optional[Coordinate]


@dataclass
class SearchResult:
    """Result of a decision call."""
    move: Optional[Coordinate]
    utility: float
    nodes_searched: int
    time_ms: int
    # Root candidates in search order. With pruning on, every value after the
    # first may be an upper bound rather than the exact subtree value.
    root_utilities: list = field(default_factory=list)


class SearchObserver:
    """
    Diagnostics hook. Both callbacks are no-ops; subclass to record or print.
    """

    def on_root_move(self, position, utility):
        pass

    def on_decision(self, result):
        pass


class LoggingSearchObserver(SearchObserver):
    """Writes root utilities and the final choice to a logger."""

    def __init__(self, log=None, level=logging.INFO):
        self.log = log or logger
        self.level = level

    def on_root_move(self, position, utility):
        self.log.log(self.level, "%s utility: %.4f", position, utility)

    def on_decision(self, result):
        if result.move is None:
            self.log.log(self.level, "No legal move, passing")
            return
        self.log.log(
            self.level,
            "Moves: %s utility: %.4f (%d nodes, %d ms)",
            result.move, result.utility, result.nodes_searched, result.time_ms,
        )


class AlphaBetaEngine(Player):
    """
    Minimax with alpha-beta pruning and heuristic depth cutoff.

    Utilities are computed from the point of view of the player to move at the
    root of the current decision (player 2 in the reference setup).
    """

    def __init__(self, config=None, observer=None):
        """
        Initialize alpha-beta engine.

        Args:
            config: SearchConfig with depth and feature toggles
            observer: SearchObserver notified of root utilities and decisions
        """
        self.config = config if config is not None else SearchConfig()
        self.observer = observer if observer is not None else SearchObserver()
        self.move_ordering = MoveOrdering(use_tie_break=self.config.use_ordering_tie_break)

        # Search statistics
        self.nodes_searched = 0
        self.perspective = PLAYER_TWO
        self._root_utilities = []

    def decide_move(self, state):
        """
        Returns the chosen Coordinate, or None when the side to move has no
        legal move (including finished games).
        """
        return self.search(state).move

    def search(self, state):
        """
        Main search entry point.

        Args:
            state: Position to move from; the side to move is the maximizer

        Returns:
            SearchResult with best move, utility, statistics
        """
        start_time = time.time()
        self.nodes_searched = 0
        self._root_utilities = []
        self.perspective = state.side_to_move

        if not state.legal_moves():
            if state.is_terminal():
                value = utility(state, self.perspective)
            else:
                value = h_utility(state, self.perspective)
            logger.debug("Player %d has no legal move at the root", state.side_to_move)
            result = SearchResult(
                move=None,
                utility=value,
                nodes_searched=0,
                time_ms=0,
            )
            self.observer.on_decision(result)
            return result

        logger.debug(
            "Searching %r to depth %d (pruning=%s)",
            state, self.config.max_depth, self.config.use_pruning,
        )
        best = self.maximize(state, None, -math.inf, math.inf, 0)

        result = SearchResult(
            move=best.position,
            utility=best.utility,
            nodes_searched=self.nodes_searched,
            time_ms=int((time.time() - start_time) * 1000),
            root_utilities=list(self._root_utilities),
        )
        self.observer.on_decision(result)
        return result

    def maximize(self, state, position, alpha, beta, depth):
        """
        Alpha-beta search at a node where the engine's side chooses.

        Args:
            state: Game state
            position: First-ply move this subtree belongs to (None at the root)
            alpha: Best value guaranteed to the maximizer so far
            beta: Best value guaranteed to the minimizer so far
            depth: Plies from the root

        Returns:
            MoveResult
        """
        self.nodes_searched += 1

        if state.is_terminal():
            return MoveResult(utility(state, self.perspective), position)
        moves = state.legal_moves()
        if not moves:
            return self.minimize(state.forced_pass(), position, alpha, beta, self._pass_depth(depth))
        if self._cut_off(depth):
            return MoveResult(h_utility(state, self.perspective), position)

        best = MoveResult(-math.inf, position)
        for move in self.move_ordering.order_moves(state, moves):
            carried = move if position is None else position
            result = self.minimize(state.apply_move(move), carried, alpha, beta, depth + 1)
            if position is None:
                self._root_utilities.append((move, result.utility))
                self.observer.on_root_move(move, result.utility)

            if result.utility > best.utility:
                best = result
            if result.utility > alpha:
                alpha = result.utility
            if self.config.use_pruning and alpha > beta:
                break

        return best

    def minimize(self, state, position, alpha, beta, depth):
        """
        Alpha-beta search at a node where the opponent chooses.

        Same arguments as maximize.
        """
        self.nodes_searched += 1

        if state.is_terminal():
            return MoveResult(utility(state, self.perspective), position)
        moves = state.legal_moves()
        if not moves:
            return self.maximize(state.forced_pass(), position, alpha, beta, self._pass_depth(depth))
        if self._cut_off(depth):
            return MoveResult(h_utility(state, self.perspective), position)

        best = MoveResult(math.inf, position)
        for move in self.move_ordering.order_moves(state, moves):
            carried = move if position is None else position
            result = self.maximize(state.apply_move(move), carried, alpha, beta, depth + 1)

            if result.utility < best.utility:
                best = result
            if result.utility < beta:
                beta = result.utility
            if self.config.use_pruning and alpha > beta:
                break

        return best

    def _cut_off(self, depth):
        return self.config.use_cutoff and depth > self.config.max_depth

    def _pass_depth(self, depth):
        return depth + 1 if self.config.pass_consumes_depth else depth

    def get_stats(self):
        """Get search statistics."""
        return {
            'nodes_searched': self.nodes_searched,
            'max_depth': self.config.max_depth,
            'use_pruning': self.config.use_pruning,
        }
