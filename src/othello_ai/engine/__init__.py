"""
Alpha-beta search engine for Othello.

This module contains the search components:
- Terminal and heuristic evaluation
- Move ordering heuristics
- Alpha-beta minimax search with depth cutoff
- Interchangeable move-choosing strategies
"""

from othello_ai.engine.evaluation import utility, h_utility, mobility
from othello_ai.engine.move_ordering import MoveOrdering, order_moves_simple, ordering_cost
from othello_ai.engine.players import Player, RandomPlayer, GreedyPlayer
from othello_ai.engine.alphabeta import (
    AlphaBetaEngine,
    LoggingSearchObserver,
    MoveResult,
    SearchObserver,
    SearchResult,
)

__all__ = [
    'utility',
    'h_utility',
    'mobility',
    'MoveOrdering',
    'order_moves_simple',
    'ordering_cost',
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'AlphaBetaEngine',
    'LoggingSearchObserver',
    'MoveResult',
    'SearchObserver',
    'SearchResult',
]
