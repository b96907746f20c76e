"""
Othello move selection by depth-bounded alpha-beta search.
"""

from othello_ai.config import SearchConfig, get_search_config
from othello_ai.engine import AlphaBetaEngine, RandomPlayer
from othello_ai.game import Coordinate, OthelloState

__all__ = ['SearchConfig', 'get_search_config', 'AlphaBetaEngine', 'RandomPlayer', 'Coordinate', 'OthelloState']
