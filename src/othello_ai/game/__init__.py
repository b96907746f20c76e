# Game module

from .game import Coordinate, GameState
from .othello import OthelloState, PLAYER_ONE, PLAYER_TWO, opponent

__all__ = ['Coordinate', 'GameState', 'OthelloState', 'PLAYER_ONE', 'PLAYER_TWO', 'opponent']
