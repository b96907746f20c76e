"""
Game driver: plays strategies against each other.

A player answering None is passed over via forced_pass; the game ends when
neither side can move.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional

from othello_ai.config import BOARD_CONFIG
from othello_ai.game.othello import OthelloState, PLAYER_ONE, PLAYER_TWO


logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Outcome of one finished game."""
    final_state: OthelloState
    moves: list = field(default_factory=list)   # (player, Coordinate or None for a pass)
    token_counts: tuple = (0, 0)
    winner: Optional[int] = None                 # 1, 2, or 0 for a draw


def play_game(player_one, player_two, state=None, on_move=None):
    """
    Play one game to the end.

    Args:
        player_one: Player moving for side 1
        player_two: Player moving for side 2
        state: Starting position (defaults to the standard opening)
        on_move: Optional callback(player, move, new_state) after every turn

    Returns:
        GameRecord
    """
    if state is None:
        state = OthelloState.initial(BOARD_CONFIG['side_length'])
    players = {PLAYER_ONE: player_one, PLAYER_TWO: player_two}
    moves = []

    while not state.is_terminal():
        mover = state.side_to_move
        move = players[mover].decide_move(state)
        if move is None:
            if state.legal_moves():
                raise ValueError(f"Player {mover} passed while legal moves were available")
            state = state.forced_pass()
        else:
            state = state.apply_move(move)
        moves.append((mover, move))
        if on_move is not None:
            on_move(mover, move, state)

    record = GameRecord(
        final_state=state,
        moves=moves,
        token_counts=state.token_counts(),
        winner=state.winner(),
    )
    logger.debug("Game over after %d turns: %s, winner %s", len(moves), record.token_counts, record.winner)
    return record


def play_match(player_one, player_two, num_games, side_length=None, swap_sides=True):
    """
    Play several games and tally the results per player, whichever colour they held.

    Args:
        player_one: First player
        player_two: Second player
        num_games: Number of games
        side_length: Board size (defaults to BOARD_CONFIG)
        swap_sides: Alternate which player moves first

    Returns:
        Dict with 'player_one', 'player_two' and 'draws' win counts
    """
    side_length = side_length or BOARD_CONFIG['side_length']
    tally = defaultdict(int)

    for game_idx in range(num_games):
        swapped = swap_sides and game_idx % 2 == 1
        first, second = (player_two, player_one) if swapped else (player_one, player_two)
        record = play_game(first, second, OthelloState.initial(side_length))

        if record.winner == 0:
            tally['draws'] += 1
        elif (record.winner == PLAYER_ONE) != swapped:
            tally['player_one'] += 1
        else:
            tally['player_two'] += 1

    return {key: tally[key] for key in ('player_one', 'player_two', 'draws')}
