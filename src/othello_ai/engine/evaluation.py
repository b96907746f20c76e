"""
Position evaluation for the alpha-beta engine.

Two scores are produced, both oriented so that positive favours `player`
(player 2 by default, the side the engine plays in the reference setup):

- utility: exact game result on terminal positions, in {-1, 0, +1}
- h_utility: static estimate used at the depth cutoff, blending coin parity
  and mobility and normalised by board area
"""

from othello_ai.config import EVALUATION_CONFIG
from othello_ai.game.othello import PLAYER_ONE, PLAYER_TWO


COIN_PARITY_WEIGHT = EVALUATION_CONFIG['coin_parity_weight']
MOBILITY_WEIGHT = EVALUATION_CONFIG['mobility_weight']


def _orient(value, player):
    return value if player == PLAYER_TWO else -value


def utility(state, player=PLAYER_TWO):
    """
    Returns the result of a finished game from player's point of view.

    Args:
        state: Terminal game state
        player: Perspective player (1 or 2)

    Returns:
        +1 if player has more tokens, -1 if fewer, 0 on a tie
    """
    tokens_p1, tokens_p2 = state.token_counts()
    if tokens_p1 > tokens_p2:
        value = -1
    elif tokens_p1 < tokens_p2:
        value = 1
    else:
        value = 0
    return _orient(value, player)


def mobility(state):
    """
    Returns (legal moves of player 1, legal moves of player 2).

    Only the side to move has directly queryable moves, so the other side is
    measured on the forced-pass transform of the state.
    """
    own_moves = len(state.legal_moves())
    other_moves = len(state.forced_pass().legal_moves())
    if state.side_to_move == PLAYER_ONE:
        return own_moves, other_moves
    return other_moves, own_moves


def h_utility(state, player=PLAYER_TWO,
              coin_parity_weight=COIN_PARITY_WEIGHT,
              mobility_weight=MOBILITY_WEIGHT):
    """
    Static evaluation for non-terminal positions at the depth cutoff.

    h_p = tokens_p * coin_parity_weight + moves_p * mobility_weight
    score = (h2 - h1) / side_length^2

    Args:
        state: Game state (either side to move)
        player: Perspective player (1 or 2)

    Returns:
        Score, positive when player is ahead
    """
    tokens_p1, tokens_p2 = state.token_counts()
    moves_p1, moves_p2 = mobility(state)
    total_space = state.side_length * state.side_length

    h_player1 = tokens_p1 * coin_parity_weight + moves_p1 * mobility_weight
    h_player2 = tokens_p2 * coin_parity_weight + moves_p2 * mobility_weight

    return _orient((h_player2 - h_player1) / total_space, player)
