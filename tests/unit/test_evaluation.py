"""
Unit tests for terminal and heuristic evaluation.
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from othello_ai.engine.evaluation import h_utility, mobility, utility
from othello_ai.game.game import Coordinate
from othello_ai.game.othello import OthelloState


BOARD_10_6 = np.array([
    [1, 1, 1, 1],
    [1, 1, 1, 1],
    [1, 1, 2, 2],
    [2, 2, 2, 2],
])


class TestUtility:
    """Terminal utility follows the token count."""

    def test_player_one_ahead_loses_for_engine(self):
        state = OthelloState.from_board(BOARD_10_6, side_to_move=1)

        assert state.is_terminal()
        assert utility(state) == -1

    def test_player_two_ahead(self):
        swapped = np.where(BOARD_10_6 == 1, 2, 1)
        state = OthelloState.from_board(swapped, side_to_move=1)

        assert utility(state) == 1

    def test_tie(self):
        board = np.array([[1, 2, 1, 2]] * 2 + [[2, 1, 2, 1]] * 2)
        state = OthelloState.from_board(board, side_to_move=2)

        assert state.token_counts() == (8, 8)
        assert utility(state) == 0

    def test_perspective_flips_sign(self):
        state = OthelloState.from_board(BOARD_10_6, side_to_move=1)

        assert utility(state, player=1) == 1
        assert utility(state, player=2) == -1


class TestHeuristic:
    """Coin parity and mobility blend."""

    def test_symmetric_start_is_zero(self):
        assert h_utility(OthelloState.initial(8)) == 0.0
        assert h_utility(OthelloState.initial(8, side_to_move=2)) == 0.0

    def test_after_first_move(self):
        # Player 1 has 4 tokens, player 2 has 1; each side has 3 moves
        state = OthelloState.initial(8).apply_move(Coordinate(2, 3))

        assert mobility(state) == (3, 3)
        expected = ((1 * 0.1 + 3 * 0.9) - (4 * 0.1 + 3 * 0.9)) / 64
        assert h_utility(state) == pytest.approx(expected)
        assert h_utility(state, player=1) == pytest.approx(-expected)

    def test_independent_of_side_to_move(self):
        state = OthelloState.initial(8).apply_move(Coordinate(2, 3))

        assert h_utility(state) == h_utility(state.forced_pass())

    def test_stuck_side_counts_zero_moves(self):
        board = np.zeros((4, 4), dtype=np.int8)
        board[0, 0] = 1
        board[0, 1] = 2
        state = OthelloState.from_board(board, side_to_move=2)

        assert mobility(state) == (1, 0)
        expected = ((1 * 0.1 + 0 * 0.9) - (1 * 0.1 + 1 * 0.9)) / 16
        assert h_utility(state) == pytest.approx(expected)

    def test_custom_weights(self):
        state = OthelloState.initial(8).apply_move(Coordinate(2, 3))

        coins_only = h_utility(state, coin_parity_weight=1.0, mobility_weight=0.0)
        assert coins_only == pytest.approx((1 - 4) / 64)
