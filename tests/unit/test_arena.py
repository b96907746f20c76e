"""
Unit tests for strategies and the game driver.
"""

import numpy as np
import pytest
import sys
from pathlib import Path
from types import SimpleNamespace

# Add src and the scripts directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import play_othello
from othello_ai import arena
from othello_ai.arena import play_game, play_match
from othello_ai.config import SEARCH_PROFILES, SearchConfig, get_search_config
from othello_ai.engine.alphabeta import AlphaBetaEngine
from othello_ai.engine.players import GreedyPlayer, Player, RandomPlayer
from othello_ai.game.game import Coordinate
from othello_ai.game.othello import OthelloState


class AlwaysPass(Player):
    def decide_move(self, state):
        return None


class TestPlayers:
    """Baseline strategies."""

    def test_random_player_is_reproducible(self):
        state = OthelloState.initial(8)

        first = [RandomPlayer(seed=3).decide_move(state) for _ in range(5)]
        second = [RandomPlayer(seed=3).decide_move(state) for _ in range(5)]

        assert first == second
        assert all(move in state.legal_moves() for move in first)

    def test_random_player_passes_without_moves(self):
        board = np.zeros((4, 4), dtype=np.int8)
        board[0, 0], board[0, 1] = 1, 2
        state = OthelloState.from_board(board, side_to_move=2)

        assert RandomPlayer(seed=0).decide_move(state) is None

    def test_greedy_player_takes_corner(self):
        board = np.zeros((8, 8), dtype=np.int8)
        board[0, 1], board[0, 2] = 1, 2
        board[3, 3], board[3, 4] = 1, 2
        state = OthelloState.from_board(board, side_to_move=2)

        assert GreedyPlayer().decide_move(state) == Coordinate(0, 0)

    def test_strategies_are_interchangeable(self):
        state = OthelloState.initial(6)
        players = [RandomPlayer(seed=1), GreedyPlayer(), AlphaBetaEngine(SearchConfig(max_depth=1))]

        for player in players:
            assert isinstance(player, Player)
            assert player.decide_move(state) in state.legal_moves()


class TestPlayGame:
    """Driving a game to the end."""

    def test_random_game_finishes(self):
        record = play_game(RandomPlayer(seed=5), RandomPlayer(seed=6), OthelloState.initial(6))

        assert record.final_state.is_terminal()
        assert record.token_counts == record.final_state.token_counts()
        assert sum(record.token_counts) <= 36
        tokens_p1, tokens_p2 = record.token_counts
        if tokens_p1 > tokens_p2:
            assert record.winner == 1
        elif tokens_p2 > tokens_p1:
            assert record.winner == 2
        else:
            assert record.winner == 0

    def test_moves_are_recorded_in_turn_order(self):
        seen = []
        record = play_game(
            RandomPlayer(seed=2), RandomPlayer(seed=3), OthelloState.initial(4),
            on_move=lambda player, move, state: seen.append((player, move)),
        )

        assert seen == record.moves
        assert record.moves[0][0] == 1
        placed = [move for _, move in record.moves if move is not None]
        assert len(placed) == sum(record.token_counts) - 4

    def test_engine_against_random(self):
        engine = AlphaBetaEngine(SearchConfig(max_depth=1))
        record = play_game(RandomPlayer(seed=0), engine, OthelloState.initial(4))

        assert record.winner in (0, 1, 2)

    def test_illegal_pass_rejected(self):
        with pytest.raises(ValueError):
            play_game(AlwaysPass(), RandomPlayer(seed=0), OthelloState.initial(4))


class TestPlayMatch:
    """Several games with alternating colours."""

    def test_tally_covers_all_games(self):
        tally = play_match(RandomPlayer(seed=1), RandomPlayer(seed=2), num_games=4, side_length=4)

        assert set(tally) == {'player_one', 'player_two', 'draws'}
        assert sum(tally.values()) == 4


class TestProfiles:
    """Named search configurations."""

    def test_known_profiles(self):
        assert get_search_config('reference') == SearchConfig()
        assert get_search_config('quick').max_depth == 3
        assert not get_search_config('unpruned').use_pruning
        assert not get_search_config('plain').use_ordering_tie_break
        assert set(SEARCH_PROFILES) == {'reference', 'quick', 'plain', 'unpruned'}

    def test_unknown_profile(self):
        with pytest.raises(ValueError, match="Unknown search profile"):
            get_search_config('deep-blue')

    def test_with_depth(self):
        config = get_search_config('plain').with_depth(2)

        assert config.max_depth == 2
        assert not config.use_ordering_tie_break


class TestMatchReport:
    """Command-line match summary."""

    @staticmethod
    def engine_always_wins(monkeypatch):
        # Seat 1 or 2 wins depending on where the engine sits this game
        def fake_play_game(first, second, state=None, on_move=None):
            winner = 1 if isinstance(first, AlphaBetaEngine) else 2
            return SimpleNamespace(winner=winner)

        monkeypatch.setattr(arena, 'play_game', fake_play_game)

    def test_engine_wins_counted_across_swaps(self, monkeypatch):
        self.engine_always_wins(monkeypatch)
        engine = AlphaBetaEngine(SearchConfig(max_depth=1))

        tally = play_match(RandomPlayer(seed=0), engine, num_games=4, side_length=4, swap_sides=True)

        assert tally == {'player_one': 0, 'player_two': 4, 'draws': 0}
        assert play_othello.engine_tally(tally, engine_first=False) == {
            'engine': 4, 'opponent': 0, 'draws': 0
        }

    def test_engine_first(self):
        tally = {'player_one': 3, 'player_two': 1, 'draws': 2}

        assert play_othello.engine_tally(tally, engine_first=True) == {
            'engine': 3, 'opponent': 1, 'draws': 2
        }

    def test_main_prints_engine_wins(self, monkeypatch, capsys):
        self.engine_always_wins(monkeypatch)
        monkeypatch.setattr(sys, 'argv', ['play_othello.py', '--games', '2', '--size', '4', '--seed', '1'])

        play_othello.main()

        out = capsys.readouterr().out
        assert "Engine wins:   2" in out
        assert "Opponent wins: 0 (random)" in out
