#!/usr/bin/env python3
"""
Pit the alpha-beta engine against a baseline (or itself) on an Othello board.
The engine plays as White (player 2) unless --engine-first is given.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from othello_ai.arena import play_game, play_match
from othello_ai.config import SEARCH_PROFILES, get_search_config
from othello_ai.engine import AlphaBetaEngine, GreedyPlayer, LoggingSearchObserver, RandomPlayer
from othello_ai.game.othello import OthelloState


def build_opponent(name, seed, config):
    if name == 'random':
        return RandomPlayer(seed=seed)
    if name == 'greedy':
        return GreedyPlayer()
    return AlphaBetaEngine(config)


def engine_tally(tally, engine_first):
    """
    Re-key a play_match tally by engine and opponent.

    play_match counts wins per argument across colour swaps, so the engine's
    count sits under whichever slot it was passed in.
    """
    engine_key, opponent_key = ('player_one', 'player_two') if engine_first else ('player_two', 'player_one')
    return {'engine': tally[engine_key], 'opponent': tally[opponent_key], 'draws': tally['draws']}


def main():
    parser = argparse.ArgumentParser(description="Othello alpha-beta engine vs baseline")
    parser.add_argument('--profile', type=str, default='quick', choices=sorted(SEARCH_PROFILES),
                        help='Search profile for the engine')
    parser.add_argument('--depth', type=int, default=None, help='Override the profile max depth')
    parser.add_argument('--size', type=int, default=8, help='Board side length (even, >= 4)')
    parser.add_argument('--opponent', type=str, default='random', choices=['random', 'greedy', 'engine'])
    parser.add_argument('--games', type=int, default=1, help='Number of games (>1 prints only the tally)')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the random baseline')
    parser.add_argument('--engine-first', action='store_true', help='Engine plays Black (player 1)')
    parser.add_argument('--verbose', action='store_true', help='Log root utilities of every decision')
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format='%(message)s')

    config = get_search_config(args.profile)
    if args.depth is not None:
        config = config.with_depth(args.depth)

    observer = LoggingSearchObserver() if args.verbose else None
    engine = AlphaBetaEngine(config, observer=observer)
    opponent = build_opponent(args.opponent, args.seed, config)
    first, second = (engine, opponent) if args.engine_first else (opponent, engine)

    print("=" * 60)
    print(f"Othello {args.size}x{args.size} - engine ({args.profile}, depth {config.max_depth}) vs {args.opponent}")
    print("=" * 60)

    if args.games > 1:
        tally = engine_tally(play_match(first, second, args.games, side_length=args.size), args.engine_first)
        print(f"Engine wins:   {tally['engine']}")
        print(f"Opponent wins: {tally['opponent']} ({args.opponent})")
        print(f"Draws:         {tally['draws']}")
        return

    def show(player, move, state):
        label = "passes" if move is None else f"plays {move}"
        print(f"\nPlayer {player} {label}")
        print(state.render())

    state = OthelloState.initial(args.size)
    print(state.render())
    record = play_game(first, second, state, on_move=show)

    tokens_p1, tokens_p2 = record.token_counts
    print(f"\nScore -> Black(B): {tokens_p1}  White(W): {tokens_p2}")
    if record.winner == 0:
        print("Draw!")
    else:
        print(f"Player {record.winner} wins!")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted.")
