#!/usr/bin/env python3
"""
Terminal Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N | --density D]
    python main.py simulate [--games N]
"""
import argparse
import logging
import random
import time

from src.termsweeper.board import BoardConfig
from src.termsweeper.controller import GameController
from src.termsweeper.environment import MinesweeperEnv
from src.termsweeper.errors import InvalidConfigError
from src.termsweeper.terminal import TerminalSession


def build_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> BoardConfig:
    """Turn board flags into a validated config, reporting errors via argparse."""
    try:
        if args.density is not None:
            return BoardConfig.from_density(args.width, args.height, args.density)
        return BoardConfig(args.width, args.height, args.mines)
    except InvalidConfigError as error:
        parser.error(str(error))


def play(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play interactively on stdin/stdout."""
    rng = random.Random(args.seed) if args.seed is not None else None
    controller = GameController(config, rng=rng)
    TerminalSession(controller).run()

    print(
        f"Final tally: {controller.wins} won, {controller.losses} lost, "
        f"score {controller.score}"
    )


def simulate(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play games with uniformly random reveals and report the win rate."""
    env = MinesweeperEnv(config=config)
    env.action_space.seed(args.seed)

    print(
        f"Simulating {args.games} games on {config.width}x{config.height} "
        f"with {config.num_mines} mines..."
    )

    wins = 0
    total_revealed = 0
    start_time = time.time()

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        _, info = env.reset(seed=seed)
        done = False

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info["game_state"] == "WON":
            wins += 1
        total_revealed += info["revealed"]

    elapsed = time.time() - start_time
    print(f"Win rate: {wins / args.games:.1%}")
    print(f"Avg revealed: {total_revealed / args.games:.1f} cells")
    print(f"Speed: {args.games / elapsed if elapsed > 0 else 0:.1f} games/s")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board size and mine flags shared by every command."""
    parser.add_argument("--width", type=int, default=30, help="Board columns")
    parser.add_argument("--height", type=int, default=30, help="Board rows")
    mines = parser.add_mutually_exclusive_group()
    mines.add_argument("--mines", type=int, default=30, help="Number of mines")
    mines.add_argument(
        "--density", type=float, default=None,
        help="Fraction of cells holding mines (overrides --mines)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Log game events to stderr"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Terminal Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report the win rate"
    )
    add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = build_config(args, parser)

    if args.command == "play":
        play(args, config)
    elif args.command == "simulate":
        simulate(args, config)


if __name__ == "__main__":
    main()
