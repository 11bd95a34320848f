#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty NAME] [--seed N] [--data-file PATH] [--verbose]
    python main.py best-times [--data-file PATH] [--verbose]
"""
import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional

from minesweeper.best_times import BestTimesStore
from minesweeper.commands import (
    CommandError,
    execute,
    is_quit,
    parse_command,
)
from minesweeper.config import GameConfig
from minesweeper.difficulty import Difficulty
from minesweeper.render import format_best_time, render
from minesweeper.session import SessionController, SessionState


def build_config(args: argparse.Namespace) -> GameConfig:
    """Environment settings, overridden by command-line flags."""
    config = GameConfig.from_env()
    if getattr(args, "difficulty", None):
        config.difficulty = Difficulty.from_name(args.difficulty)
    if getattr(args, "seed", None) is not None:
        config.seed = args.seed
    if getattr(args, "data_file", None):
        config.data_file = Path(args.data_file).expanduser()
    return config


def run_loop(controller: SessionController) -> None:
    """
    Read commands from the terminal until quit or end of input.

    Wall-clock seconds are turned into one-second ticks between commands.
    The tick origin moves to the moment of the first accepted open, and
    leftover fractions of a second carry over to the next command.
    """
    last_tick = time.monotonic()
    while True:
        print(render(controller))
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        whole_seconds = int(time.monotonic() - last_tick)
        for _ in range(whole_seconds):
            controller.tick()
        last_tick += whole_seconds

        try:
            command = parse_command(line)
        except CommandError as error:
            print(error)
            continue
        if is_quit(command):
            break

        was_started = controller.state is not SessionState.NOT_STARTED
        try:
            message = execute(controller, command)
        except CommandError as error:
            print(error)
            continue
        if not was_started and controller.state is not SessionState.NOT_STARTED:
            last_tick = time.monotonic()
        if message:
            print(message)
        print()


def play(args: argparse.Namespace) -> None:
    """Run an interactive game in the terminal."""
    controller = SessionController.from_config(build_config(args))
    print("Type h for help.\n")
    run_loop(controller)


def show_best_times(args: argparse.Namespace) -> None:
    """Print stored best times for every difficulty."""
    store = BestTimesStore(build_config(args).data_file)
    best_times = store.load()

    print(f"{'Difficulty':<14} {'Best':>6}")
    print("-" * 21)
    for difficulty in Difficulty:
        print(f"{difficulty.label:<14} {format_best_time(best_times.get(difficulty)):>6}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log game events"
    )

    # Options shared by every subcommand. SUPPRESS keeps a flag given
    # before the subcommand from being reset by the subparser default.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose", "-v", action="store_true", default=argparse.SUPPRESS,
        help="Log game events",
    )
    common.add_argument(
        "--data-file", default=None, help="Best times JSON file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", parents=[common], help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Starting difficulty (default: intermediate)",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Best times command
    subparsers.add_parser("best-times", parents=[common], help="Show best times")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "best-times":
        show_best_times(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
