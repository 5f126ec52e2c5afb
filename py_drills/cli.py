"""
Command line entry point.

Usage:
    py-drills [--log-level LEVEL] [--log-format FORMAT] [--seed N] <command>

Commands:
    calculator     - Apply + - * or / to two numbers
    three-numbers  - Echo three integers
    ball-drop      - Height of a ball dropped from a tower
    age            - Which of two people is older
    guess          - Number guessing game
    draw           - Print random integers from an inclusive range
    histogram      - Tally many draws and report how uniform they are
"""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import settings
from .core import ages, ball_drop, calculator, echo
from .core.guessing_game import GameOptions, GuessingGame
from .core.random_source import SUPPORTED_DTYPES, RandomSource
from .core.uniformity import tally_draws
from .exceptions import DrillsError
from .utils.console import Console
from .utils.logging import configure_logging
from .utils.random import get_random_source, set_random_source

logger = structlog.get_logger()

DTYPE_CHOICES = ["int"] + [dt.name for dt in SUPPORTED_DTYPES]


def _seed(value: str) -> int:
    seed = int(value)
    if seed < 0:
        raise argparse.ArgumentTypeError(f"seed must be non-negative, got {seed}")
    return seed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="py-drills",
        description="Small console exercises built around a seeded random source",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: from settings)")
    parser.add_argument(
        "--log-format", choices=["console", "json"], default=None, help="Log renderer"
    )
    parser.add_argument("--seed", type=_seed, default=None, help="Fixed seed for reproducible draws")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("calculator", help="Apply + - * or / to two numbers")
    sub.add_parser("three-numbers", help="Echo three integers")
    sub.add_parser("ball-drop", help="Height of a ball dropped from a tower")
    sub.add_parser("age", help="Which of two people is older")

    guess = sub.add_parser("guess", help="Number guessing game")
    guess.add_argument("--min", dest="min_value", type=int, default=settings.guess_min)
    guess.add_argument("--max", dest="max_value", type=int, default=settings.guess_max)
    guess.add_argument("--tries", dest="max_guesses", type=int, default=settings.max_guesses)

    draw = sub.add_parser("draw", help="Print random integers from an inclusive range")
    draw.add_argument("min", type=int, help="Lower bound (inclusive)")
    draw.add_argument("max", type=int, help="Upper bound (inclusive)")
    draw.add_argument("--count", type=int, default=1, help="Number of values to draw")
    draw.add_argument("--dtype", choices=DTYPE_CHOICES, default="int", help="Result type")

    histogram = sub.add_parser("histogram", help="Tally draws and report uniformity")
    histogram.add_argument("min", type=int, help="Lower bound (inclusive)")
    histogram.add_argument("max", type=int, help="Upper bound (inclusive)")
    histogram.add_argument("--draws", type=int, default=1_000_000, help="Number of draws")

    return parser.parse_args(argv)


def _run_draw(args: argparse.Namespace, source: RandomSource, console: Console) -> None:
    dtype = int if args.dtype == "int" else args.dtype
    for _ in range(args.count):
        console.print(str(source.get(args.min, args.max, dtype=dtype)))


def _run_histogram(args: argparse.Namespace, source: RandomSource, console: Console) -> None:
    tally = tally_draws(source, args.min, args.max, args.draws)
    for offset, count in enumerate(tally.counts):
        console.print(f"{tally.min_value + offset}: {int(count)}")
    console.print(f"draws: {tally.draws}")
    console.print(f"expected per value: {tally.expected:.1f}")
    console.print(f"chi-square: {tally.chi_square:.3f} ({len(tally.counts) - 1} degrees of freedom)")
    console.print(f"max relative deviation: {tally.max_relative_deviation:.4f}")
    console.print(f"out of range: {tally.out_of_range}")


def run(args: argparse.Namespace, console: Console) -> int:
    """Dispatch a parsed command. Returns the process exit status."""
    logger.debug("Running command", command=args.command)

    try:
        if args.seed is not None:
            set_random_source(RandomSource(args.seed))
        source = get_random_source()

        if args.command == "calculator":
            calculator.run(console)
        elif args.command == "three-numbers":
            echo.run(console)
        elif args.command == "ball-drop":
            ball_drop.run(console)
        elif args.command == "age":
            ages.run(console)
        elif args.command == "guess":
            options = GameOptions(args.min_value, args.max_value, args.max_guesses)
            GuessingGame(console, source, options).play()
        elif args.command == "draw":
            _run_draw(args, source, console)
        elif args.command == "histogram":
            _run_histogram(args, source, console)
    except (DrillsError, ValueError) as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_format)
    return run(args, Console())


if __name__ == "__main__":
    sys.exit(main())
