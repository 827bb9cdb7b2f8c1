"""Main entry point for the puzzle solver CLI."""

import argparse
import logging
import sys

from advent_puzzles.commands.calibrate import add_calibrate_parser, run_calibrate
from advent_puzzles.commands.cubes import add_cubes_parser, run_cubes


def _setup_logging(log_level: str) -> None:
    """Configure logging based on level.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments with command and command-specific options.
    """
    parser = argparse.ArgumentParser(description="Solve calibration and cube puzzles.")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_calibrate_parser(subparsers)
    add_cubes_parser(subparsers)

    return parser.parse_args()


def main() -> int:
    """Main entry point for the puzzle solver.

    Routes to the appropriate subcommand handler.

    Returns:
        Exit code: 0 for success, non-zero on error.
    """
    args = _parse_args()
    _setup_logging(args.log_level)

    if args.command == "calibrate":
        return run_calibrate(args)
    elif args.command == "cubes":
        return run_cubes(args)
    else:
        print(
            "Error: No command specified. Use 'calibrate' or 'cubes'.",
            file=sys.stderr,
        )
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
