"""Cubes command: sum the ids of games possible with a given bag."""

import argparse
import logging

from advent_puzzles.config import DEFAULT_BAG, CubesConfig
from advent_puzzles.cubes import sum_possible_game_ids
from advent_puzzles.io import STDIN_PATH, read_lines

logger = logging.getLogger(__name__)


def add_cubes_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add cubes subcommand parser.

    Args:
        subparsers: The subparsers action from argparse.
    """
    cubes_parser = subparsers.add_parser(
        "cubes", help="Sum the ids of cube games possible with a bag."
    )
    cubes_parser.add_argument(
        "input",
        help="Game records file (plain, .gz or .bz2), or '-' for stdin.",
    )
    cubes_parser.add_argument(
        "--bag",
        default=DEFAULT_BAG,
        help=f"Bag contents to test each game against (default: '{DEFAULT_BAG}').",
    )


def run_cubes(args: argparse.Namespace) -> int:
    """Execute the cubes command.

    Args:
        args: Parsed command-line arguments for the cubes command.

    Returns:
        Exit code: 0 on success, 1 on invalid records, bag or encoding, 2 if the
        input is missing or unreadable.
    """
    try:
        config = CubesConfig.from_args(args)
    except ValueError as e:
        logger.error("Invalid --bag: %s", e)
        return 1

    if config.input_path != STDIN_PATH and not config.input_path.exists():
        logger.error("File not found: %s", config.input_path)
        return 2

    try:
        lines = read_lines(config.input_path)
    except OSError as e:
        logger.error("Could not read %s: %s", config.input_path, e)
        return 2
    except ValueError as e:
        logger.error("Could not decode %s: %s", config.input_path, e)
        return 1
    logger.info("Checking %d game(s) against bag: %s", len(lines), config.bag)

    try:
        total = sum_possible_game_ids(lines, config.bag)
    except ValueError as e:
        logger.error("Could not parse games: %s", e)
        return 1

    print(f"Possible game id sum: {total}")
    return 0
