"""Calibrate command: sum the calibration values of an input file."""

import argparse
import logging

from advent_puzzles.calibration import sum_calibration_values
from advent_puzzles.config import CalibrateConfig
from advent_puzzles.io import STDIN_PATH, read_lines

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def add_calibrate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add calibrate subcommand parser.

    Args:
        subparsers: The subparsers action from argparse.
    """
    calibrate_parser = subparsers.add_parser(
        "calibrate", help="Sum the calibration values of each input line."
    )
    calibrate_parser.add_argument(
        "input",
        help="Puzzle input file (plain, .gz or .bz2), or '-' for stdin.",
    )
    calibrate_parser.add_argument(
        "--mode",
        choices=["digits", "spelled", "both"],
        default="both",
        help=(
            "Which values count: literal digits only, digits and spelled-out "
            "words, or report both sums (default: both)."
        ),
    )
    calibrate_parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="Number of worker processes used to scan lines (default: 1).",
    )
    calibrate_parser.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show a progress bar when scanning with worker processes.",
    )


def run_calibrate(args: argparse.Namespace) -> int:
    """Execute the calibrate command.

    Args:
        args: Parsed command-line arguments for the calibrate command.

    Returns:
        Exit code: 0 on success, 1 if a line has no value or the input is not
        valid UTF-8, 2 if the input is missing or unreadable.
    """
    config = CalibrateConfig.from_args(args)
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
    logger.info("Calibrating %d line(s) from %s", len(lines), config.input_path)

    for mode in config.modes:
        try:
            total = sum_calibration_values(
                lines,
                spelled=mode.spelled,
                workers=config.workers,
                progress=config.progress,
            )
        except ValueError as e:
            logger.error("Calibration (%s) failed: %s", mode.value, e)
            return 1
        print(f"Calibration sum ({mode.value}): {total}")

    return 0
