"""Command implementations for the puzzle solver CLI."""

from advent_puzzles.commands.calibrate import add_calibrate_parser, run_calibrate
from advent_puzzles.commands.cubes import add_cubes_parser, run_cubes

__all__ = ["add_calibrate_parser", "add_cubes_parser", "run_calibrate", "run_cubes"]
