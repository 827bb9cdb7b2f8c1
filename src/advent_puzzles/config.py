"""Command configuration built from parsed arguments."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from advent_puzzles.cubes import CubeSet, parse_cube_set

DEFAULT_BAG = "12 red, 13 green, 14 blue"


class ScanMode(str, Enum):
    """Which values count when extracting calibration values."""

    DIGITS = "digits"
    SPELLED = "spelled"

    @property
    def spelled(self) -> bool:
        return self is ScanMode.SPELLED


@dataclass
class CalibrateConfig:
    """Configuration for the calibrate command."""

    input_path: Path
    modes: list[ScanMode]
    workers: int = 1
    progress: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CalibrateConfig:
        """Create config from parsed arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            CalibrateConfig instance
        """
        if args.mode == "both":
            modes = [ScanMode.DIGITS, ScanMode.SPELLED]
        else:
            modes = [ScanMode(args.mode)]

        return cls(
            input_path=Path(args.input),
            modes=modes,
            workers=args.workers,
            progress=args.progress,
        )


@dataclass
class CubesConfig:
    """Configuration for the cubes command."""

    input_path: Path
    bag: CubeSet

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CubesConfig:
        """Create config from parsed arguments.

        Raises:
            ValueError: If --bag is not a valid cube set.
        """
        return cls(input_path=Path(args.input), bag=parse_cube_set(args.bag))
