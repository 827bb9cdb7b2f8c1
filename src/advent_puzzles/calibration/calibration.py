"""Combine per-line scans into calibration values and sum them."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial

from tqdm.contrib.concurrent import process_map

from advent_puzzles.calibration.errors import (
    AggregationFailedError,
    NoValueFoundError,
)
from advent_puzzles.calibration.scanner import find_backward, find_forward

logger = logging.getLogger(__name__)


def calibration_value(line: str, *, spelled: bool = True) -> int:
    """Return the two-digit calibration value of a line.

    Args:
        line: A single line of puzzle input.
        spelled: Whether spelled-out digit words count as values.

    Returns:
        ``first * 10 + last`` where first and last are the line's first and last
        values.

    Raises:
        NoValueFoundError: If the line contains no value.
    """
    first = find_forward(line, spelled=spelled)
    if first is None:
        raise NoValueFoundError(f"Could not find first value in line: {line!r}")

    last = find_backward(line, spelled=spelled)
    if last is None:
        raise NoValueFoundError(f"Could not find last value in line: {line!r}")

    return first * 10 + last


def _numbered_calibration_value(numbered_line: tuple[int, str], spelled: bool) -> int:
    line_number, line = numbered_line
    try:
        return calibration_value(line, spelled=spelled)
    except NoValueFoundError as e:
        raise AggregationFailedError(f"Line {line_number}: {e}") from e


def sum_calibration_values(
    lines: Sequence[str],
    *,
    spelled: bool = True,
    workers: int = 1,
    progress: bool = False,
) -> int:
    """Sum the calibration values of every line.

    The first line without a value aborts the whole sum.

    Args:
        lines: Lines of puzzle input.
        spelled: Whether spelled-out digit words count as values.
        workers: Number of worker processes. 1 scans lines in this process.
        progress: Show a progress bar when using worker processes.

    Returns:
        The sum of all calibration values.

    Raises:
        AggregationFailedError: If any line has no value.
    """
    numbered_lines = list(enumerate(lines, start=1))
    value_of = partial(_numbered_calibration_value, spelled=spelled)

    if workers > 1:
        values = process_map(
            value_of,
            numbered_lines,
            desc="Calibrating",
            unit="line",
            max_workers=workers,
            chunksize=max(1, len(numbered_lines) // (workers * 4)),
            disable=not progress,
        )
    else:
        values = [value_of(numbered_line) for numbered_line in numbered_lines]

    total = sum(values)
    logger.debug(
        "Summed %d calibration values (spelled=%s): %d", len(values), spelled, total
    )
    return total
