"""Calibration value extraction from lines of text."""

from advent_puzzles.calibration.calibration import (
    calibration_value,
    sum_calibration_values,
)
from advent_puzzles.calibration.digit_words import (
    DIGIT_WORDS,
    DigitWord,
    ScanDirection,
    words_with_edge,
)
from advent_puzzles.calibration.errors import (
    AggregationFailedError,
    NoValueFoundError,
)
from advent_puzzles.calibration.scanner import (
    find_backward,
    find_forward,
    find_value,
)

__all__ = [
    "AggregationFailedError",
    "calibration_value",
    "DIGIT_WORDS",
    "DigitWord",
    "find_backward",
    "find_forward",
    "find_value",
    "NoValueFoundError",
    "ScanDirection",
    "sum_calibration_values",
    "words_with_edge",
]
