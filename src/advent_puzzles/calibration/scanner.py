"""
Streaming scanner for the first or last numeric value in a line.

A value is either a literal ASCII digit or a digit spelled out as a word
("one".."nine"). Spelled words may share letters ("eightwo", "twone"), so
every partially matched word is tracked independently as a candidate.

Design
------
- One algorithm serves both directions; ``ScanDirection`` selects the
  iteration order over the line and which end of each word is matched first
- A candidate is a ``(word, matched)`` tuple; the list of live candidates is
  rebuilt at every character
- Literal digits return immediately, even if a spelled word would complete on
  the same character
"""

from __future__ import annotations

from collections.abc import Iterable

from advent_puzzles.calibration.digit_words import (
    DigitWord,
    ScanDirection,
    words_with_edge,
)

ASCII_DIGITS = frozenset("0123456789")

# (digit word, number of its characters matched so far)
_Candidate = tuple[DigitWord, int]


def find_value(
    line: str,
    direction: ScanDirection = ScanDirection.FORWARD,
    *,
    spelled: bool = True,
) -> int | None:
    """Return the first value met when scanning ``line`` in ``direction``.

    Args:
        line: Text to scan.
        direction: FORWARD finds the first value in the line, BACKWARD the last.
        spelled: When False only literal digits count.

    Returns:
        The value (0-9), or None if the line contains no value.

    Examples:
        >>> find_value("xtwone3four")
        2
        >>> find_value("xtwone3four", ScanDirection.BACKWARD)
        4
        >>> find_value("xtwone3four", spelled=False)
        3
        >>> find_value("abc") is None
        True
    """
    chars: Iterable[str] = (
        line if direction is ScanDirection.FORWARD else reversed(line)
    )

    candidates: list[_Candidate] = []
    for char in chars:
        if char in ASCII_DIGITS:
            return int(char)
        if not spelled:
            continue

        advanced: list[_Candidate] = []
        for word, matched in candidates:
            if word.char_at(matched, direction) != char:
                continue
            matched += 1
            if matched == len(word):
                return word.value
            advanced.append((word, matched))

        for word in words_with_edge(char, direction):
            advanced.append((word, 1))

        candidates = advanced

    return None


def find_forward(line: str, *, spelled: bool = True) -> int | None:
    """Return the first value in ``line``, or None."""
    return find_value(line, ScanDirection.FORWARD, spelled=spelled)


def find_backward(line: str, *, spelled: bool = True) -> int | None:
    """Return the last value in ``line``, or None."""
    return find_value(line, ScanDirection.BACKWARD, spelled=spelled)
