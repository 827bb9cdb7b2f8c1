"""Spelled-out digit words and the scan directions used to match them."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum


class ScanDirection(Enum):
    """Direction a line is traversed in."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class DigitWord:
    """A digit written as an English word, e.g. ("seven", 7)."""

    text: str
    value: int

    def char_at(self, offset: int, direction: ScanDirection) -> str:
        """Return the character ``offset`` positions in from the scan-relevant end.

        Forward scans count from the first character, backward scans from the
        last one, so ``char_at(0, BACKWARD)`` is the word's final letter.
        """
        if direction is ScanDirection.FORWARD:
            return self.text[offset]
        return self.text[-1 - offset]

    def __len__(self) -> int:
        return len(self.text)


DIGIT_WORDS: tuple[DigitWord, ...] = (
    DigitWord("one", 1),
    DigitWord("two", 2),
    DigitWord("three", 3),
    DigitWord("four", 4),
    DigitWord("five", 5),
    DigitWord("six", 6),
    DigitWord("seven", 7),
    DigitWord("eight", 8),
    DigitWord("nine", 9),
)


def _index_by_edge(direction: ScanDirection) -> dict[str, tuple[DigitWord, ...]]:
    index: defaultdict[str, list[DigitWord]] = defaultdict(list)
    for word in DIGIT_WORDS:
        index[word.char_at(0, direction)].append(word)
    return {char: tuple(words) for char, words in index.items()}


_WORDS_BY_EDGE: dict[ScanDirection, dict[str, tuple[DigitWord, ...]]] = {
    direction: _index_by_edge(direction) for direction in ScanDirection
}


def words_with_edge(
    char: str, direction: ScanDirection = ScanDirection.FORWARD
) -> tuple[DigitWord, ...]:
    """Return the digit words a scan in ``direction`` can begin at ``char``.

    For a forward scan these are the words whose first letter is ``char``; for a
    backward scan, the words whose last letter is ``char``.

    Examples:
        >>> [w.text for w in words_with_edge("s")]
        ['six', 'seven']
        >>> [w.text for w in words_with_edge("e", ScanDirection.BACKWARD)]
        ['one', 'three', 'five', 'nine']
    """
    return _WORDS_BY_EDGE[direction].get(char, ())
