"""Input loading for puzzle files."""

import bz2
import gzip
import logging
import sys
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

STDIN_PATH = Path("-")


def open_puzzle_text(path: Path, encoding: str = "utf-8") -> TextIO:
    """Open a puzzle input file for reading as text.

    Files ending in .gz or .bz2 are decompressed transparently; anything else is
    read as plain text. Decoding is strict, so bytes that are not valid in
    ``encoding`` raise UnicodeDecodeError when read.
    """
    if path.suffix == ".bz2":
        return bz2.open(path, "rt", encoding=encoding)
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding=encoding)
    return open(path, encoding=encoding)


def read_lines(path: Path) -> list[str]:
    """Read puzzle input as a list of lines without line terminators.

    A trailing newline does not produce an extra empty line. The path "-" reads
    from stdin.

    Args:
        path: Input file path, possibly .gz or .bz2 compressed, or "-".

    Returns:
        The lines of the input.

    Raises:
        OSError: If the file cannot be opened (e.g. it is a directory).
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if path == STDIN_PATH:
        text = sys.stdin.read()
    else:
        with open_puzzle_text(path) as f:
            text = f.read()

    lines = text.splitlines()
    logger.debug("Read %d line(s) from %s", len(lines), path)
    return lines
