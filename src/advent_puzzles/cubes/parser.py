"""Parse cube game records such as ``Game 1: 3 blue, 4 red; 1 red, 2 green``."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from advent_puzzles.cubes.models import CubeSet, Game

logger = logging.getLogger(__name__)

COLORS = ("red", "green", "blue")


def _parse_count(count_str: str, what: str) -> int:
    # Plain ASCII digits only; int() would also accept "+3", "3_0" and " 3"
    if not (count_str.isascii() and count_str.isdigit()):
        raise ValueError(f"Could not parse {what}: '{count_str}'")
    return int(count_str)


def parse_cube_set(text: str) -> CubeSet:
    """Parse a comma-separated list of ``<count> <color>`` pairs.

    Colors not mentioned are zero. A color given twice keeps its last count.

    Args:
        text: Set text, e.g. "3 blue, 4 red".

    Returns:
        The parsed CubeSet.

    Raises:
        ValueError: If a pair is malformed, the count is not a non-negative
            integer, or the color is unknown.
    """
    counts: dict[str, int] = {}
    for pair in text.split(","):
        count_str, sep, color = pair.strip().partition(" ")
        if not sep:
            raise ValueError(f"Could not parse set color pair: '{pair}'")

        count = _parse_count(count_str, "set count")
        if color not in COLORS:
            raise ValueError(f"Could not determine color, got: '{color}'")
        counts[color] = count

    return CubeSet(**counts)


def parse_cube_sets(text: str) -> tuple[CubeSet, ...]:
    """Parse semicolon-separated cube sets."""
    return tuple(parse_cube_set(set_text) for set_text in text.split(";"))


def parse_game(line: str) -> Game:
    """Parse a full game record.

    Args:
        line: Game line, e.g. "Game 12: 3 blue, 4 red; 2 green".

    Returns:
        The parsed Game.

    Raises:
        ValueError: If the header or any of the sets cannot be parsed.
    """
    header, sep, sets_text = line.partition(":")
    if not sep:
        raise ValueError(f"Could not parse input line into Game: '{line}'")

    _, sep, id_str = header.partition(" ")
    if not sep:
        raise ValueError(f"Could not split game id: '{header}'")

    game_id = _parse_count(id_str, "game id")
    return Game(id=game_id, sets=parse_cube_sets(sets_text))


def parse_games(lines: Iterable[str]) -> list[Game]:
    """Parse every line into a Game, stopping at the first invalid one."""
    games = [parse_game(line) for line in lines]
    logger.debug("Parsed %d game(s)", len(games))
    return games


def sum_possible_game_ids(lines: Iterable[str], bag: CubeSet) -> int:
    """Sum the ids of the games that could have been played with ``bag``.

    All lines are parsed before anything is summed, so one bad record fails the
    whole computation.

    Raises:
        ValueError: If any line is not a valid game record.
    """
    games = parse_games(lines)
    possible = [game for game in games if game.possible_with(bag)]
    logger.debug(
        "%d of %d game(s) possible with bag: %s", len(possible), len(games), bag
    )
    return sum(game.id for game in possible)
