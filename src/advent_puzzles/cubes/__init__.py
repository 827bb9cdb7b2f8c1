"""Cube game records and bag capacity checks."""

from advent_puzzles.cubes.models import CubeSet, Game
from advent_puzzles.cubes.parser import (
    parse_cube_set,
    parse_cube_sets,
    parse_game,
    parse_games,
    sum_possible_game_ids,
)

__all__ = [
    "CubeSet",
    "Game",
    "parse_cube_set",
    "parse_cube_sets",
    "parse_game",
    "parse_games",
    "sum_possible_game_ids",
]
