import pytest

from advent_puzzles.cubes import (
    CubeSet,
    parse_cube_set,
    parse_cube_sets,
    parse_game,
    parse_games,
    sum_possible_game_ids,
)

EXAMPLE_GAMES = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]

BAG = CubeSet(red=12, green=13, blue=14)


class TestParseCubeSet:
    """Test parse_cube_set() with valid and invalid pair lists."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("3 blue, 4 red", CubeSet(red=4, green=0, blue=3)),
            ("1 red, 2 green, 6 blue", CubeSet(red=1, green=2, blue=6)),
            ("1 red, 20 green, 6 blue", CubeSet(red=1, green=20, blue=6)),
            ("  2 green  ", CubeSet(green=2)),
        ],
    )
    def test_valid_sets(self, text: str, expected: CubeSet) -> None:
        assert parse_cube_set(text) == expected

    def test_repeated_color_keeps_last_count(self) -> None:
        assert parse_cube_set("1 red, 5 red") == CubeSet(red=5)

    def test_missing_space(self) -> None:
        with pytest.raises(ValueError, match="Could not parse set color pair"):
            parse_cube_set("3blue")

    def test_empty_text(self) -> None:
        with pytest.raises(ValueError, match="Could not parse set color pair"):
            parse_cube_set("")

    @pytest.mark.parametrize("text", ["x red", "-1 red", "+3 red", "1.5 blue"])
    def test_invalid_count(self, text: str) -> None:
        with pytest.raises(ValueError, match="Could not parse set count"):
            parse_cube_set(text)

    def test_unknown_color(self) -> None:
        with pytest.raises(ValueError, match="got: 'purple'"):
            parse_cube_set("3 purple")


def test_parse_cube_sets() -> None:
    assert parse_cube_sets("3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green") == (
        CubeSet(red=4, blue=3),
        CubeSet(red=1, green=2, blue=6),
        CubeSet(green=2),
    )


class TestParseGame:
    @pytest.mark.parametrize(
        ("line", "expected_id"),
        [
            (EXAMPLE_GAMES[0], 1),
            (EXAMPLE_GAMES[1], 2),
            ("Game 200: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue", 200),
        ],
    )
    def test_parses_game_id(self, line: str, expected_id: int) -> None:
        assert parse_game(line).id == expected_id

    def test_parses_sets(self) -> None:
        game = parse_game(EXAMPLE_GAMES[0])
        assert game.sets == (
            CubeSet(red=4, blue=3),
            CubeSet(red=1, green=2, blue=6),
            CubeSet(green=2),
        )

    def test_missing_colon(self) -> None:
        with pytest.raises(ValueError, match="Could not parse input line into Game"):
            parse_game("Game 1 3 blue")

    def test_missing_id(self) -> None:
        with pytest.raises(ValueError, match="Could not split game id"):
            parse_game("Game: 3 blue")

    def test_non_numeric_id(self) -> None:
        with pytest.raises(ValueError, match="Could not parse game id: 'one'"):
            parse_game("Game one: 3 blue")

    def test_bad_set_propagates(self) -> None:
        with pytest.raises(ValueError, match="Could not determine color"):
            parse_game("Game 1: 3 blue; 4 yellow")


class TestPossibleGames:
    @pytest.mark.parametrize(
        ("draw", "bag", "expected"),
        [
            ("3 blue, 4 red", "1 blue", False),
            ("3 blue, 4 red", "5 blue, 4 red", True),
            ("1 green", "2 blue, 6 red, 5 green", True),
            ("3 blue, 4 red", "1 green, 3 blue", False),
            ("3 blue, 4 red", "3 blue, 4 red", True),
        ],
    )
    def test_set_is_possible_with(self, draw: str, bag: str, expected: bool) -> None:
        assert parse_cube_set(draw).possible_with(parse_cube_set(bag)) is expected

    def test_game_is_possible_with(self) -> None:
        assert parse_game(EXAMPLE_GAMES[0]).possible_with(BAG)
        # 20 red cubes in the first set
        assert not parse_game(EXAMPLE_GAMES[2]).possible_with(BAG)

    def test_sum_possible_game_ids(self) -> None:
        assert sum_possible_game_ids(EXAMPLE_GAMES, BAG) == 8

    def test_sum_fails_on_bad_line(self) -> None:
        with pytest.raises(ValueError, match="Could not parse input line into Game"):
            sum_possible_game_ids([*EXAMPLE_GAMES, ""], BAG)

    def test_parse_games_keeps_order(self) -> None:
        assert [game.id for game in parse_games(EXAMPLE_GAMES)] == [1, 2, 3, 4, 5]
