import math

import pytest

from cubcaster.mapcheck import (
    CUB,
    Level,
    MapError,
    check_borders,
    check_interior,
    find_player,
    has_only,
    pad_rows,
    start_angle,
    trim_map,
    validate_map,
)

VALID = [
    "        1111111",
    "111111111000001",
    "1000000000N0001",
    "111111111111111",
]


def test_trim_map_drops_trailing_blank_lines():
    assert trim_map(["111", "1N1", "111", "", "   "]) == ["111", "1N1", "111"]


def test_trim_map_keeps_inner_blank_lines():
    assert trim_map(["111", "", "111"]) == ["111", "", "111"]


def test_pad_rows():
    padded = pad_rows(["1", "111", "11"])
    assert padded == ["1  ", "111", "11 "]
    assert len({len(row) for row in padded}) == 1


def test_has_only():
    assert has_only("1 1", " 1")
    assert not has_only("101", " 1")
    assert has_only("", " 1")


def test_check_borders_valid():
    assert check_borders(pad_rows(VALID))


@pytest.mark.parametrize(
    "grid",
    [
        ["101", "101", "111"],
        ["111", "101", "101"],
        ["111", "001", "111"],
        ["111", "100", "111"],
        ["111", "   ", "111"],
    ],
)
def test_check_borders_invalid(grid):
    assert not check_borders(grid)


def test_check_interior_valid():
    assert check_interior(pad_rows(VALID))


def test_check_interior_zero_next_to_space():
    assert not check_interior(["1111", "10 1", "1111"])


def test_check_interior_player_next_to_space():
    assert not check_interior(["11111", "1 N01", "11111"])


def test_check_interior_space_between_walls():
    assert check_interior(["11111", "11 11", "11111"])


def test_find_player():
    assert find_player(["111", "1W1", "111"]) == ("W", 1, 1)


@pytest.mark.parametrize("grid", [["111", "101", "111"], ["1111", "1NS1", "1111"]])
def test_find_player_requires_one(grid):
    with pytest.raises(MapError):
        find_player(grid)


def test_start_angle():
    assert start_angle("E") == 0
    assert start_angle("W") == math.pi
    assert start_angle("S") == math.pi / 2
    assert start_angle("N") == (3 * math.pi) / 2


def test_start_angle_unknown():
    with pytest.raises(ValueError):
        start_angle("X")


def test_validate_map_builds_level():
    level = validate_map(VALID + ["", "  "])
    assert isinstance(level, Level)
    assert level.player == "N"
    assert level.direction == start_angle("N")
    assert level.rows == 4
    assert level.columns == len(VALID[0])
    assert "N" not in "".join(level.grid)
    assert int(level.x // CUB) == 10
    assert int(level.y // CUB) == 2
    assert level.grid[2][10] == "0"
    assert level.y == 25.0


def test_validate_map_pads_short_rows():
    level = validate_map(["1111", "1E01", "111"])
    assert level.grid == ["1111", "1001", "111 "]


def test_validate_map_bad_characters():
    with pytest.raises(MapError, match="invalid map characters"):
        validate_map(["111", "1X1", "111"])


def test_validate_map_open_map():
    with pytest.raises(MapError, match="invalid map"):
        validate_map(["1111", "1N 1", "1111"])


def test_validate_map_missing_player():
    with pytest.raises(MapError, match="invalid map"):
        validate_map(["111", "101", "111"])


def test_validate_map_empty():
    with pytest.raises(MapError):
        validate_map(["", "   "])