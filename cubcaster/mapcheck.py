"""Checks of the map part of a scene and location of the player."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .scene import is_blank

CUB = 10
"""Size of one map cell in world units."""

ROTATION_SPEED = math.pi / 180
"""Angle turned by one rotation step."""

MAP_CHARACTERS = "10 NSEW"
PLAYER_CHARACTERS = "NSEW"
BORDER_CHARACTERS = " 1"

_ANGLES = {
    "S": math.pi / 2,
    "N": (3 * math.pi) / 2,
    "W": math.pi,
    "E": 0.0,
}


class MapError(ValueError):
    """Raised when the map of a scene is not valid."""


@dataclass
class Level:
    """A validated map with the player's start position and direction."""

    grid: list[str]
    player: str
    x: float
    y: float
    direction: float
    rotation_speed: float = ROTATION_SPEED

    @property
    def rows(self) -> int:
        """Number of rows of the map."""
        return len(self.grid)

    @property
    def columns(self) -> int:
        """Length of every row of the map."""
        return len(self.grid[0]) if self.grid else 0


def trim_map(lines: Sequence[str]) -> list[str]:
    """Drop the blank lines that follow the last line of the map."""
    last = next(
        (i for i in range(len(lines) - 1, -1, -1) if lines[i] and not is_blank(lines[i])),
        -1,
    )
    return list(lines[: last + 1])


def pad_rows(rows: Sequence[str]) -> list[str]:
    """Pad every row with spaces to the length of the longest one."""
    width = max((len(row) for row in rows), default=0)
    return [row.ljust(width) for row in rows]


def has_only(line: str, allowed: str) -> bool:
    """Tell whether every character of line is in allowed."""
    return all(char in allowed for char in line)


def check_borders(grid: Sequence[str]) -> bool:
    """Tell whether the map is closed by walls on its outer edges."""
    if not grid:
        return False
    if not has_only(grid[0], BORDER_CHARACTERS):
        return False
    if not has_only(grid[-1], BORDER_CHARACTERS):
        return False
    for row in grid[1:-1]:
        left = row.lstrip(" ")
        right = row.rstrip(" ")
        if not left or left[0] != "1" or not right or right[-1] != "1":
            return False
    return True


def _cell(grid: Sequence[str], i: int, j: int) -> str:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return " "


def _neighbours(grid: Sequence[str], i: int, j: int) -> list[str]:
    return [
        _cell(grid, i, j - 1),
        _cell(grid, i, j + 1),
        _cell(grid, i - 1, j),
        _cell(grid, i + 1, j),
    ]


def check_interior(grid: Sequence[str]) -> bool:
    """Tell whether no open cell of the inner rows touches empty space."""
    for i in range(1, len(grid) - 1):
        row = grid[i]
        start = len(row) - len(row.lstrip(" "))
        end = len(row.rstrip(" ")) - 1
        for j in range(start, end):
            cell = row[j]
            around = _neighbours(grid, i, j)
            if cell == " " and any(c not in BORDER_CHARACTERS for c in around):
                return False
            if (cell == "0" or cell in PLAYER_CHARACTERS) and " " in around:
                return False
    return True


def find_player(grid: Sequence[str]) -> tuple[str, int, int]:
    """Return the player's (character, column, row); there must be one."""
    found = [
        (cell, j, i)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell in PLAYER_CHARACTERS
    ]
    if len(found) != 1:
        raise MapError("invalid map")
    return found[0]


def start_angle(player: str) -> float:
    """Return the view angle for a player character N, S, E or W."""
    try:
        return _ANGLES[player]
    except KeyError:
        raise ValueError(f"not a player character: {player!r}") from None


def validate_map(lines: Sequence[str]) -> Level:
    """Check the map lines of a scene and build the level they describe."""
    grid = pad_rows(trim_map(lines))
    if not grid:
        raise MapError("missing map")
    if not all(has_only(row, MAP_CHARACTERS) for row in grid):
        raise MapError("invalid map characters")
    if not check_borders(grid) or not check_interior(grid):
        raise MapError("invalid map")
    player, column, row = find_player(grid)
    grid[row] = grid[row][:column] + "0" + grid[row][column + 1:]
    return Level(
        grid=grid,
        player=player,
        x=float(column * CUB + CUB // 2),
        y=float(row * CUB + CUB // 2),
        direction=start_angle(player),
    )