"""Player movement and the state of the movement keys."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from .mapcheck import CUB, ROTATION_SPEED
from .raycast import normalize_angle

STEP = 1.0
"""Distance moved by one movement step."""

TURN_LEFT = 1
TURN_RIGHT = 2


class Key(IntEnum):
    """Key codes that control the player."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 13
    ESC = 53
    ROTATE_LEFT = 123
    ROTATE_RIGHT = 124


def hits_wall(grid: Sequence[str], px: float, py: float, y: float, x: float) -> bool:
    """Tell whether a player at (px, py) may not step to (x, y).

    A step is refused into a wall cell, and into a diagonal neighbour cell
    when it would squeeze between two walls or leave through the map edge.
    """
    x_wall = int(x / CUB)
    y_wall = int(y / CUB)
    if not (0 <= y_wall < len(grid) and 0 <= x_wall < len(grid[y_wall])):
        return True
    if grid[y_wall][x_wall] == "1":
        return True
    if x_wall == int(px / CUB) or y_wall == int(py / CUB):
        return False
    rows = len(grid)
    columns = len(grid[y_wall])
    if y_wall == 0 or x_wall == 0 or y_wall + 1 == rows or x_wall + 1 == columns:
        return True
    beside = grid[y_wall][x_wall - 1] == "1" or grid[y_wall][x_wall + 1] == "1"
    over = grid[y_wall - 1][x_wall] == "1" or grid[y_wall + 1][x_wall] == "1"
    return beside and over


@dataclass
class Player:
    """Position and view direction of the player in world units."""

    x: float
    y: float
    direction: float
    rotation_speed: float = ROTATION_SPEED

    def _step_to(self, grid: Sequence[str], x: float, y: float) -> bool:
        if hits_wall(grid, self.x, self.y, y, x):
            return False
        self.x, self.y = x, y
        return True

    def move_up(self, grid: Sequence[str]) -> bool:
        """Step forward; return whether the player moved."""
        return self._step_to(
            grid,
            self.x + STEP * math.cos(self.direction),
            self.y + STEP * math.sin(self.direction),
        )

    def move_down(self, grid: Sequence[str]) -> bool:
        """Step backward; return whether the player moved."""
        return self._step_to(
            grid,
            self.x - STEP * math.cos(self.direction),
            self.y - STEP * math.sin(self.direction),
        )

    def move_left(self, grid: Sequence[str]) -> bool:
        """Step sideways to the left; return whether the player moved."""
        return self._step_to(
            grid,
            self.x + STEP * math.sin(self.direction),
            self.y - STEP * math.cos(self.direction),
        )

    def move_right(self, grid: Sequence[str]) -> bool:
        """Step sideways to the right; return whether the player moved."""
        return self._step_to(
            grid,
            self.x - STEP * math.sin(self.direction),
            self.y + STEP * math.cos(self.direction),
        )

    def rotate(self, direction: int) -> None:
        """Turn by one step: TURN_LEFT or TURN_RIGHT; other values do nothing."""
        if direction == TURN_LEFT:
            self.direction = normalize_angle(self.direction - self.rotation_speed)
        elif direction == TURN_RIGHT:
            self.direction = normalize_angle(self.direction + self.rotation_speed)


_PRESSED = {
    Key.UP: ("y", 1),
    Key.DOWN: ("y", -1),
    Key.LEFT: ("x", 1),
    Key.RIGHT: ("x", -1),
    Key.ROTATE_LEFT: ("pov", 1),
    Key.ROTATE_RIGHT: ("pov", -1),
}


def _as_key(code: int) -> Key | None:
    try:
        return Key(code)
    except ValueError:
        return None


@dataclass
class KeyState:
    """Which movement keys are held: -1, 0 or 1 on each axis."""

    x: int = 0
    y: int = 0
    pov: int = 0

    def press(self, key: int) -> bool:
        """Record a key press; return False when the game should quit."""
        key = _as_key(key)
        if key is Key.ESC:
            return False
        if key is not None:
            axis, value = _PRESSED[key]
            setattr(self, axis, value)
        return True

    def release(self, key: int) -> bool:
        """Record a key release; return False when the game should quit."""
        key = _as_key(key)
        if key is Key.ESC:
            return False
        if key is not None:
            axis, _ = _PRESSED[key]
            setattr(self, axis, 0)
        return True

    def apply(self, player: Player, grid: Sequence[str]) -> None:
        """Perform the one action of highest priority among the held keys."""
        if self.pov == 1:
            player.rotate(TURN_LEFT)
        elif self.pov == -1:
            player.rotate(TURN_RIGHT)
        elif self.y == 1:
            player.move_up(grid)
        elif self.y == -1:
            player.move_down(grid)
        elif self.x == 1:
            player.move_left(grid)
        elif self.x == -1:
            player.move_right(grid)