"""Ray casting of the first-person view and drawing of the minimap."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence, Tuple

from .mapcheck import CUB

FIELD_OF_VIEW = 60 * (math.pi / 180)
"""Horizontal angle covered by the view."""

MINIMAP_SIZE = 200
MINIMAP_CENTER = 150
MINIMAP_SCALE = 12.5
MINIMAP_RADIUS = 8
WALL_COLOR = 0x000000
PLAYER_COLOR = 0xFF0000
PLAYER_SIZE = 3

_COLOR_MASK = 0xFFFFFFFF

Point = Tuple[float, float]


class _Texture(Protocol):
    width: int
    height: int
    pixels: Sequence[int]


class FrameBuffer:
    """A width x height image of 32-bit pixel values stored row by row."""

    def __init__(self, width: int, height: int, background: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [background & _COLOR_MASK] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} frame"
            )
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column x, row y."""
        self.pixels[self._index(x, y)] = color & _COLOR_MASK

    def get(self, x: int, y: int) -> int:
        """Return the pixel at column x, row y."""
        return self.pixels[self._index(x, y)]


@dataclass(frozen=True)
class RayHit:
    """Where a ray meets a wall and which wall texture it shows."""

    x: float
    y: float
    distance: float
    x_offset: float
    side: str
    texture: Any


@dataclass(frozen=True)
class WallTextures:
    """The images drawn on walls, keyed by the side of the wall."""

    north: Any
    south: Any
    east: Any
    west: Any


def normalize_angle(ang: float) -> float:
    """Bring an angle into the range [0, 2*pi)."""
    ang = math.fmod(ang, 2 * math.pi)
    if ang < 0:
        ang += 2 * math.pi
    return ang


def is_up(ang: float) -> bool:
    """Tell whether a ray at this angle goes towards smaller y."""
    return math.pi <= ang <= 2 * math.pi


def is_left(ang: float) -> bool:
    """Tell whether a ray at this angle goes towards smaller x."""
    return math.pi / 2 <= ang <= (3 * math.pi) / 2


def rgb_to_int(rgb: Sequence[int]) -> int:
    """Pack (red, green, blue) into 0xRRGGBB."""
    red, green, blue = rgb
    return (red << 16) + (green << 8) + blue


def distance(px: float, py: float, x: float, y: float) -> float:
    """Euclidean distance from (px, py) to (x, y)."""
    return math.hypot(x - px, y - py)


def _march(
    grid: Sequence[str],
    x: float,
    y: float,
    step_x: float,
    step_y: float,
    bias_x: float,
    bias_y: float,
) -> Optional[Point]:
    while math.isfinite(x) and math.isfinite(y):
        column = math.floor((x - bias_x) / CUB)
        row = math.floor((y - bias_y) / CUB)
        if not (0 <= row < len(grid) and 0 <= column < len(grid[row])):
            return None
        if grid[row][column] == "1":
            return x, y
        x += step_x
        y += step_y
    return None


def horizontal_hit(
    grid: Sequence[str], px: float, py: float, ang: float
) -> Optional[Point]:
    """First wall met by the ray on a horizontal grid line, or None."""
    tangent = math.tan(ang)
    if tangent == 0:
        return None
    up = is_up(ang)
    left = is_left(ang)
    first_y = math.floor(py / CUB) * CUB
    if not up:
        first_y += CUB
    first_x = (first_y - py) / tangent + px
    step_y = -CUB if up else CUB
    step_x = CUB / tangent
    if (left and step_x > 0) or (not left and step_x < 0):
        step_x = -step_x
    return _march(grid, first_x, first_y, step_x, step_y, 0, 1 if up else 0)


def vertical_hit(
    grid: Sequence[str], px: float, py: float, ang: float
) -> Optional[Point]:
    """First wall met by the ray on a vertical grid line, or None."""
    tangent = math.tan(ang)
    up = is_up(ang)
    left = is_left(ang)
    first_x = math.floor(px / CUB) * CUB
    if not left:
        first_x += CUB
    first_y = py + (first_x - px) * tangent
    step_x = -CUB if left else CUB
    step_y = tangent * CUB
    if (up and step_y > 0) or (not up and step_y < 0):
        step_y = -step_y
    return _march(grid, first_x, first_y, step_x, step_y, 1 if left else 0, 0)


def cast_ray(
    grid: Sequence[str], px: float, py: float, ang: float, textures: WallTextures
) -> RayHit:
    """Cast one ray and return the nearer of its horizontal and vertical hits."""
    hor = horizontal_hit(grid, px, py, ang)
    ver = vertical_hit(grid, px, py, ang)
    hor_distance = distance(px, py, *hor) if hor else math.inf
    ver_distance = distance(px, py, *ver) if ver else math.inf
    if hor is not None and ver_distance > hor_distance:
        side = "north" if is_up(ang) else "south"
        x, y = hor
        return RayHit(x, y, hor_distance, math.fmod(x, CUB), side,
                      getattr(textures, side))
    side = "east" if is_left(ang) else "west"
    if ver is None:
        return RayHit(math.inf, math.inf, math.inf, 0.0, side, getattr(textures, side))
    x, y = ver
    return RayHit(x, y, ver_distance, math.fmod(y, CUB), side, getattr(textures, side))


def texture_color(
    texture: _Texture,
    y: float,
    wall_height: float,
    x_offset: float,
    screen_height: int,
) -> int:
    """Colour of the texture for screen row y of a wall slice.

    Rows are addressed with the texture width as stride; an index past the
    end of the image gives its last pixel.
    """
    row = int(y + wall_height / 2 - screen_height // 2)
    column = int((x_offset / CUB) * texture.width)
    row = int(row * (texture.height / wall_height))
    index = abs(row * texture.width + column)
    return texture.pixels[min(index, len(texture.pixels) - 1)]


def _slice_bounds(wall_height: float, height: int) -> tuple[int, int]:
    if not math.isfinite(wall_height):
        return 0, height
    half = height // 2
    start = max(int(half - wall_height / 2), 0)
    end = int(half + wall_height / 2)
    if end > height or end < 0:
        end = height
    return start, end


def render_view(
    frame: FrameBuffer,
    grid: Sequence[str],
    px: float,
    py: float,
    direction: float,
    textures: WallTextures,
    ceiling: int,
    floor: int,
) -> None:
    """Draw the first-person view, one column per ray.

    ceiling and floor are 0xRRGGBB colours.
    """
    height = frame.height
    angle = normalize_angle(direction - 30 * (math.pi / 180))
    increment = FIELD_OF_VIEW / frame.width
    for column in range(frame.width):
        hit = cast_ray(grid, px, py, angle, textures)
        cub_distance = hit.distance / CUB * math.cos(direction - angle)
        wall_height = height / cub_distance if cub_distance > 0 else math.inf
        start, end = _slice_bounds(wall_height, height)
        for row in range(start):
            frame.put(column, row, ceiling)
        for row in range(start, end):
            color = texture_color(hit.texture, row, wall_height, hit.x_offset, height)
            frame.put(column, row, color)
        for row in range(end, height):
            frame.put(column, row, floor)
        angle += increment


def _on_minimap(frame: FrameBuffer, row: int, column: int) -> bool:
    return (
        0 <= row < min(MINIMAP_SIZE, frame.height)
        and 0 <= column < min(MINIMAP_SIZE, frame.width)
    )


def _draw_wall_cell(frame: FrameBuffer, y: float, x: float) -> None:
    for row in range(int(y - 1) + 1, math.ceil(y + CUB)):
        for column in range(int(x - 1) + 1, math.ceil(x + CUB)):
            if not _on_minimap(frame, row, column):
                continue
            offset = math.hypot(
                row / MINIMAP_SCALE - MINIMAP_RADIUS,
                column / MINIMAP_SCALE - MINIMAP_RADIUS,
            )
            if offset < MINIMAP_RADIUS:
                frame.put(column, row, WALL_COLOR)


def _draw_player(frame: FrameBuffer, x: float, y: float) -> None:
    for row in range(int(y - 1) + 1, math.ceil(y + PLAYER_SIZE)):
        for column in range(int(x - 1) + 1, math.ceil(x + PLAYER_SIZE)):
            if _on_minimap(frame, row, column):
                frame.put(column, row, PLAYER_COLOR)


def render_minimap(frame: FrameBuffer, grid: Sequence[str], px: float, py: float) -> None:
    """Draw the walls around the player inside a round map in the top left."""
    dx = px - MINIMAP_CENTER
    dy = py - MINIMAP_CENTER
    for i, line in enumerate(grid):
        for j, cell in enumerate(line):
            if cell == "1":
                _draw_wall_cell(frame, i * CUB - dy, j * CUB - dx)
    _draw_player(frame, px - dx - 1, py - dy - 1)