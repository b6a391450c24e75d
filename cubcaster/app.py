"""Loading of a scene and the game window that shows it."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import Optional, Sequence

from .elements import ElementError, validate_colors, validate_textures
from .mapcheck import Level, MapError, validate_map
from .player import Key, KeyState, Player
from .raycast import FrameBuffer, WallTextures, render_minimap, render_view, rgb_to_int
from .scene import SceneError, parse_scene
from .xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

WINDOW_WIDTH = 1700 // 2
WINDOW_HEIGHT = 1000 // 2
WINDOW_TITLE = "Cub3D"
MINIMAP_TEXTURE = "./textures/minimap.xpm"
MINIMAP_OFFSET = (-20, -20)
FRAME_RATE = 60
USAGE = "Usage : cubcaster /maps/<map name>"

_ALPHA_MASK = 0xFF000000


@dataclass
class GameConfig:
    """Everything a validated scene file describes."""

    level: Level
    ceiling: tuple[int, int, int]
    floor: tuple[int, int, int]
    textures: dict[str, str] = field(default_factory=dict)


def load_config(path: str | PathLike[str], check_exists: bool = True) -> GameConfig:
    """Read a .cub file and check its colours, textures and map.

    Raises SceneError, ElementError or MapError when the scene is invalid.
    """
    scene = parse_scene(path)
    ceiling, floor = validate_colors(scene)
    textures = validate_textures(scene, check_exists)
    level = validate_map(scene.map_lines)
    return GameConfig(level=level, ceiling=ceiling, floor=floor, textures=textures)


def _load_wall_textures(paths: dict[str, str]) -> WallTextures:
    return WallTextures(
        north=load_xpm(paths["north"]),
        south=load_xpm(paths["south"]),
        east=load_xpm(paths["east"]),
        west=load_xpm(paths["west"]),
    )


class Game:
    """The state of a running game and the frame it draws."""

    def __init__(
        self,
        config: GameConfig,
        textures: WallTextures,
        minimap: Optional[XpmImage] = None,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.config = config
        self.grid = config.level.grid
        level = config.level
        self.player = Player(level.x, level.y, level.direction, level.rotation_speed)
        self.keys = KeyState()
        self.textures = textures
        self.minimap = minimap
        self.frame = FrameBuffer(width, height)
        self.ceiling = rgb_to_int(config.ceiling)
        self.floor = rgb_to_int(config.floor)

    def _overlay_minimap(self) -> None:
        if self.minimap is None:
            return
        left, top = MINIMAP_OFFSET
        for y in range(self.minimap.height):
            row = y + top
            if not 0 <= row < self.frame.height:
                continue
            for x in range(self.minimap.width):
                column = x + left
                if not 0 <= column < self.frame.width:
                    continue
                color = self.minimap.pixel(x, y)
                if color & _ALPHA_MASK != TRANSPARENT:
                    self.frame.put(column, row, color)

    def render(self) -> FrameBuffer:
        """Draw the view, the minimap and its frame image; return the frame."""
        render_view(
            self.frame,
            self.grid,
            self.player.x,
            self.player.y,
            self.player.direction,
            self.textures,
            self.ceiling,
            self.floor,
        )
        render_minimap(self.frame, self.grid, self.player.x, self.player.y)
        self._overlay_minimap()
        return self.frame

    def step(self) -> FrameBuffer:
        """Apply the held keys once, then draw the new frame."""
        self.keys.apply(self.player, self.grid)
        return self.render()


def _frame_to_rgb(frame: FrameBuffer) -> bytes:
    pixels = frame.pixels
    data = bytearray(len(pixels) * 3)
    data[0::3] = bytes((p >> 16) & 0xFF for p in pixels)
    data[1::3] = bytes((p >> 8) & 0xFF for p in pixels)
    data[2::3] = bytes(p & 0xFF for p in pixels)
    return bytes(data)


def _run_window(game: Game) -> int:
    import pygame

    key_codes = {
        pygame.K_w: Key.UP,
        pygame.K_s: Key.DOWN,
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_LEFT: Key.ROTATE_LEFT,
        pygame.K_RIGHT: Key.ROTATE_RIGHT,
        pygame.K_ESCAPE: Key.ESC,
    }
    size = (game.frame.width, game.frame.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        def show(frame: FrameBuffer) -> None:
            surface = pygame.image.frombuffer(_frame_to_rgb(frame), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        show(game.render())
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                key = key_codes.get(getattr(event, "key", None))
                if key is None:
                    continue
                if event.type == pygame.KEYDOWN and not game.keys.press(key):
                    return 0
                if event.type == pygame.KEYUP and not game.keys.release(key):
                    return 0
            show(game.step())
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on the scene file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    try:
        config = load_config(args[0])
    except (SceneError, ElementError, MapError) as exc:
        print(exc)
        return 1
    try:
        minimap = load_xpm(MINIMAP_TEXTURE)
        textures = _load_wall_textures(config.textures)
    except XpmError as exc:
        print(exc)
        return 1
    return _run_window(Game(config, textures, minimap))


if __name__ == "__main__":
    sys.exit(main())