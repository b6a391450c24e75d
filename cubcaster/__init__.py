"""A grid-based raycasting engine that loads .cub scene files and renders a first-person view."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "colornames",
    "elements",
    "mapcheck",
    "player",
    "raycast",
    "scene",
    "xpm",
]