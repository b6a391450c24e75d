"""Checks of the colour and texture elements of a scene."""

from __future__ import annotations

import os

from .scene import WHITESPACE, Scene

TEXTURE_SUFFIX = ".xpm"


class ElementError(ValueError):
    """Raised when a colour or texture element is malformed."""


def parse_rgb(line: str) -> tuple[int, int, int]:
    """Decode a colour line such as "F 220,100,0" into its three channels.

    The identifier must be followed by a space, the value must hold exactly
    two commas and three decimal numbers between 0 and 255.
    """
    if len(line) < 2 or line[1] != " ":
        raise ElementError(f"no space after the identifier: {line!r}")
    value = line[1:].strip(" ")
    if value.count(",") != 2:
        raise ElementError(f"a colour needs three comma separated values: {line!r}")
    parts = [part for part in value.split(",") if part]
    for part in parts:
        if not part.isascii() or not part.isdigit() or int(part) > 255:
            raise ElementError(f"invalid colour channel {part!r} in {line!r}")
    if len(parts) != 3:
        raise ElementError(f"a colour needs three values: {line!r}")
    red, green, blue = (int(part) for part in parts)
    return red, green, blue


def _can_open(path: str) -> bool:
    try:
        descriptor = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(descriptor)
    return True


def parse_texture_path(line: str, check_exists: bool = True) -> str:
    """Extract the texture path from a line such as "NO ./wall.xpm".

    The two-letter identifier must be followed by whitespace and the line
    must end with the only ".xpm" it holds. With check_exists the file must
    also be readable.
    """
    rest = line[2:]
    if not rest or rest[0] not in WHITESPACE:
        raise ElementError(f"no whitespace after the identifier: {line!r}")
    path = rest.lstrip(WHITESPACE).strip(" ")
    found = line.find(TEXTURE_SUFFIX)
    if found == -1 or len(path) <= len(TEXTURE_SUFFIX):
        raise ElementError(f"not an {TEXTURE_SUFFIX} texture: {line!r}")
    if len(line) - found > len(TEXTURE_SUFFIX):
        raise ElementError(f"the texture must end with {TEXTURE_SUFFIX}: {line!r}")
    if check_exists and not _can_open(path):
        raise ElementError(f"the texture cannot be opened: {path}")
    return path


def validate_colors(scene: Scene) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """Return the (ceiling, floor) colours of a scene."""
    try:
        ceiling = parse_rgb(scene.ceiling)
    except ElementError as exc:
        raise ElementError("check ceiling") from exc
    try:
        floor = parse_rgb(scene.floor)
    except ElementError as exc:
        raise ElementError("check floor") from exc
    return ceiling, floor


def validate_textures(scene: Scene, check_exists: bool = True) -> dict[str, str]:
    """Return the texture paths of a scene keyed by wall direction."""
    textures: dict[str, str] = {}
    for name in ("south", "north", "west", "east"):
        try:
            textures[name] = parse_texture_path(getattr(scene, name), check_exists)
        except ElementError as exc:
            raise ElementError(f"check {name} texture") from exc
    return textures