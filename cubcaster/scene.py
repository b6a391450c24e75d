"""Reading of .cub scene descriptions: texture and colour lines plus a map."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from os import PathLike

WHITESPACE = " \t\n\v\f\r"

# Scene elements in the order they are looked for, with their line prefixes.
ELEMENT_PREFIXES = {
    "ceiling": "C",
    "floor": "F",
    "north": "NO",
    "south": "SO",
    "east": "EA",
    "west": "WE",
}


class SceneError(Exception):
    """Raised when a scene file cannot be read or is malformed."""


@dataclass
class Scene:
    """Raw element lines of a scene and the lines of its map."""

    north: str
    south: str
    west: str
    east: str
    floor: str
    ceiling: str
    map_lines: list[str] = field(default_factory=list)


def has_valid_extension(file_name: str) -> bool:
    """Tell whether everything after the first dot of the name is "cub"."""
    _, dot, extension = file_name.partition(".")
    return bool(dot) and extension == "cub"


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Read a file and return its lines without line feeds."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError("the scene file cannot be opened") from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def is_blank(line: str) -> bool:
    """Tell whether a line holds only whitespace."""
    return all(char in WHITESPACE for char in line)


def extract_metadata(
    lines: list[str],
) -> tuple[dict[str, tuple[int, str]], list[str]]:
    """Find the first line of each scene element.

    Returns a mapping of element name to (line index, line) and a copy of
    the lines in which the found lines are replaced by empty strings.
    """
    remaining = list(lines)
    found: dict[str, tuple[int, str]] = {}
    for name, prefix in ELEMENT_PREFIXES.items():
        index = next(
            (i for i, line in enumerate(remaining) if line.startswith(prefix)),
            None,
        )
        if index is None:
            raise SceneError("some of the scene elements are missing")
        found[name] = (index, remaining[index])
        remaining[index] = ""
    return found, remaining


def parse_scene_lines(lines: list[str]) -> Scene:
    """Split the lines of a scene file into its elements and its map."""
    if not lines:
        raise SceneError("the scene file is empty")
    found, remaining = extract_metadata(lines)
    prefixes = tuple(ELEMENT_PREFIXES.values())
    if any(line.startswith(prefixes) for line in remaining):
        raise SceneError("a scene element is given more than once")

    map_index = next((i for i, line in enumerate(remaining) if line), len(remaining))
    if any(map_index < index for index, _ in found.values()):
        raise SceneError("the map is above a scene element")

    start = next(
        (i for i in range(map_index, len(remaining)) if not is_blank(remaining[i])),
        None,
    )
    if start is None:
        raise SceneError("the map is missing")

    return Scene(
        north=found["north"][1],
        south=found["south"][1],
        west=found["west"][1],
        east=found["east"][1],
        floor=found["floor"][1],
        ceiling=found["ceiling"][1],
        map_lines=remaining[start:],
    )


def parse_scene(path: str | PathLike[str]) -> Scene:
    """Read and split a .cub scene file."""
    if not has_valid_extension(os.path.basename(os.fspath(path))):
        raise SceneError("check your file extension")
    return parse_scene_lines(read_lines(path))