"""Reading of XPM images used as wall textures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable

from .colornames import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour name "None"."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_HEX_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_DECIMAL_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read or decoded."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image"
            )
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split text into the words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    pieces: list[str] = []
    inside_quotes = False
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == '"':
            inside_quotes = not inside_quotes
        elif not inside_quotes and text.startswith(opener, pos):
            end = text.find(closer, pos + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            pieces.append(" " * (stop - pos))
            pos = stop
            continue
        pieces.append(char)
        pos += 1
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with
    the newline that ends them. The length of the text is unchanged.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def text_color(name: str, extra: str | None = None) -> int:
    """Decode a colour value: "#RRGGBB" or a colour name.

    When extra is given it is joined to the name with a space, so that
    two-word names such as "dark red" can be looked up. Unknown names
    give 0 and "None" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if extra:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(text: str) -> int:
    match = _DECIMAL_NUMBER.match(text)
    return int(match.group(1)) if match else 0


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then rows."""
    rows = iter(lines)
    header = next(rows, None)
    if header is None:
        raise XpmError("missing XPM header")
    words = split_words(header)
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {header!r}")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next(rows, None)
        if line is None:
            raise XpmError("missing XPM colour definition")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c': {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        extra = words[at + 1] if at + 1 < len(words) else None
        color = text_color(words[at], extra)
        if cpp <= 2:
            colors[key] = color
        else:
            colors.setdefault(key, color)

    pixels: list[int] = []
    row_length = width * cpp
    for _ in range(height):
        line = next(rows, None)
        if line is None:
            raise XpmError("missing XPM pixel row")
        if len(line) < row_length:
            raise XpmError(f"XPM pixel row too short: {line!r}")
        for start in range(0, row_length, cpp):
            color = colors.get(line[start:start + cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)