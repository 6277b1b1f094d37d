"""Reading XPM images, from files or from in-memory string tables."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike
from typing import Union

from .colornames import lookup_color

_PathLike = Union[str, "PathLike[str]"]

TRANSPARENT = 0xFF000000
"""Pixel value given to the ``None`` colour (alpha byte set means transparent)."""

_NAME_BUFFER = 63
_HEX_PREFIX = re.compile(r"[0-9A-Fa-f]*")
_ATOI = re.compile(r"\s*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(Exception):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds 0xAARRGGBB values row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(chars: Sequence[str], needle: str) -> int:
    text = "".join(chars)
    in_quote = False
    for index, char in enumerate(text):
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(needle, index):
            return index
    return -1


def _blank(chars: list[str], start: int, stop: int) -> None:
    chars[start:stop] = " " * (stop - start)


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as ``text``; a ``//`` comment is blanked
    together with the newline that ends it.
    """
    chars = list(text)
    while (begin := _find_unquoted(chars, "/*")) != -1:
        end = "".join(chars).find("*/", begin + 2)
        _blank(chars, begin, len(chars) if end == -1 else end + 2)
    while (begin := _find_unquoted(chars, "//")) != -1:
        end = "".join(chars).find("\n", begin + 2)
        _blank(chars, begin, len(chars) if end == -1 else end + 1)
    return "".join(chars)


def text_to_rgb(name: str, end: str | None) -> int:
    """Return the colour named by ``name`` (and an optional second word ``end``).

    ``#RRGGBB`` is read as hexadecimal; names are looked up without regard to
    case, ``None`` giving -1. Unknown names give 0.
    """
    if name.startswith("#"):
        digits = _HEX_PREFIX.match(name, 1).group(0)
        return int(digits, 16) if digits else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines, what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"invalid XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], end)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the strings of an XPM table, header first."""
    it = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(it, "XPM header"))
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_color(_next_line(it, "colour line"), cpp)
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)
    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(it, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row too short: {row!r}")
        for x in range(width):
            col = colors.get(row[x * cpp:(x + 1) * cpp], 0)
            if col == -1:
                col = TRANSPARENT
            pixels.append(col & 0xFFFFFFFF)
    return XpmImage(width=width, height=height, pixels=tuple(pixels))


def xpm_to_image(xpm_data: Sequence[str]) -> XpmImage:
    """Decode an image from an in-memory XPM string table."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: _PathLike) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot open XPM file '{path}'") from exc
    return parse_xpm(_QUOTED.findall(strip_comments(text)))