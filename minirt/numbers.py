"""Parsing of numbers, vectors and colours written in scene files."""

from __future__ import annotations

from .geometry import Color, Vector

# Historically used as an error marker, so the literal value is refused too.
_RESERVED = -999999.0
_DIGITS = frozenset("0123456789")


def is_valid_double(text: str | None) -> bool:
    """True when ``text`` is an optional sign, digits and at most one dot."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    if not body:
        return False
    if body.count(".") > 1:
        return False
    return all(c in _DIGITS or c == "." for c in body)


def parse_double(text: str | None) -> float:
    """Parse a decimal number, raising ValueError when it is malformed."""
    if not is_valid_double(text):
        raise ValueError(f"invalid number: {text!r}")
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"invalid number: {text!r}") from None
    if value == _RESERVED:
        raise ValueError(f"invalid number: {text!r}")
    return value


def _split_three(text: str) -> list[str]:
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise ValueError(f"expected three comma separated values: {text!r}")
    return parts


def parse_vector(text: str) -> Vector:
    """Parse ``x,y,z`` into a Vector."""
    x, y, z = (parse_double(part) for part in _split_three(text))
    return Vector(x, y, z)


def parse_color(text: str) -> Color:
    """Parse ``r,g,b`` with components in [0, 255] into a Color in [0, 1]."""
    text = text.removesuffix("\n")
    components = [parse_double(part) for part in _split_three(text)]
    if any(c < 0 or c > 255 for c in components):
        raise ValueError(f"colour components must be in [0,255]: {text!r}")
    r, g, b = (c / 255.0 for c in components)
    return Color(r, g, b)