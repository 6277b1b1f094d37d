"""Vectors, colours, rays and the bits of trigonometry the renderer needs."""

from __future__ import annotations

import math
from dataclasses import dataclass

_NORMAL_MIN = 0.99
_NORMAL_MAX = 1.01


@dataclass(frozen=True)
class Vector:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def is_normalized(self) -> bool:
        """True when the squared length lies within 1% of one."""
        return _NORMAL_MIN <= self.dot(self) <= _NORMAL_MAX

    def is_perpendicular(self, other: Vector) -> bool:
        """True when the dot product with ``other`` is exactly zero."""
        return self.dot(other) == 0


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in the range [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Vector
    direction: Vector


@dataclass(frozen=True)
class Viewport:
    """Size of the projection plane in scene units."""

    width: float
    height: float


def radian_to_degree(rad: float) -> int:
    """Convert radians to whole degrees, truncating toward zero."""
    return int(rad * (180.0 / math.pi))


def degree_to_radian(deg: int) -> int:
    """Convert degrees to radians, truncating toward zero."""
    return int(deg * (math.pi / 180.0))


def viewport_size(fov: float, distance: float, width: int, height: int) -> Viewport:
    """Size of the viewport seen at ``distance`` with a horizontal ``fov`` in degrees."""
    fov_rad = math.radians(fov)
    viewport_height = 2.0 * (math.tan(fov_rad / 2.0) * distance)
    aspect = float(width) / float(height)
    return Viewport(width=aspect * viewport_height, height=viewport_height)