"""Scene description: lights, camera and the objects to render."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Color, Vector


class SceneError(Exception):
    """Raised when a scene is incomplete or inconsistent."""


@dataclass
class Camera:
    position: Vector = field(default_factory=Vector)
    orientation: Vector = field(default_factory=Vector)
    fov: float = 0.0


@dataclass
class Ambient:
    ratio: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Light:
    position: Vector = field(default_factory=Vector)
    brightness: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Sphere:
    center: Vector
    radius: float
    color: Color


@dataclass
class Plane:
    point: Vector
    normal: Vector
    color: Color


@dataclass
class Cylinder:
    center: Vector
    axis: Vector
    radius: float
    height: float
    color: Color


@dataclass
class Scene:
    """Everything read from a scene file."""

    camera: Camera = field(default_factory=Camera)
    ambient: Ambient = field(default_factory=Ambient)
    light: Light = field(default_factory=Light)
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)
    ambient_count: int = 0
    camera_count: int = 0
    light_count: int = 0

    def validate(self) -> None:
        """Raise SceneError unless the scene has one ambient, one camera and a light."""
        if self.ambient_count != 1:
            raise SceneError("Scene must have exactly 1 ambient lighting (A)")
        if self.camera_count != 1:
            raise SceneError("Scene must have exactly 1 camera (C)")
        if self.light_count < 1:
            raise SceneError("Scene must have at least 1 light (L)")

    def summary(self) -> str:
        """Return a human-readable report of the loaded scene."""
        cam, amb, light = self.camera, self.ambient, self.light
        lines = [
            "",
            "=== SCENE LOADED SUCCESSFULLY ===",
            f"Camera: pos=({_vec(cam.position)}), dir=({_vec(cam.orientation)}), "
            f"fov={cam.fov:.2f}",
            f"Ambient: ratio={amb.ratio:.2f}, color=({amb.color.r * 255:.0f},"
            f"{amb.color.g * 255:.0f},{amb.color.b * 255:.0f})",
            f"Light: pos=({_vec(light.position)}), brightness={light.brightness:.2f}",
            f"Objects: {len(self.spheres)} spheres, {len(self.planes)} planes, "
            f"{len(self.cylinders)} cylinders",
        ]
        lines.extend(
            f"  Sphere {n}: center=({_vec(s.center)}), radius={s.radius:.2f}"
            for n, s in enumerate(self.spheres, 1)
        )
        lines.extend(
            f"  Plane {n}: point=({_vec(p.point)}), normal=({_vec(p.normal)})"
            for n, p in enumerate(self.planes, 1)
        )
        lines.extend(
            f"  Cylinder {n}: center=({_vec(c.center)}), "
            f"radius={c.radius:.2f}, height={c.height:.2f}"
            for n, c in enumerate(self.cylinders, 1)
        )
        lines.append("=================================")
        return "\n".join(lines) + "\n"


def _vec(v: Vector) -> str:
    return f"{v.x:.2f},{v.y:.2f},{v.z:.2f}"