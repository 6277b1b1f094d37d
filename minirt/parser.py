"""Reading scene descriptions from ``.rt`` files."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from os import PathLike
from typing import Union

from .geometry import Color, Vector
from .numbers import parse_color, parse_double, parse_vector
from .scene import Ambient, Camera, Cylinder, Light, Plane, Scene, SceneError, Sphere

_PathLike = Union[str, "PathLike[str]"]


def _require_params(tokens: list[str], count: int, message: str) -> None:
    if len(tokens) != count + 1:
        raise SceneError(message)


def _vector(text: str, message: str) -> Vector:
    try:
        return parse_vector(text)
    except ValueError:
        raise SceneError(message) from None


def _color(text: str, message: str) -> Color:
    try:
        return parse_color(text)
    except ValueError:
        raise SceneError(message) from None


def _number(text: str, accept: Callable[[float], bool], message: str) -> float:
    try:
        value = parse_double(text)
    except ValueError:
        raise SceneError(message) from None
    if not accept(value):
        raise SceneError(message)
    return value


def _normalized(text: str, invalid: str, not_unit: str) -> Vector:
    vector = _vector(text, invalid)
    if not vector.is_normalized():
        raise SceneError(not_unit)
    return vector


def parse_ambient(tokens: list[str], scene: Scene) -> None:
    """Read an ``A ratio r,g,b`` element into ``scene``."""
    _require_params(tokens, 2, "Ambient requires exactly 2 parameters")
    ratio = _number(
        tokens[1], lambda v: 0.0 <= v <= 1.0, "Ambient ratio must be [0.0,1.0]"
    )
    color = _color(tokens[2], "Invalid ambient color format")
    scene.ambient = Ambient(ratio=ratio, color=color)
    scene.ambient_count += 1


def parse_camera(tokens: list[str], scene: Scene) -> None:
    """Read a ``C x,y,z dx,dy,dz fov`` element into ``scene``."""
    _require_params(tokens, 3, "Camera requires exactly 3 parameters")
    position = _vector(tokens[1], "Invalid camera position")
    orientation = _normalized(
        tokens[2],
        "Invalid camera orientation",
        "Camera orientation must be normalized",
    )
    fov = _number(tokens[3], lambda v: 0 <= v <= 180, "Camera FOV must be [0,180]")
    scene.camera = Camera(position=position, orientation=orientation, fov=fov)
    scene.camera_count += 1


def parse_light(tokens: list[str], scene: Scene) -> None:
    """Read an ``L x,y,z brightness r,g,b`` element into ``scene``."""
    _require_params(tokens, 3, "Light requires exactly 3 parameters")
    position = _vector(tokens[1], "Invalid light position")
    brightness = _number(
        tokens[2], lambda v: 0.0 <= v <= 1.0, "Light brightness must be [0.0,1.0]"
    )
    color = _color(tokens[3], "Invalid light color format")
    scene.light = Light(position=position, brightness=brightness, color=color)
    scene.light_count += 1


def parse_sphere(tokens: list[str], scene: Scene) -> None:
    """Read an ``sp x,y,z radius r,g,b`` element into ``scene``."""
    _require_params(tokens, 3, "Sphere requires exactly 3 parameters")
    center = _vector(tokens[1], "Invalid sphere center")
    radius = _number(tokens[2], lambda v: v > 0, "Sphere radius must be positive")
    color = _color(tokens[3], "Invalid sphere color")
    scene.spheres.append(Sphere(center=center, radius=radius, color=color))


def parse_plane(tokens: list[str], scene: Scene) -> None:
    """Read a ``pl x,y,z nx,ny,nz r,g,b`` element into ``scene``."""
    _require_params(tokens, 3, "Plane requires exactly 3 parameters")
    invalid = "Invalid plane parameters"
    point = _vector(tokens[1], invalid)
    normal = _vector(tokens[2], invalid)
    color = _color(tokens[3], invalid)
    if not normal.is_normalized():
        raise SceneError("Plane normal must be normalized")
    scene.planes.append(Plane(point=point, normal=normal, color=color))


def parse_cylinder(tokens: list[str], scene: Scene) -> None:
    """Read a ``cy x,y,z ax,ay,az diameter height r,g,b`` element into ``scene``."""
    _require_params(tokens, 5, "Cylinder requires exactly 5 parameters")
    invalid = "Invalid cylinder center or axis"
    center = _vector(tokens[1], invalid)
    axis = _vector(tokens[2], invalid)
    if not axis.is_normalized():
        raise SceneError("Cylinder axis must be normalized")
    dimensions = "Cylinder dimensions must be positive"
    radius = _number(tokens[3], lambda v: v > 0, dimensions)
    height = _number(tokens[4], lambda v: v > 0, dimensions)
    color = _color(tokens[5], "Invalid cylinder color")
    scene.cylinders.append(
        Cylinder(center=center, axis=axis, radius=radius, height=height, color=color)
    )


_ELEMENTS: dict[str, Callable[[list[str], Scene], None]] = {
    "A": parse_ambient,
    "C": parse_camera,
    "L": parse_light,
    "sp": parse_sphere,
    "pl": parse_plane,
    "cy": parse_cylinder,
}


def parse_line(line: str, scene: Scene) -> None:
    """Parse one element line into ``scene``, raising SceneError when it is bad."""
    tokens = [token for token in line.removesuffix("\n").split(" ") if token]
    if not tokens:
        raise SceneError("Empty element line")
    handler = _ELEMENTS.get(tokens[0])
    if handler is None:
        raise SceneError(f"Unknown element: {tokens[0]}")
    handler(tokens, scene)


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build a Scene from the lines of a scene file, skipping blanks and comments."""
    scene = Scene()
    for number, line in enumerate(lines, 1):
        if len(line) <= 1 or line[0] in "\n#":
            continue
        try:
            parse_line(line, scene)
        except SceneError as exc:
            raise SceneError(
                f"Error parsing line {number}: {exc}: {line.removesuffix(chr(10))}"
            ) from exc
    return scene


def parse_scene(path: _PathLike) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise SceneError(f"Cannot open file '{path}'") from exc
    with handle:
        try:
            return parse_lines(handle)
        except SceneError as exc:
            raise SceneError(f"Failed to parse file '{path}': {exc}") from exc