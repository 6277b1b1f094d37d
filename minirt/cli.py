"""Command line entry point: load a scene, check it and cast the primary rays."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from .geometry import Ray, Vector
from .parser import parse_scene
from .scene import Camera, SceneError

WIDTH = 800
HEIGHT = 600

_USAGE = "Usage: ./minirt <scene.rt>\n"
_TOO_FEW = "Error: Too few arguments\n"
_TOO_MANY = "Error: Too many arguments\n"
_INVALID_FILE = "Error: Invalid file\n"
_EXTENSION = ".rt"


class UsageError(Exception):
    """Raised when the command line does not name exactly one ``.rt`` file."""


def check_args(argv: Sequence[str]) -> str:
    """Return the scene path from ``argv``, raising UsageError when it is unusable."""
    if len(argv) < 1:
        raise UsageError(_TOO_FEW + _USAGE)
    if len(argv) > 1:
        raise UsageError(_TOO_MANY + _USAGE)
    path = argv[0]
    if len(path) < len(_EXTENSION) or not path.endswith(_EXTENSION):
        raise UsageError(_INVALID_FILE)
    return path


def primary_rays(camera: Camera, width: int, height: int) -> Iterator[Ray]:
    """Yield one ray per pixel, column by column, from the camera position."""
    origin = camera.position
    for x in range(width):
        dx = (x + 0.5) / float(width) - origin.x
        for y in range(height):
            dy = (y + 0.5) / float(height) - origin.y
            yield Ray(origin=origin, direction=Vector(dx, dy, -1.0 - origin.z))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = check_args(argv)
    except UsageError as exc:
        sys.stderr.write(str(exc))
        return 1
    try:
        scene = parse_scene(path)
        scene.validate()
    except SceneError as exc:
        print(f"Error: {exc}")
        return 1
    sys.stdout.write(scene.summary())
    for _ray in primary_rays(scene.camera, WIDTH, HEIGHT):
        pass
    return 0