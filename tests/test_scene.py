import pytest

from minirt.geometry import Color, Vector
from minirt.scene import (
    Ambient,
    Camera,
    Cylinder,
    Light,
    Plane,
    Scene,
    SceneError,
    Sphere,
)


def _complete_scene():
    scene = Scene(
        camera=Camera(Vector(0, 0, -5), Vector(0, 0, 1), 70.0),
        ambient=Ambient(0.2, Color(1.0, 0.0, 0.0)),
        light=Light(Vector(1, 2, 3), 0.6, Color(1.0, 1.0, 1.0)),
    )
    scene.ambient_count = 1
    scene.camera_count = 1
    scene.light_count = 1
    return scene


def test_new_scene_is_empty():
    scene = Scene()
    assert scene.spheres == []
    assert scene.planes == []
    assert scene.cylinders == []
    assert (scene.ambient_count, scene.camera_count, scene.light_count) == (0, 0, 0)


def test_complete_scene_validates():
    scene = _complete_scene()
    scene.validate()
    assert scene.camera_count == 1


def test_missing_ambient():
    scene = _complete_scene()
    scene.ambient_count = 0
    with pytest.raises(SceneError, match="ambient"):
        scene.validate()


def test_duplicate_ambient():
    scene = _complete_scene()
    scene.ambient_count = 2
    with pytest.raises(SceneError, match="exactly 1 ambient"):
        scene.validate()


def test_missing_camera():
    scene = _complete_scene()
    scene.camera_count = 0
    with pytest.raises(SceneError, match="camera"):
        scene.validate()


def test_missing_light():
    scene = _complete_scene()
    scene.light_count = 0
    with pytest.raises(SceneError, match="light"):
        scene.validate()


def test_several_lights_are_allowed():
    scene = _complete_scene()
    scene.light_count = 3
    scene.validate()
    assert scene.light_count == 3


def test_summary_frame_and_counts():
    scene = _complete_scene()
    text = scene.summary()
    assert text.startswith("\n=== SCENE LOADED SUCCESSFULLY ===\n")
    assert text.endswith("=================================\n")
    assert "Objects: 0 spheres, 0 planes, 0 cylinders" in text


def test_summary_header_lines():
    text = _complete_scene().summary()
    assert "Camera: pos=(0.00,0.00,-5.00), dir=(0.00,0.00,1.00), fov=70.00" in text
    assert "Ambient: ratio=0.20, color=(255,0,0)" in text
    assert "Light: pos=(1.00,2.00,3.00), brightness=0.60" in text


def test_summary_lists_objects_in_order():
    scene = _complete_scene()
    red = Color(1.0, 0.0, 0.0)
    scene.spheres.append(Sphere(Vector(1, 2, 3), 4.5, red))
    scene.spheres.append(Sphere(Vector(0, 0, 0), 1.0, red))
    scene.planes.append(Plane(Vector(0, -1, 0), Vector(0, 1, 0), red))
    scene.cylinders.append(Cylinder(Vector(2, 0, 1), Vector(0, 1, 0), 0.5, 2.0, red))
    text = scene.summary()
    assert "Objects: 2 spheres, 1 planes, 1 cylinders" in text
    assert "  Sphere 1: center=(1.00,2.00,3.00), radius=4.50" in text
    assert "  Sphere 2: center=(0.00,0.00,0.00), radius=1.00" in text
    assert "  Plane 1: point=(0.00,-1.00,0.00), normal=(0.00,1.00,0.00)" in text
    assert "  Cylinder 1: center=(2.00,0.00,1.00), radius=0.50, height=2.00" in text
    assert text.index("Sphere 2") < text.index("Plane 1") < text.index("Cylinder 1")