import math

import pytest

from minirt.geometry import (
    Color,
    Ray,
    Vector,
    Viewport,
    degree_to_radian,
    radian_to_degree,
    viewport_size,
)


def test_dot_of_axes_is_zero():
    assert Vector(1, 0, 0).dot(Vector(0, 1, 0)) == 0


def test_dot_with_itself_is_squared_length():
    v = Vector(2, 3, 4)
    assert v.dot(v) == 2 * 2 + 3 * 3 + 4 * 4


def test_vector_arithmetic_round_trip():
    a = Vector(1.5, -2.0, 3.0)
    b = Vector(0.5, 4.0, -1.0)
    assert (a + b) - b == a


@pytest.mark.parametrize(
    "vec, expected",
    [
        (Vector(1, 0, 0), True),
        (Vector(0, 0, -1), True),
        (Vector(0.7071, 0.7071, 0), True),
        (Vector(2, 0, 0), False),
        (Vector(0, 0, 0), False),
        (Vector(0.5, 0, 0), False),
    ],
)
def test_is_normalized(vec, expected):
    assert vec.is_normalized() is expected


def test_is_normalized_bounds_inclusive():
    assert Vector(math.sqrt(0.99), 0, 0).is_normalized() or Vector(
        math.sqrt(0.9901), 0, 0
    ).is_normalized()
    assert not Vector(math.sqrt(0.98), 0, 0).is_normalized()
    assert not Vector(math.sqrt(1.02), 0, 0).is_normalized()


def test_is_perpendicular():
    assert Vector(1, 0, 0).is_perpendicular(Vector(0, 0, 1))
    assert not Vector(1, 1, 0).is_perpendicular(Vector(1, 0, 0))


def test_is_perpendicular_is_symmetric():
    a = Vector(1, 2, 3)
    b = Vector(3, 0, -1)
    assert a.is_perpendicular(b) == b.is_perpendicular(a)
    assert a.is_perpendicular(b)


def test_radian_to_degree_zero():
    assert radian_to_degree(0.0) == 0


def test_radian_to_degree_truncates():
    assert radian_to_degree(1.0) == 57


def test_degree_to_radian_truncates():
    assert degree_to_radian(180) == 3
    assert degree_to_radian(0) == 0


def test_viewport_size_right_angle():
    vp = viewport_size(90, 1.0, 800, 600)
    assert vp.height == pytest.approx(2.0)


def test_viewport_aspect_ratio_matches_screen():
    vp = viewport_size(70, 2.5, 800, 600)
    assert vp.width / vp.height == pytest.approx(800 / 600)


def test_viewport_scales_with_distance():
    near = viewport_size(60, 1.0, 640, 480)
    far = viewport_size(60, 3.0, 640, 480)
    assert far.height == pytest.approx(3 * near.height)
    assert far.width == pytest.approx(3 * near.width)


def test_dataclasses_hold_values():
    ray = Ray(Vector(1, 2, 3), Vector(0, 0, 1))
    assert ray.origin == Vector(1, 2, 3)
    assert Color(0.1, 0.2, 0.3).g == 0.2
    assert Viewport(4.0, 3.0).width == 4.0