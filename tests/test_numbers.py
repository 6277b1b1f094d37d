import pytest

from minirt.geometry import Color, Vector
from minirt.numbers import is_valid_double, parse_color, parse_double, parse_vector


@pytest.mark.parametrize(
    "text", ["0", "42", "-3.5", "+7", "1.", ".5", "."]
)
def test_is_valid_double_accepts(text):
    assert is_valid_double(text) is True


@pytest.mark.parametrize(
    "text", ["", None, "-", "+", "1.2.3", "abc", "1e5", "1,5", " 1", "--1", "0x10"]
)
def test_is_valid_double_rejects(text):
    assert is_valid_double(text) is False


@pytest.mark.parametrize(
    "text, value",
    [("1.5", 1.5), ("-2", -2.0), ("+0.25", 0.25), ("1.", 1.0), (".5", 0.5)],
)
def test_parse_double(text, value):
    assert parse_double(text) == value


@pytest.mark.parametrize("text", [".", "-.", "abc", "", "1.2.3", "-999999", "-999999.0"])
def test_parse_double_rejects(text):
    with pytest.raises(ValueError):
        parse_double(text)


def test_parse_vector():
    assert parse_vector("1,-2.5,3") == Vector(1.0, -2.5, 3.0)


def test_parse_vector_skips_empty_fields():
    assert parse_vector("1,,2,3") == Vector(1.0, 2.0, 3.0)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "1,a,3", "", ",,"])
def test_parse_vector_rejects(text):
    with pytest.raises(ValueError):
        parse_vector(text)


def test_parse_color_full_red():
    assert parse_color("255,0,0") == Color(1.0, 0.0, 0.0)


def test_parse_color_round_trip():
    color = parse_color("128,64,10")
    assert color.r * 255 == pytest.approx(128)
    assert color.g * 255 == pytest.approx(64)
    assert color.b * 255 == pytest.approx(10)


def test_parse_color_strips_newline():
    assert parse_color("0,0,255\n") == parse_color("0,0,255")


@pytest.mark.parametrize("text", ["256,0,0", "-1,0,0", "0,0", "0,0,0,0", "x,0,0"])
def test_parse_color_rejects(text):
    with pytest.raises(ValueError):
        parse_color(text)