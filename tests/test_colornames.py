import pytest

from minirt.colornames import COLOR_NAMES, NONE_COLOR, lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x000000),
        ("navy", 0x000080),
        ("cornflower blue", 0x6495ED),
        ("gray50", 0x7F7F7F),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


@pytest.mark.parametrize("name", ["RED", "Red", "rEd"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color("red")


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert lookup_color("None") == NONE_COLOR


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup_color("")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        r, g, b = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_spaced_and_joined_names_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("light sea") == lookup_color("lightseagreen")


def test_values_fit_in_24_bits():
    for name, value in COLOR_NAMES.items():
        if name == "none":
            continue
        assert 0 <= value <= 0xFFFFFF


def test_mapping_keys_are_lower_case_and_read_only():
    assert all(name == name.lower() for name in COLOR_NAMES)
    for name, value in COLOR_NAMES.items():
        assert lookup_color(name.upper()) == value
    with pytest.raises(TypeError):
        COLOR_NAMES["red"] = 0  # type: ignore[index]
    assert lookup_color("red") == 0xFF0000