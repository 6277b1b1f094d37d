import pytest

from minirt.xpm import (
    XpmError,
    XpmImage,
    parse_xpm,
    split_words,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "2 2 2 1",
    ". c #FF0000",
    "x c None",
    ".x",
    "x.",
]


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb   c ") == ["a", "bb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_block_keeps_length():
    text = 'a /* note */ "b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert result.startswith("a ")
    assert result.endswith('"b"')


def test_strip_comments_line_comment():
    text = '"x" // tail\n"y"'
    result = strip_comments(text)
    assert "tail" not in result
    assert len(result) == len(text)
    assert result.endswith('"y"')


def test_strip_comments_inside_quotes_untouched():
    text = '"a /* b */ c"'
    assert strip_comments(text) == text


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_name_case_insensitive():
    assert text_to_rgb("RED", None) == 0xFF0000


def test_text_to_rgb_two_words():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(1, 1) == 0xFF0000


def test_pixel_out_of_range():
    image = xpm_to_image(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_multi_char_keys_first_definition_wins():
    data = ["1 1 2 3", "abc c red", "abc c blue", "abc"]
    assert xpm_to_image(data).pixels == (0xFF0000,)


def test_single_char_keys_last_definition_wins():
    data = ["1 1 2 1", "a c red", "a c blue", "a"]
    assert xpm_to_image(data).pixels == (0x0000FF,)


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_errors(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_file_round_trip(tmp_path):
    path = tmp_path / "img.xpm"
    body = "/* XPM */\nstatic char *img[] = {\n"
    body += "// comment line\n"
    body += ",\n".join(f'"{line}"' for line in SAMPLE)
    body += "\n};\n"
    path.write_text(body, encoding="latin-1")
    image = xpm_file_to_image(path)
    assert isinstance(image, XpmImage)
    assert image == xpm_to_image(SAMPLE)


def test_missing_file(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")