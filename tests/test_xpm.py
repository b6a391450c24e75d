import pytest

from cubcaster.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_lines,
    split_words,
    strip_comments,
    text_color,
)

XPM_TEXT = """/* XPM */
static char *img[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"X c red", // named colour
" .X",
"X. ",
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  3\t2  1 ") == ["3", "2", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = "/* x */abc"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.strip() == "abc"


def test_strip_comment_inside_quotes_is_kept():
    text = '"/* no */"'
    assert strip_comments(text) == text


def test_strip_line_comment():
    result = strip_comments("a // c\nb")
    assert "//" not in result
    assert result.split() == ["a", "b"]


def test_text_color_hex():
    assert text_color("#FF0000", None) == 0xFF0000


def test_text_color_names():
    assert text_color("red", None) == 0xFF0000
    assert text_color("dark", "red") == 0x8B0000
    assert text_color("None", None) == -1


def test_text_color_unknown_and_bad_hex():
    assert text_color("nosuchcolour", None) == 0
    assert text_color("#zz", None) == 0


def test_parse_xpm_text():
    image = parse_xpm(XPM_TEXT)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == TRANSPARENT
    assert image.pixel(1, 0) == 0xFF0000
    assert image.pixel(2, 0) == 0xFF0000
    assert image.pixel(0, 1) == 0xFF0000
    assert image.pixel(2, 1) == TRANSPARENT
    assert len(image.pixels) == image.width * image.height


def test_pixel_out_of_range():
    image = parse_xpm(XPM_TEXT)
    with pytest.raises(IndexError):
        image.pixel(3, 0)


def test_two_chars_per_pixel():
    image = parse_xpm_lines(["2 1 2 2", "aa c #000001", "bb c black", "aabb"])
    assert image.pixels == (1, 0)


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == (1,)


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == (2,)


def test_unknown_pixel_key_is_zero():
    image = parse_xpm_lines(["1 1 1 1", "a c #000001", "b"])
    assert image.pixels == (0,)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["1 1 1"],
        ["0 1 1 1", "a c #000001", "a"],
        ["1 1 1 1", "a #000001", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1"],
        ["2 1 1 1", "a c #000001", "a"],
        ["1 2 1 1", "a c #000001", "a"],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(XPM_TEXT)
    assert load_xpm(path) == parse_xpm(XPM_TEXT)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


def test_image_equality_is_by_value():
    assert XpmImage(1, 1, (5,)) == parse_xpm_lines(["1 1 1 1", "a c #000005", "a"])