import pytest

from cubcaster.colornames import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("dark red", 0x8B0000),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Dodger Blue") == 0x1E90FF


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_name_is_not_stripped():
    assert lookup_color(" snow") is None


@pytest.mark.parametrize("level", [0, 1, 25, 50, 99, 100])
def test_gray_and_grey_spellings_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


@pytest.mark.parametrize("level", range(100))
def test_gray_scale_is_monotonic_and_neutral(level):
    darker = lookup_color(f"gray{level}")
    lighter = lookup_color(f"gray{level + 1}")
    assert darker < lighter
    red, green, blue = (lighter >> 16) & 0xFF, (lighter >> 8) & 0xFF, lighter & 0xFF
    assert red == green == blue
    assert lighter <= 0xFFFFFF