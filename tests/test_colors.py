import pytest

from cubraycaster.colors import lookup_color, text_to_rgb


def test_lookup_basic_names():
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("white") == 0xFFFFFF
    assert lookup_color("black") == 0x0


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("LightBlue") == lookup_color("lightblue")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("no such colour")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_spaced_and_joined_names_agree():
    for spaced, joined in [("light blue", "lightblue"), ("navy blue", "navyblue"),
                           ("hot pink", "hotpink"), ("dark red", "darkred")]:
        assert lookup_color(spaced) == lookup_color(joined)


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff00aa", None) == 0xFF00AA
    assert text_to_rgb("#000000", "ignored") == 0


def test_text_to_rgb_hex_stops_at_invalid_digit():
    assert text_to_rgb("#ffzz", None) == 0xFF
    assert text_to_rgb("#zz", None) == 0


def test_text_to_rgb_joins_two_words():
    assert text_to_rgb("light", "blue") == lookup_color("light blue")
    assert text_to_rgb("navy", "blue") == 0x80


def test_text_to_rgb_single_word():
    assert text_to_rgb("Red", None) == 0xFF0000
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_gives_zero():
    assert text_to_rgb("nocolour", None) == 0
    assert text_to_rgb("red", "nothing") == 0