import pytest

from cubraycaster.textutil import (
    is_map_char,
    is_space,
    is_wall_or_space,
    parse_int,
    remove_spaces,
    split_nonempty,
    trim_chars,
)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(char):
    assert is_space(char) is True


@pytest.mark.parametrize("char", ["a", "1", "", "\x08", "\x0e"])
def test_is_space_rejects_others(char):
    assert is_space(char) is False


@pytest.mark.parametrize("char,expected", [("1", True), (" ", True), ("\t", True),
                                           ("0", False), ("N", False), ("", False)])
def test_is_wall_or_space(char, expected):
    assert is_wall_or_space(char) is expected


def test_is_map_char_accepts_exact_set():
    assert all(is_map_char(c) for c in "01NSWE")
    assert not any(is_map_char(c) for c in "2nD x")
    assert is_map_char("") is False


def test_split_nonempty_drops_empty_pieces():
    assert split_nonempty("//a//b/", "/") == ["a", "b"]
    assert split_nonempty("", ",") == []
    assert split_nonempty(",,,", ",") == []


def test_split_nonempty_rejoin_invariant():
    text = "maps/level.cub"
    parts = split_nonempty(text, "/")
    assert "/".join(parts) == text
    assert parts[-1] == "level.cub"


def test_trim_chars_both_ends():
    assert trim_chars(" \tNO ./a.xpm \t", " \t") == "NO ./a.xpm"
    assert trim_chars("   ", " ") == ""
    assert trim_chars("abc", "") == "abc"


def test_trim_chars_keeps_inner_characters():
    result = trim_chars("  F 1, 2  ", " ")
    assert " " in result
    assert not result.startswith(" ") and not result.endswith(" ")


def test_remove_spaces_removes_all_whitespace():
    result = remove_spaces(" C\t220 ,100,\n0 ")
    assert not any(is_space(c) for c in result)
    assert result.replace(",", "") == "C2201000"


def test_parse_int_basic_and_signs():
    assert parse_int("255") == 255
    assert parse_int("  -42") == -42
    assert parse_int("+7") == 7


def test_parse_int_stops_at_non_digit():
    assert parse_int("12abc") == 12
    assert parse_int("255\n") == 255


def test_parse_int_without_digits_is_zero():
    assert parse_int("") == 0
    assert parse_int("abc") == 0
    assert parse_int("-") == 0
    assert parse_int("+-3") == 0