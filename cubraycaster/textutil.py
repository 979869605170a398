"""Character classes and string helpers used when reading scene files."""

from __future__ import annotations

_SPACE_CODES = frozenset(range(9, 14)) | {32}
_MAP_CHARS = "01NSWE"


def is_space(char: str) -> bool:
    """Return True for a single ASCII whitespace character (tab to CR, space)."""
    return len(char) == 1 and ord(char) in _SPACE_CODES


def is_wall_or_space(char: str) -> bool:
    """Return True if ``char`` closes a map border: a wall or whitespace."""
    return char == "1" or is_space(char)


def is_map_char(char: str) -> bool:
    """Return True for a character allowed in a map grid: ``01NSWE``."""
    return len(char) == 1 and char in _MAP_CHARS


def split_nonempty(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and drop the empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def trim_chars(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def remove_spaces(text: str) -> str:
    """Return ``text`` with every whitespace character removed."""
    return "".join(char for char in text if not is_space(char))


def parse_int(text: str) -> int:
    """Read a leading decimal integer, ``atoi`` style.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. Text without digits gives 0.
    """
    index = 0
    length = len(text)
    while index < length and is_space(text[index]):
        index += 1
    negative = False
    if index < length and text[index] in "+-":
        negative = text[index] == "-"
        index += 1
    start = index
    while index < length and "0" <= text[index] <= "9":
        index += 1
    value = int(text[start:index]) if index > start else 0
    return -value if negative else value