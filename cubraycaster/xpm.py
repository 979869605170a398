"""Reading XPM pixmaps into 32-bit images."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .colors import text_to_rgb
from .image import Image
from .textutil import parse_int

# Colour used for pixels whose colour spec is "None".
TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return text.replace("\t", " ").split(" ") and [
        word for word in text.replace("\t", " ").split(" ") if word
    ]


def _find_unquoted(text: str, token: str) -> int:
    """Index of ``token`` outside double quotes, or -1."""
    quoted = False
    for index, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, index):
            return index
    return -1


def _blank_comments(text: str, opener: str, closer: str) -> str:
    while (start := _find_unquoted(text, opener)) != -1:
        end = text.find(closer, start + len(opener))
        stop = len(text) if end == -1 else end + len(closer)
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    Block comments are removed first, then line comments together with the
    newline that ends them. The length of the text is kept.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def xpm_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    position = 0
    while True:
        start = text.find('"', position)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        position = end + 1


def _read_header(line: str | None) -> tuple[int, int, int, int]:
    if line is None:
        raise XpmError("missing XPM header")
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and cpp")
    width, height, ncolors, cpp = (parse_int(word) for word in words[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("XPM header values must be non-zero")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError("XPM header values must be positive")
    return width, height, ncolors, cpp


def _read_colors(lines: Iterator[str], ncolors: int,
                 cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    # Short keys: later definitions replace earlier ones; long keys: first wins.
    last_wins = cpp <= 2
    for _ in range(ncolors):
        line = next(lines, None)
        if line is None:
            raise XpmError("missing XPM colour line")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour spec in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"empty colour spec in {line!r}")
        extra = words[index + 1] if index + 1 < len(words) else None
        value = text_to_rgb(words[index], extra)
        key = line[:cpp]
        if last_wins:
            colors[key] = value
        else:
            colors.setdefault(key, value)
    return colors


def parse_xpm_lines(lines: Iterable[str]) -> Image:
    """Build an image from the XPM strings: header, colours, then pixel rows."""
    it = iter(lines)
    width, height, ncolors, cpp = _read_header(next(it, None))
    colors = _read_colors(it, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        row = next(it, None)
        if row is None:
            raise XpmError("missing XPM pixel row")
        for x in range(width):
            color = colors.get(row[cpp * x:cpp * x + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def parse_xpm(text: str) -> Image:
    """Parse the text of an XPM file."""
    return parse_xpm_lines(xpm_lines(strip_comments(text)))


def load_xpm(path: str | Path) -> Image:
    """Read and parse the XPM file at ``path``."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)