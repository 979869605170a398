"""Reading and checking ``.cub`` scene descriptions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .mapcheck import MapError, validate_map
from .textutil import parse_int, remove_spaces, split_nonempty, trim_chars

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_TEXTURE_PREFIXES = tuple(
    f"{key}{sep}" for key in TEXTURE_KEYS for sep in (" ", "\t")
)
_COLOR_PREFIXES = ("F ", "C ", "F\t", "C\t")

RGB = tuple[int, int, int]


class ConfigError(ValueError):
    """Raised when a scene description is not valid."""


def has_cub_extension(path: str) -> bool:
    """True if the last dotted part of the file name starts with ``cub``."""
    parts = split_nonempty(path, "/")
    if not parts:
        return False
    pieces = split_nonempty(parts[-1], ".")
    if not pieces:
        return False
    return pieces[-1].startswith("cub")


def is_texture_line(line: str) -> bool:
    """True for a ``NO``, ``SO``, ``WE`` or ``EA`` texture line."""
    return line.startswith(_TEXTURE_PREFIXES)


def is_color_line(line: str) -> bool:
    """True for an ``F`` (floor) or ``C`` (ceiling) colour line."""
    return line.startswith(_COLOR_PREFIXES)


def check_xpm_paths(textures: Mapping[str, str | None]) -> None:
    """Raise ConfigError if a given texture path does not end in ``.xpm``."""
    for key in TEXTURE_KEYS:
        path = textures.get(key)
        if path is not None and path[-4:] != ".xpm":
            raise ConfigError(f"{key} texture is not a xpm file")


@dataclass
class SceneConfig:
    """Textures, floor and ceiling colours and map grid of a scene."""

    textures: dict[str, str | None] = field(
        default_factory=lambda: dict.fromkeys(TEXTURE_KEYS)
    )
    floor: RGB | None = None
    ceiling: RGB | None = None
    grid: list[str] = field(default_factory=list)

    def add_texture(self, line: str) -> None:
        """Record the path of a texture line such as ``NO ./north.xpm``."""
        if "\t" in line:
            raise ConfigError("Tab is not allowed..")
        start = line.find(" ")
        if start == -1:
            raise ConfigError("Duplicate NO,SE,WE or EA")
        path = line[start:].lstrip(" ")
        if path.endswith("\n"):
            path = path[:-1]
        key = line[:2]
        if key in TEXTURE_KEYS and line.startswith(f"{key} ") \
                and self.textures.get(key) is None:
            self.textures[key] = path
        else:
            raise ConfigError("Duplicate NO,SE,WE or EA")

    def add_color(self, line: str) -> None:
        """Record a colour line such as ``F 220,100,0``."""
        compact = remove_spaces(line)
        if not compact:
            raise ConfigError("Wrong RGB format")
        pieces = split_nonempty(compact[1:], ",")
        if len(pieces) != 3:
            raise ConfigError("Wrong RGB format")
        if any(not all("0" <= c <= "9" for c in piece) for piece in pieces):
            raise ConfigError("RGB is not valid")
        values = []
        for piece in pieces:
            value = parse_int(piece)
            if not 0 <= value <= 255:
                raise ConfigError("RGB out of range")
            current = self.floor if compact[0] == "F" else self.ceiling
            if current is not None:
                raise ConfigError("RGB is duplicate")
            values.append(value)
        rgb = (values[0], values[1], values[2])
        if compact[0] == "F":
            self.floor = rgb
        elif compact[0] == "C":
            self.ceiling = rgb

    def is_complete(self) -> bool:
        """True once all four textures and both colours are known."""
        return (all(self.textures.get(key) is not None for key in TEXTURE_KEYS)
                and self.floor is not None and self.ceiling is not None)

    def _add_line(self, line: str) -> None:
        if line.startswith("\n"):
            return
        if is_texture_line(line):
            self.add_texture(line)
        elif is_color_line(line):
            self.add_color(line)
        else:
            raise ConfigError(".cub is not valid")


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each with its newline if it has one."""
    yield from iter(stream.readline, "")


def read_map_grid(lines: Iterable[str]) -> list[str]:
    """Read and validate the map that follows the scene header.

    Blank lines before the map are skipped; a blank line anywhere after the
    map has started is an error.
    """
    it = iter(lines)
    line = next(it, None)
    while line is not None and line.startswith("\n"):
        line = next(it, None)
    parts: list[str] = []
    blank_seen = False
    while line is not None:
        if not blank_seen:
            parts.append(line)
        if line.startswith("\n"):
            blank_seen = True
        line = next(it, None)
    if blank_seen:
        raise ConfigError("New line on map")
    grid = split_nonempty("".join(parts), "\n")
    if not grid:
        raise ConfigError("Map Not found")
    try:
        validate_map(grid)
    except MapError as exc:
        raise ConfigError(str(exc)) from exc
    return grid


def parse_scene(lines: Iterable[str]) -> SceneConfig:
    """Parse the header lines and the map of a scene description."""
    it = iter(lines)
    raw = next(it, None)
    if raw is None:
        raise ConfigError("couldn't read from file")
    config = SceneConfig()
    while True:
        config._add_line(trim_chars(raw, " \t"))
        if config.is_complete():
            break
        raw = next(it, None)
        if raw is None:
            raise ConfigError("file end reached in parsing")
    config.grid = read_map_grid(it)
    check_xpm_paths(config.textures)
    return config


def load_scene(path: str | Path) -> SceneConfig:
    """Read the scene file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="\n") as stream:
            return parse_scene(read_lines(stream))
    except OSError as exc:
        raise ConfigError(f"couldn't read from file: {exc}") from exc