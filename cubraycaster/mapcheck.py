"""Validation of the map grid of a scene."""

from __future__ import annotations

from collections.abc import Sequence

from .textutil import is_map_char, is_space, is_wall_or_space

PLAYER_CHARS = "NSEW"


class MapError(ValueError):
    """Raised when a map grid is not a valid, closed map."""


def side_is_wall(grid: Sequence[str], row: int) -> bool:
    """True if row ``row`` holds only walls and whitespace."""
    return all(is_wall_or_space(char) for char in grid[row])


def edges_are_walls(grid: Sequence[str]) -> bool:
    """True if every row starts (after whitespace) and ends with a wall."""
    for line in grid:
        stripped = line.lstrip("".join(c for c in line if is_space(c)))
        if not stripped or stripped[0] != "1" or line[-1] != "1":
            return False
    return True


def _closed_at(line: str, column: int) -> bool:
    return 0 <= column < len(line) and is_wall_or_space(line[column])


def spaces_are_enclosed(grid: Sequence[str]) -> bool:
    """True if every whitespace cell touches only walls or whitespace."""
    for row, line in enumerate(grid):
        for column, char in enumerate(line):
            if not is_space(char):
                continue
            if row > 0 and not _closed_at(grid[row - 1], column):
                return False
            if row + 1 < len(grid) and not _closed_at(grid[row + 1], column):
                return False
            if column > 0 and not _closed_at(line, column - 1):
                return False
            if not _closed_at(line, column + 1):
                return False
    return True


def overhangs_are_walls(grid: Sequence[str]) -> bool:
    """True if the part of a row longer than its neighbour is all walls."""
    for upper, lower in zip(grid, grid[1:]):
        if len(upper) > len(lower) and set(upper[len(lower):]) - {"1"}:
            return False
        if len(lower) > len(upper) and set(lower[len(upper):]) - {"1"}:
            return False
    return True


def check_walls(grid: Sequence[str]) -> None:
    """Raise MapError unless the grid is closed by walls on every side."""
    if not grid:
        raise MapError("Map not found")
    if not side_is_wall(grid, 0):
        raise MapError("The first line is not a wall")
    if not side_is_wall(grid, len(grid) - 1):
        raise MapError("The last line is not a wall")
    if not edges_are_walls(grid):
        raise MapError("A middle line is not closed by walls")
    if not spaces_are_enclosed(grid) or not overhangs_are_walls(grid):
        raise MapError("The map is not surrounded by walls")


def only_valid_chars(grid: Sequence[str]) -> bool:
    """True if every cell is one of ``01NSWE`` or whitespace."""
    return all(is_map_char(c) or is_space(c) for line in grid for c in line)


def count_char(grid: Sequence[str], char: str) -> int:
    """Number of cells equal to ``char``."""
    return sum(line.count(char) for line in grid)


def player_direction(grid: Sequence[str]) -> str | None:
    """The single player letter, or None unless exactly one player exists."""
    counts = {letter: count_char(grid, letter) for letter in PLAYER_CHARS}
    present = [letter for letter, count in counts.items() if count]
    if len(present) == 1 and counts[present[0]] == 1:
        return present[0]
    return None


def validate_map(grid: Sequence[str]) -> str:
    """Check the whole grid and return the player's direction letter."""
    check_walls(grid)
    if not only_valid_chars(grid):
        raise MapError("Invalid map component/letters found")
    direction = player_direction(grid)
    if direction is None:
        raise MapError("Invalid player position")
    return direction