"""The player: starting position, heading, turning and collision-checked moves."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

TILE = 128
STEP = 10
TURN = 0.1
_PROBE = 6
_MARGIN = 20
_PLAYER_CHARS = "NSEW"


class Key(IntEnum):
    """Key symbols the game reacts to."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    RIGHT = 0xFF53
    W = 119
    S = 115
    A = 97
    D = 100


def is_passable(cell: str) -> bool:
    """True unless ``cell`` is a wall (``1``) or a door (``D``)."""
    return cell not in ("1", "D")


def _cell(value: float) -> int:
    """Grid index of a coordinate, truncating toward zero."""
    whole = int(value)
    return whole // TILE if whole >= 0 else -((-whole) // TILE)


def _cell_at(grid: Sequence[str], y: float, x: float) -> str:
    row, column = _cell(y), _cell(x)
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return ""


@dataclass
class Player:
    """Position in world units (128 per cell) and heading in radians."""

    x: float
    y: float
    angle: float

    @classmethod
    def from_grid(cls, grid: Sequence[str]) -> Player:
        """Place the player at the centre of its cell, facing its letter."""
        position = None
        for row, line in enumerate(grid):
            for column, char in enumerate(line):
                if char in _PLAYER_CHARS:
                    position = (column * TILE + TILE // 2, row * TILE + TILE // 2)
        if position is None:
            raise ValueError("the map has no player")

        def present(letter: str) -> bool:
            return any(letter in line for line in grid)

        if present("N"):
            angle = 3 * math.pi / 2
        elif present("W"):
            angle = math.pi
        elif present("S"):
            angle = math.pi / 2
        else:
            angle = 0.0
        return cls(float(position[0]), float(position[1]), angle)

    def offsets(self) -> tuple[int, int, int, int]:
        """Collision margins (x, y, strafe x, strafe y) for the current heading."""

        def margin(value: float) -> int:
            return -_MARGIN if value < 0 else _MARGIN

        side = self.angle + math.pi / 2
        return (
            margin(math.cos(self.angle) * _PROBE),
            margin(math.sin(self.angle) * _PROBE),
            margin(math.cos(side) * _PROBE),
            margin(math.sin(side) * _PROBE),
        )

    def turn(self, key: int) -> None:
        """Rotate left or right by 0.1 radian."""
        if key == Key.LEFT:
            self.angle -= TURN
        elif key == Key.RIGHT:
            self.angle += TURN
        else:
            return
        if self.angle < 0:
            self.angle += 2 * math.pi

    def _move(self, grid: Sequence[str], heading: float, x_off: int,
              y_off: int, sign: int) -> None:
        step = 1 if sign >= 0 else -1
        if is_passable(_cell_at(grid, self.y, self.x + step * x_off)):
            self.x += step * math.cos(heading) * STEP
        if is_passable(_cell_at(grid, self.y + step * y_off, self.x)):
            self.y += step * math.sin(heading) * STEP

    def move_forward(self, grid: Sequence[str], sign: int = 1) -> None:
        """Step forward (positive ``sign``) or backward, stopping at walls."""
        x_off, y_off, _, _ = self.offsets()
        self._move(grid, self.angle, x_off, y_off, sign)

    def strafe(self, grid: Sequence[str], sign: int = 1) -> None:
        """Step right (positive ``sign``) or left, stopping at walls."""
        _, _, x_off, y_off = self.offsets()
        self._move(grid, self.angle + math.pi / 2, x_off, y_off, sign)

    def handle_key(self, key: int, grid: Sequence[str]) -> bool:
        """Apply a key press; return True if it asks to quit."""
        if key == Key.ESCAPE:
            return True
        if key in (Key.LEFT, Key.RIGHT):
            self.turn(key)
        if key == Key.W:
            self.move_forward(grid, 1)
        elif key == Key.S:
            self.move_forward(grid, -1)
        if key == Key.D:
            self.strafe(grid, 1)
        elif key == Key.A:
            self.strafe(grid, -1)
        return False