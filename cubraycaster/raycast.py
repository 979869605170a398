"""Grid ray casting and textured wall rendering."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from .image import Image

TILE = 128
DEGREE = 0.0174533
N_RAYS = 480
NO_HIT = 100000.0
TEXTURE_SIZE = 64
COLUMN_WIDTH = 4
WIDTH = 1440
HEIGHT = 900
_EPSILON = 0.0001


class _Viewer(Protocol):
    x: float
    y: float
    angle: float


def normalize_angle(angle: float) -> float:
    """Bring an angle slightly outside [0, 2*pi] back into range."""
    if angle < 0:
        angle += 2 * math.pi
    if angle > 2 * math.pi:
        angle -= 2 * math.pi
    return angle


def _cell(value: float) -> int:
    whole = int(value)
    return whole // TILE if whole >= 0 else -((-whole) // TILE)


def _is_wall(grid: Sequence[str], x: float, y: float) -> bool:
    column, row = _cell(x), _cell(y)
    return (0 <= row < len(grid) and 0 <= column < len(grid[row])
            and grid[row][column] in ("1", "D"))


def _march(grid: Sequence[str], x: float, y: float, ray_x: float,
           ray_y: float, x_o: float, y_o: float,
           max_steps: int) -> tuple[float, float, float]:
    for _ in range(max_steps):
        if _is_wall(grid, ray_x, ray_y):
            return ray_x, ray_y, math.hypot(ray_x - x, ray_y - y)
        ray_x += x_o
        ray_y += y_o
    return x, y, NO_HIT


def horizontal_hit(grid: Sequence[str], x: float, y: float, angle: float,
                   max_steps: int) -> tuple[float, float, float]:
    """First wall met on horizontal grid lines: (hit x, hit y, distance).

    Without a hit the player's position and a distance of 100000 are returned.
    """
    if angle == 0 or angle == math.pi:
        return x, y, NO_HIT
    a_tan = -1 / math.tan(angle)
    base = _cell(y) * TILE
    if angle > math.pi:
        ray_y = base - _EPSILON
        y_o = -TILE
    else:
        ray_y = base + TILE
        y_o = TILE
    ray_x = (y - ray_y) * a_tan + x
    return _march(grid, x, y, ray_x, ray_y, -y_o * a_tan, y_o, max_steps)


def vertical_hit(grid: Sequence[str], x: float, y: float, angle: float,
                 max_steps: int) -> tuple[float, float, float]:
    """First wall met on vertical grid lines: (hit x, hit y, distance)."""
    if angle == 0 or angle == math.pi:
        return x, y, NO_HIT
    n_tan = -math.tan(angle)
    base = _cell(x) * TILE
    if math.pi / 2 < angle < 3 * math.pi / 2:
        ray_x = base - _EPSILON
        x_o = -TILE
    elif angle < math.pi / 2 or angle > 3 * math.pi / 2:
        ray_x = base + TILE
        x_o = TILE
    else:
        return x, y, NO_HIT
    ray_y = (x - ray_x) * n_tan + y
    return _march(grid, x, y, ray_x, ray_y, x_o, -x_o * n_tan, max_steps)


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and whether it hit a vertical grid line."""

    x: float
    y: float
    distance: float
    vertical: bool
    angle: float

    @property
    def shade(self) -> float:
        """0.5 for vertical (west/east) hits, 1.0 for horizontal ones."""
        return 0.5 if self.vertical else 1.0


def cast_ray(grid: Sequence[str], x: float, y: float, angle: float) -> RayHit:
    """Cast one ray and keep the nearer of the horizontal and vertical hits."""
    rows = len(grid)
    columns = max((len(line) for line in grid), default=0)
    hx, hy, dist_h = horizontal_hit(grid, x, y, angle, rows)
    vx, vy, dist_v = vertical_hit(grid, x, y, angle, columns)
    if dist_v < dist_h:
        return RayHit(vx, vy, dist_v, True, angle)
    return RayHit(hx, hy, dist_h, False, angle)


def wall_texture(hit: RayHit, textures: Mapping[str, Any]) -> Any:
    """Pick the ``NO``, ``SO``, ``WE`` or ``EA`` texture for a hit."""
    if hit.vertical:
        if math.pi / 2 < hit.angle < 3 * math.pi / 2:
            return textures["WE"]
        return textures["EA"]
    if 0 < hit.angle < math.pi:
        return textures["NO"]
    return textures["SO"]


def _c_mod(value: int, modulus: int) -> int:
    rest = abs(value) % modulus
    return -rest if value < 0 else rest


class Renderer:
    """Draws textured wall columns for 480 rays over a 60 degree view."""

    def __init__(self, grid: Sequence[str], textures: Mapping[str, Image],
                 width: int = WIDTH, height: int = HEIGHT) -> None:
        self.grid = list(grid)
        self.textures = textures
        self.width = width
        self.height = height
        self.n_rays = N_RAYS

    def _draw_column(self, frame: Image, index: int, hit: RayHit,
                     view_angle: float) -> None:
        ca = normalize_angle(view_angle - hit.angle)
        distance = hit.distance * math.cos(ca)
        if distance <= 0:
            distance = 1e-6
        line_height = int(TILE * self.height / distance)
        ty_step = TEXTURE_SIZE / line_height if line_height else 0.0
        ty_off = 0.0
        if line_height > self.height:
            ty_off = (line_height - self.height) / 2.0
            line_height = self.height
        line_offset = self.height // 2 - line_height // 2

        ty = ty_off * ty_step
        begin_x = index * (self.width // self.n_rays)
        if not hit.vertical:
            tx = _c_mod(int(hit.x / 2.0), TEXTURE_SIZE)
            if hit.angle < math.pi:
                tx = TEXTURE_SIZE - 1 - tx
        else:
            tx = _c_mod(int(hit.y / 2.0), TEXTURE_SIZE)
            if math.pi / 2 < hit.angle < 3 * math.pi / 2:
                tx = TEXTURE_SIZE - 1 - tx

        texture = wall_texture(hit, self.textures)
        for row in range(line_height):
            color = texture.get_pixel(int(tx), int(ty))
            for offset in range(COLUMN_WIDTH):
                frame.put_pixel(begin_x + offset, row + line_offset, color)
            ty += ty_step

    def render(self, frame: Image, player: _Viewer) -> None:
        """Draw the walls seen by ``player`` into ``frame``."""
        angle = normalize_angle(player.angle - DEGREE * 30)
        for index in range(self.n_rays):
            hit = cast_ray(self.grid, player.x, player.y, angle)
            self._draw_column(frame, index, hit, player.angle)
            angle = normalize_angle(angle + DEGREE / 8)