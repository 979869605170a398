import math

import pytest

from cubraycaster.image import Image
from cubraycaster.player import Player
from cubraycaster.raycast import (
    Renderer,
    RayHit,
    cast_ray,
    horizontal_hit,
    normalize_angle,
    vertical_hit,
    wall_texture,
)

GRID = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]
CENTRE = 2 * 128 + 64


def test_normalize_angle():
    assert normalize_angle(-0.1) == pytest.approx(2 * math.pi - 0.1)
    assert normalize_angle(2 * math.pi + 0.1) == pytest.approx(0.1)
    assert normalize_angle(1.0) == 1.0


def test_horizontal_hit_looking_up():
    hx, hy, dist = horizontal_hit(GRID, CENTRE, CENTRE, 3 * math.pi / 2, 5)
    assert 0 < hy < 128
    assert hx == pytest.approx(CENTRE)
    assert dist == pytest.approx(CENTRE - hy)


def test_no_hit_at_angle_zero():
    assert vertical_hit(GRID, CENTRE, CENTRE, 0.0, 5) == (CENTRE, CENTRE, 100000.0)
    assert horizontal_hit(GRID, CENTRE, CENTRE, 0.0, 5) == (CENTRE, CENTRE, 100000.0)
    assert cast_ray(GRID, CENTRE, CENTRE, 0.0).distance == 100000.0


def test_cast_ray_east_hits_vertical_wall():
    hit = cast_ray(GRID, CENTRE, CENTRE, 0.01)
    assert hit.vertical
    assert hit.shade == 0.5
    assert hit.x == pytest.approx(512)
    assert hit.distance == pytest.approx(
        math.hypot(hit.x - CENTRE, hit.y - CENTRE))


def test_cast_ray_up_hits_horizontal_wall():
    hit = cast_ray(GRID, CENTRE, CENTRE, 3 * math.pi / 2)
    assert not hit.vertical
    assert hit.shade == 1.0
    assert hit.distance < 100000.0


@pytest.mark.parametrize(
    "vertical, angle, key",
    [
        (True, math.pi, "WE"),
        (True, 0.2, "EA"),
        (False, math.pi / 2, "NO"),
        (False, 3 * math.pi / 2, "SO"),
    ],
)
def test_wall_texture_choice(vertical, angle, key):
    textures = {"NO": "no", "SO": "so", "WE": "we", "EA": "ea"}
    hit = RayHit(0.0, 0.0, 1.0, vertical, angle)
    assert wall_texture(hit, textures) == textures[key]


def _plain(color):
    image = Image(64, 64)
    image.fill_halves(color, color)
    return image


def test_renderer_draws_wall_column():
    colors = {"NO": 0x110000, "SO": 0x002200, "WE": 0x000033, "EA": 0x444444}
    textures = {key: _plain(value) for key, value in colors.items()}
    frame = Image(480, 60)
    player = Player.from_grid(GRID)
    Renderer(GRID, textures, 480, 60).render(frame, player)
    assert frame.get_pixel(240, 30) == colors["SO"]
    assert frame.get_pixel(240, 0) == 0
    assert frame.get_pixel(240, 59) == 0
    drawn = {frame.get_pixel(x, 30) for x in range(480)}
    assert drawn <= set(colors.values())
    assert 0 not in drawn