import math

import pytest

from cubraycaster.config import ConfigError, SceneConfig
from cubraycaster.game import Game, main
from cubraycaster.image import rgb_to_int
from cubraycaster.player import Key
from cubraycaster.raycast import HEIGHT, WIDTH

XPM = """/* XPM */
static char *tex[] = {
"2 2 2 1",
"a c #ff0000",
"b c #00ff00",
"ab",
"ba"
};
"""

GRID = ["1111111111"] + ["1000000001"] * 7 + ["1000N00001", "1111111111"]


def _scene(tmp_path, missing=None):
    textures = {}
    for key in ("NO", "SO", "WE", "EA"):
        path = tmp_path / f"{key.lower()}.xpm"
        if key != missing:
            path.write_text(XPM)
        textures[key] = str(path)
    return SceneConfig(textures=textures, floor=(0, 0, 255),
                       ceiling=(255, 0, 0), grid=list(GRID))


def test_game_sets_up_player_and_dimensions(tmp_path):
    game = Game(_scene(tmp_path))
    assert game.width == len(GRID[0])
    assert game.height == len(GRID)
    assert game.player.x == 4 * 128 + 64
    assert game.player.y == 8 * 128 + 64
    assert game.player.angle == pytest.approx(3 * math.pi / 2)


def test_frame_paints_ceiling_floor_and_walls(tmp_path):
    game = Game(_scene(tmp_path))
    image = game.frame()
    assert (image.width, image.height) == (WIDTH, HEIGHT)
    assert image.get_pixel(0, 0) == rgb_to_int(255, 0, 0)
    assert image.get_pixel(0, HEIGHT - 1) == rgb_to_int(0, 0, 255)
    assert image.get_pixel(WIDTH // 2, HEIGHT // 2) in {
        rgb_to_int(255, 0, 0), rgb_to_int(0, 255, 0)}


def test_escape_ends_game(tmp_path):
    game = Game(_scene(tmp_path))
    assert game.handle_key(Key.ESCAPE) is True


def test_turn_key_rotates_player(tmp_path):
    game = Game(_scene(tmp_path))
    before = game.player.angle
    assert game.handle_key(Key.RIGHT) is False
    assert game.player.angle == pytest.approx(before + 0.1)


def test_forward_key_moves_player_north(tmp_path):
    game = Game(_scene(tmp_path))
    before = game.player.y
    game.handle_key(Key.W)
    assert game.player.y < before


def test_missing_texture_raises(tmp_path):
    with pytest.raises(ConfigError, match="'SO' Texture not loading"):
        Game(_scene(tmp_path, missing="SO"))


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert "Too few arguments" in capsys.readouterr().out


def test_main_rejects_other_extensions(capsys):
    assert main(["maps/level.txt"]) == 1
    assert "File is not .cub" in capsys.readouterr().out


def test_main_reports_invalid_scene(tmp_path, capsys):
    path = tmp_path / "bad.cub"
    path.write_text("garbage\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.startswith("Error\n")


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert capsys.readouterr().out.startswith("Error\n")