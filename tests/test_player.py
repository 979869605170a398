import math

import pytest

from cubraycaster.player import Key, Player, is_passable

OPEN = [
    "1111111",
    "1000001",
    "1000001",
    "100E001",
    "1000001",
    "1000001",
    "1111111",
]


def test_is_passable():
    assert is_passable("0")
    assert is_passable("N")
    assert not is_passable("1")
    assert not is_passable("D")


def test_from_grid_centres_player_in_cell():
    player = Player.from_grid(["111", "1N1", "111"])
    assert player.x == 192
    assert player.y == 192
    assert player.angle == pytest.approx(3 * math.pi / 2)


@pytest.mark.parametrize(
    "letter, angle",
    [("N", 3 * math.pi / 2), ("W", math.pi), ("S", math.pi / 2), ("E", 0.0)],
)
def test_from_grid_heading(letter, angle):
    player = Player.from_grid(["111", f"1{letter}1", "111"])
    assert player.angle == pytest.approx(angle)


def test_from_grid_without_player_raises():
    with pytest.raises(ValueError):
        Player.from_grid(["111", "101", "111"])


def test_offsets_depend_on_heading():
    assert Player(0, 0, 0.0).offsets() == (20, 20, 20, 20)
    assert Player(0, 0, math.pi).offsets() == (-20, 20, -20, -20)


def test_turn_left_wraps_below_zero():
    player = Player(0, 0, 0.0)
    player.turn(Key.LEFT)
    assert player.angle == pytest.approx(2 * math.pi - 0.1)


def test_turn_right_then_left_restores():
    player = Player(0, 0, 1.0)
    player.turn(Key.RIGHT)
    player.turn(Key.LEFT)
    assert player.angle == pytest.approx(1.0)


def test_forward_and_back_round_trip():
    player = Player.from_grid(OPEN)
    start = (player.x, player.y)
    player.move_forward(OPEN, 1)
    assert player.x == pytest.approx(start[0] + 10)
    assert player.y == pytest.approx(start[1])
    player.move_forward(OPEN, -1)
    assert (player.x, player.y) == pytest.approx(start)


def test_strafe_moves_sideways():
    player = Player.from_grid(OPEN)
    start_x, start_y = player.x, player.y
    player.strafe(OPEN, 1)
    assert player.y == pytest.approx(start_y + 10)
    assert player.x == pytest.approx(start_x)
    player.strafe(OPEN, -1)
    assert player.y == pytest.approx(start_y)


def test_wall_stops_forward_motion():
    grid = ["111", "1E1", "111"]
    player = Player.from_grid(grid)
    start = player.x
    for _ in range(20):
        player.move_forward(grid, 1)
    assert start < player.x < 256


def test_handle_key_escape_requests_quit():
    player = Player.from_grid(OPEN)
    before = (player.x, player.y, player.angle)
    assert player.handle_key(Key.ESCAPE, OPEN) is True
    assert (player.x, player.y, player.angle) == before


def test_handle_key_moves_and_turns():
    player = Player.from_grid(OPEN)
    start_x = player.x
    assert player.handle_key(Key.W, OPEN) is False
    assert player.x > start_x
    player.handle_key(Key.RIGHT, OPEN)
    assert player.angle == pytest.approx(0.1)