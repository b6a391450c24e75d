import math

import pytest

from cubcaster.mapcheck import CUB
from cubcaster.player import (
    TURN_LEFT,
    TURN_RIGHT,
    Key,
    KeyState,
    Player,
    hits_wall,
)

ROOM = ["11111", "10001", "10001", "10001", "11111"]
CORNER = ["11111", "10101", "11001", "10001", "11111"]
CENTER = 2 * CUB + CUB / 2


def _player(direction=0.0):
    return Player(x=CENTER, y=CENTER, direction=direction)


def test_move_up_then_down_returns_to_start():
    player = _player(0.7)
    assert player.move_up(ROOM) is True
    assert player.x > CENTER and player.y > CENTER
    assert player.move_down(ROOM) is True
    assert math.isclose(player.x, CENTER)
    assert math.isclose(player.y, CENTER)


def test_move_left_and_right_are_sideways():
    player = _player(0.0)
    player.move_left(ROOM)
    assert player.y < CENTER
    assert math.isclose(player.x, CENTER)
    player.move_right(ROOM)
    assert math.isclose(player.y, CENTER)


def test_move_into_wall_is_refused():
    start_x = 4 * CUB - 0.5
    player = Player(x=start_x, y=CENTER, direction=0.0)
    assert player.move_up(ROOM) is False
    assert (player.x, player.y) == (start_x, CENTER)


def test_hits_wall_on_wall_cell():
    assert hits_wall(ROOM, CENTER, CENTER, CENTER, 0.5) is True
    assert hits_wall(ROOM, CENTER, CENTER, CENTER, CENTER + 1) is False


def test_hits_wall_diagonal_squeeze_between_walls():
    assert hits_wall(CORNER, 15, 15, 25, 25) is True
    assert hits_wall(ROOM, 15, 15, 25, 25) is False


def test_rotate_round_trip():
    player = _player(1.0)
    player.rotate(TURN_LEFT)
    assert player.direction < 1.0
    player.rotate(TURN_RIGHT)
    assert math.isclose(player.direction, 1.0)


def test_rotate_stays_normalized():
    player = _player(0.0)
    player.rotate(TURN_LEFT)
    assert 0 <= player.direction < 2 * math.pi
    assert math.isclose(math.sin(player.direction), -math.sin(player.rotation_speed))


def test_rotate_ignores_unknown_direction():
    player = _player(1.0)
    player.rotate(0)
    assert player.direction == 1.0


@pytest.mark.parametrize(
    "key, axis, value",
    [
        (Key.UP, "y", 1),
        (Key.DOWN, "y", -1),
        (Key.LEFT, "x", 1),
        (Key.RIGHT, "x", -1),
        (Key.ROTATE_LEFT, "pov", 1),
        (Key.ROTATE_RIGHT, "pov", -1),
    ],
)
def test_press_and_release(key, axis, value):
    state = KeyState()
    assert state.press(key) is True
    assert getattr(state, axis) == value
    assert state.release(key) is True
    assert getattr(state, axis) == 0


def test_press_accepts_raw_codes_and_ignores_unknown():
    state = KeyState()
    assert state.press(13) is True
    assert state.y == 1
    assert state.press(999) is True
    assert (state.x, state.y, state.pov) == (0, 1, 0)


def test_escape_asks_to_quit():
    state = KeyState()
    assert state.press(Key.ESC) is False
    assert state.release(Key.ESC) is False


def test_apply_rotation_has_priority_over_movement():
    state = KeyState()
    state.press(Key.ROTATE_RIGHT)
    state.press(Key.UP)
    player = _player(1.0)
    state.apply(player, ROOM)
    assert (player.x, player.y) == (CENTER, CENTER)
    assert player.direction > 1.0


def test_apply_moves_forward():
    state = KeyState()
    state.press(Key.UP)
    player = _player(0.0)
    state.apply(player, ROOM)
    assert player.x > CENTER
    assert math.isclose(player.y, CENTER)
    assert player.direction == 0.0