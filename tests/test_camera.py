import math

import pytest

from hexfront.camera import CameraInput


def test_no_keys_no_movement():
    assert CameraInput().movement(1.0) == (0.0, 0.0)


def test_up_moves_negative_y_at_speed():
    camera = CameraInput()
    camera.press("W")
    assert camera.movement(1.0) == (0.0, -400.0)


def test_each_direction():
    camera = CameraInput()
    camera.press("d")
    dx, dy = camera.movement(1.0)
    assert dx == pytest.approx(camera.speed) and dy == 0.0
    camera.release("d")
    camera.press("a")
    dx, dy = camera.movement(1.0)
    assert dx == pytest.approx(-camera.speed) and dy == 0.0
    camera.release("a")
    camera.press("s")
    dx, dy = camera.movement(1.0)
    assert dx == 0.0 and dy == pytest.approx(camera.speed)


def test_diagonal_is_normalized():
    camera = CameraInput()
    camera.press("W")
    camera.press("D")
    dx, dy = camera.movement(1.0)
    assert math.hypot(dx, dy) == pytest.approx(camera.speed)
    assert dx > 0 and dy < 0
    assert abs(dx) == pytest.approx(abs(dy))


def test_opposite_keys_cancel():
    camera = CameraInput()
    camera.press("W")
    camera.press("S")
    assert camera.movement(1.0) == (0.0, 0.0)


def test_release_stops_movement():
    camera = CameraInput()
    camera.press("A")
    camera.release("A")
    assert camera.movement(1.0) == (0.0, 0.0)


def test_movement_scales_with_delta_time():
    camera = CameraInput()
    camera.press("S")
    full = camera.movement(1.0)
    half = camera.movement(0.5)
    assert half[1] == pytest.approx(full[1] / 2)


@pytest.mark.parametrize("key", ["Q", "R", "Escape", "q"])
def test_game_keys_are_forwarded(key):
    camera = CameraInput()
    assert camera.press(key) is True
    assert camera.movement(1.0) == (0.0, 0.0)


@pytest.mark.parametrize("key", ["W", "F", "X"])
def test_other_keys_not_forwarded(key):
    assert CameraInput().press(key) is False