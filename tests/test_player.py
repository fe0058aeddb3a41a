import pytest

from hexfront.player import Player


def test_initial_state():
    player = Player()
    assert player.position == (400.0, 300.0)
    assert player.velocity == (0.0, 0.0)
    assert player.speed == 200.0
    assert player.size == (50.0, 50.0)


def test_handle_input_sets_velocity():
    player = Player()
    player.handle_input({"W", "D"})
    assert player.velocity == (player.speed, -player.speed)
    player.handle_input(set())
    assert player.velocity == (0.0, 0.0)


def test_later_key_wins_on_same_axis():
    player = Player()
    player.handle_input({"W", "S", "A", "D"})
    assert player.velocity == (player.speed, player.speed)


def test_update_moves_by_velocity():
    player = Player()
    start_x, start_y = player.position
    player.handle_input({"a"})
    player.update(0.5)
    assert player.position[0] == pytest.approx(start_x - player.speed * 0.5)
    assert player.position[1] == start_y


def test_update_without_input_stays_put():
    player = Player()
    start = player.position
    player.update(1.0)
    assert player.position == start


def test_clamped_to_lower_bounds():
    player = Player()
    player.handle_input({"W", "A"})
    player.update(100.0)
    assert player.position == (0.0, 0.0)


def test_clamped_to_upper_bounds():
    player = Player()
    player.handle_input({"S", "D"})
    player.update(100.0)
    assert player.position == (
        player.bounds[0] - player.size[0],
        player.bounds[1] - player.size[1],
    )


@pytest.mark.parametrize("keys", [{"W"}, {"S"}, {"A"}, {"D"}, {"W", "D"}])
def test_position_always_within_bounds(keys):
    player = Player()
    player.handle_input(keys)
    for _ in range(20):
        player.update(0.7)
        x, y = player.position
        assert 0.0 <= x <= player.bounds[0] - player.size[0]
        assert 0.0 <= y <= player.bounds[1] - player.size[1]