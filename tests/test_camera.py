import pytest

from scanline_platformer.camera import follow_x

VIEW = 432
MAP_W = 150 * 16


def test_left_edge_pins_to_zero():
    assert follow_x(0, VIEW, MAP_W) == 0
    assert follow_x(VIEW / 2 - 1, VIEW, MAP_W) == 0


def test_centres_player_mid_map():
    assert follow_x(1000, VIEW, MAP_W) == 1000 - VIEW / 2


def test_right_edge_pins_to_max_scroll():
    assert follow_x(MAP_W, VIEW, MAP_W) == MAP_W - VIEW
    assert follow_x(MAP_W - 10, VIEW, MAP_W) == MAP_W - VIEW


@pytest.mark.parametrize("player_x", range(0, MAP_W + 1, 37))
def test_always_within_scroll_range(player_x):
    assert 0 <= follow_x(player_x, VIEW, MAP_W) <= MAP_W - VIEW
