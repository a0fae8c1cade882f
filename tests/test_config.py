import pytest

from scanline_platformer.config import MapConfig
from scanline_platformer.errors import InvalidConfiguration


def test_defaults():
    config = MapConfig().validate()
    assert (config.width, config.height, config.midline) == (150, 28, 14)
    assert config.width_pixels == 2400
    assert config.height_pixels == 448


def test_odd_height_rounds_midline_down():
    assert MapConfig(height=27).midline == 13


@pytest.mark.parametrize("kwargs", [
    {"width": 53},
    {"height": 21},
    {"tile_width": 0},
    {"tile_height": -16},
    {"viewport_width": 0},
])
def test_invalid(kwargs):
    with pytest.raises(InvalidConfiguration):
        MapConfig(**kwargs).validate()


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        MapConfig(width=1).validate()
