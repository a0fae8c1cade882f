"""
Tunables for the scanline platformer.

Module constants hold the fixed layout of a level; MapConfig carries the
per-map values that may be overridden from the command line.
"""
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfiguration

# ----------------------------- Window ---------------------------------
WINDOW_WIDTH, WINDOW_HEIGHT = 1280, 720
VIRTUAL_WIDTH, VIRTUAL_HEIGHT = 432, 243
FPS = 60
SKY_COLOR = (108, 140, 255)

# ----------------------------- Map ------------------------------------
TILE_WIDTH, TILE_HEIGHT = 16, 16
MAP_WIDTH, MAP_HEIGHT = 150, 28
SCROLL_SPEED = 62.0         # px/s, stand-in player
CAMERA_Y = -3               # fixed vertical camera offset

# ----------------------------- Generation -----------------------------
END_RESERVED = 27           # columns kept for the end structure
PYRAMID_MIN_X = 18          # pyramids only start after this column
PYRAMID_HEIGHT_RANGE = (3, 5)
PYRAMID_PIT_WIDTH = 3
DESCENT_EXTRA_RANGE = (1, 6)
CLOUD_CLEARANCE = 6         # rows between lowest cloud and the midline
JUMP_BLOCK_RISE = 4         # rows above the midline

# chances are "1 in N"
CLOUD_CHANCE = 10
PYRAMID_CHANCE = 10
PIT_FILL_CHANCE = 2
DESCENT_CHANCE = 3
MUSHROOM_CHANCE = 20
BUSH_CHANCE = 10
GAP_CHANCE = 10
JUMP_BLOCK_CHANCE = 15

# ----------------------------- End of level ---------------------------
END_PYRAMID_BASE = 19       # distance of the pyramid from the right edge
END_PYRAMID_HEIGHT = 8
FLAG_POSITION = 3           # distance of the flagpole from the right edge
FLAG_POLE_HEIGHT = 10
FLAG_INTERVAL = 0.2         # seconds per flag frame
FLAG_OFFSET = (10, 6)       # pixel offset of the flag from the pole top

MIN_MAP_WIDTH = 2 * END_RESERVED


@dataclass
class MapConfig:
    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    tile_width: int = TILE_WIDTH
    tile_height: int = TILE_HEIGHT
    viewport_width: int = VIRTUAL_WIDTH
    seed: Optional[int] = None

    @property
    def midline(self) -> int:
        return self.height // 2

    @property
    def width_pixels(self) -> int:
        return self.width * self.tile_width

    @property
    def height_pixels(self) -> int:
        return self.height * self.tile_height

    def validate(self) -> "MapConfig":
        if self.width < MIN_MAP_WIDTH:
            raise InvalidConfiguration(
                f"map width {self.width} is below the minimum of {MIN_MAP_WIDTH}")
        if self.midline - FLAG_POLE_HEIGHT < 1:
            raise InvalidConfiguration(
                f"map height {self.height} leaves no room for a "
                f"{FLAG_POLE_HEIGHT}-tile flagpole above row {self.midline}")
        if self.tile_width <= 0 or self.tile_height <= 0:
            raise InvalidConfiguration(
                f"tile size must be positive, got {self.tile_width}x{self.tile_height}")
        if self.viewport_width <= 0:
            raise InvalidConfiguration(f"viewport width must be positive, got {self.viewport_width}")
        return self
