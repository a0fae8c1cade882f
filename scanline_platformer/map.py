"""
The level map: tile grid, flag animation, camera and the player hook.

A Map generates its terrain once when constructed and is then driven by the
frame loop with update(dt) followed by render(renderer).
"""
import logging
import math
from typing import Callable, Optional, Union

from . import config as cfg
from .animation import AnimationRegistry
from .camera import follow_x
from .errors import MapError
from .generator import GenerationStats, TerrainGenerator
from .grid import TileGrid, TileRef
from .interfaces import Atlas, AudioSink, Player, Renderer
from .rng import RandomStream, SeededStream
from .tiles import TileKind, is_collidable, is_touchable

logger = logging.getLogger(__name__)

TileLike = Union[TileRef, TileKind]


class Map:
    def __init__(self, config: Optional[cfg.MapConfig] = None,
                 stream: Optional[RandomStream] = None,
                 atlas: Optional[Atlas] = None,
                 audio: Optional[AudioSink] = None,
                 player_factory: Optional[Callable[["Map"], Player]] = None):
        self.config = (config or cfg.MapConfig()).validate()
        self.stream = stream or SeededStream(self.config.seed)
        self.atlas = atlas
        self.audio = audio

        self.tile_width = self.config.tile_width
        self.tile_height = self.config.tile_height
        self.map_width = self.config.width
        self.map_height = self.config.height
        self.map_width_pixels = self.config.width_pixels
        self.map_height_pixels = self.config.height_pixels

        self.tiles = TileGrid(self.map_width, self.map_height)
        self.animations = AnimationRegistry()

        self.cam_x = 0.0
        self.cam_y = cfg.CAMERA_Y

        self.stats: GenerationStats = TerrainGenerator(self.stream).generate(self.tiles, self.animations)
        logger.info("generated %dx%d map (seed=%s): %d pyramids, %d gaps, %d jump blocks",
                    self.map_width, self.map_height, getattr(self.stream, "seed", None),
                    self.stats.pyramids, self.stats.gaps + self.stats.pits, self.stats.jump_blocks)

        self.player: Optional[Player] = player_factory(self) if player_factory else None

        if self.audio is not None:
            self.audio.set_looping(True)
            self.audio.play()

    # ------------------------- Tiles ----------------------------------
    def get_tile(self, x: int, y: int) -> TileKind:
        return self.tiles.get(x, y)

    def set_tile(self, x: int, y: int, kind: TileKind):
        self.tiles.set(x, y, kind)

    def tile_at(self, px: float, py: float) -> TileRef:
        """Tile under a pixel position; EMPTY anywhere off the map."""
        x = math.floor(px / self.tile_width) + 1
        y = math.floor(py / self.tile_height) + 1
        if not self.tiles.in_bounds(x, y):
            return TileRef(x, y, TileKind.EMPTY)
        return TileRef(x, y, self.tiles.get(x, y))

    def collides(self, tile: TileLike) -> bool:
        return is_collidable(_kind(tile))

    def touches(self, tile: TileLike) -> bool:
        return is_touchable(_kind(tile))

    def strike_block(self, x: int, y: int) -> bool:
        """Spend a jump block. Returns False if (x, y) holds anything else."""
        if self.tiles.get(x, y) != TileKind.JUMP_BLOCK:
            return False
        self.tiles.set(x, y, TileKind.JUMP_BLOCK_HIT)
        return True

    # ------------------------- Frame ----------------------------------
    def update(self, dt: float):
        if self.player is not None:
            self.player.update(dt)
        self.animations.update(dt)
        if self.player is not None:
            self.cam_x = follow_x(self.player.x, self.config.viewport_width, self.map_width_pixels)

    def render(self, renderer: Renderer):
        if self.atlas is None:
            raise MapError("map has no sprite atlas to draw with")
        texture, quads = self.atlas.texture, self.atlas.quads

        for x, y, kind in self.tiles:
            if kind != TileKind.EMPTY:
                renderer.draw(texture, quads[kind],
                              (x - 1) * self.tile_width, (y - 1) * self.tile_height)

        for entry in self.animations:
            renderer.draw(texture, quads[entry.animation.current_frame],
                          (entry.x - 1) * self.tile_width + entry.xo,
                          (entry.y - 1) * self.tile_height + entry.yo)

        if self.player is not None:
            self.player.render(renderer)


def _kind(tile: TileLike) -> TileKind:
    return tile.kind if isinstance(tile, TileRef) else TileKind(tile)
