"""Procedurally generated side-scrolling tile level."""

from .animation import Animation, AnimationEntry, AnimationRegistry
from .config import MapConfig
from .errors import InvalidConfiguration, MapError, OutOfBounds
from .generator import GenerationStats, TerrainGenerator
from .grid import TileGrid, TileRef
from .map import Map
from .rng import RandomStream, SeededStream
from .tiles import COLLIDABLE, TOUCHABLE, TileKind, is_collidable, is_touchable

__all__ = [
    "Animation", "AnimationEntry", "AnimationRegistry", "MapConfig",
    "InvalidConfiguration", "MapError", "OutOfBounds",
    "GenerationStats", "TerrainGenerator", "TileGrid", "TileRef", "Map",
    "RandomStream", "SeededStream",
    "COLLIDABLE", "TOUCHABLE", "TileKind", "is_collidable", "is_touchable",
]
