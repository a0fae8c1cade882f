"""
Host-side collaborators: drawing, audio and sprites.

The map only talks to the protocols in interfaces.py (re-exported here); the
pygame classes are the implementations the game window plugs in.
"""
import logging
import math
from typing import Dict, Optional, Tuple

import pygame

from .interfaces import Atlas, AudioSink, Player, Renderer
from .tiles import TileKind

logger = logging.getLogger(__name__)

__all__ = [
    "Atlas", "AudioSink", "Player", "Renderer",
    "SpriteAtlas", "PygameRenderer", "PygameAudio", "NullAudio", "generate_quads",
]


# ----------------------------- Sprites --------------------------------
# flat colours for the built-in sheet, used when no image is supplied
PLACEHOLDER_COLORS = {
    TileKind.BRICK: (200, 76, 12),
    TileKind.BUSH_LEFT: (40, 160, 40),
    TileKind.BUSH_RIGHT: (40, 160, 40),
    TileKind.JUMP_BLOCK: (252, 188, 20),
    TileKind.CLOUD_LEFT: (245, 245, 255),
    TileKind.CLOUD_RIGHT: (245, 245, 255),
    TileKind.FLAG_POLE_TOP: (230, 230, 230),
    TileKind.JUMP_BLOCK_HIT: (150, 100, 50),
    TileKind.MUSHROOM_TOP: (220, 40, 40),
    TileKind.MUSHROOM_BOTTOM: (240, 220, 190),
    TileKind.FLAG_POLE_MID: (120, 200, 120),
    TileKind.FLAG_1: (50, 200, 50),
    TileKind.FLAG_2: (30, 150, 30),
    TileKind.FLAG_POLE_BOTTOM: (90, 90, 90),
}
PLACEHOLDER_COLUMNS = 4


def generate_quads(sheet: pygame.Surface, tile_w: int, tile_h: int) -> Dict[int, pygame.Rect]:
    """Slice a sheet into tile rects numbered from 1, row by row."""
    quads = {}
    n = 1
    for y in range(sheet.get_height() // tile_h):
        for x in range(sheet.get_width() // tile_w):
            quads[n] = pygame.Rect(x * tile_w, y * tile_h, tile_w, tile_h)
            n += 1
    return quads


class SpriteAtlas:
    def __init__(self, texture: pygame.Surface, tile_w: int = 16, tile_h: int = 16):
        self.texture = texture
        self.quads = generate_quads(texture, tile_w, tile_h)

    @classmethod
    def load(cls, path: str, tile_w: int = 16, tile_h: int = 16) -> "SpriteAtlas":
        return cls(pygame.image.load(path), tile_w, tile_h)

    @classmethod
    def placeholder(cls, tile_w: int = 16, tile_h: int = 16) -> "SpriteAtlas":
        slots = max(PLACEHOLDER_COLORS)
        rows = math.ceil(slots / PLACEHOLDER_COLUMNS)
        sheet = pygame.Surface((PLACEHOLDER_COLUMNS * tile_w, rows * tile_h), pygame.SRCALPHA)
        for kind, color in PLACEHOLDER_COLORS.items():
            i = kind.value - 1
            cell = pygame.Rect((i % PLACEHOLDER_COLUMNS) * tile_w, (i // PLACEHOLDER_COLUMNS) * tile_h,
                               tile_w, tile_h)
            pygame.draw.rect(sheet, color, cell.inflate(-2, -2) if kind != TileKind.BRICK else cell)
            if kind == TileKind.BRICK:
                pygame.draw.rect(sheet, (120, 40, 0), cell, 1)
        return cls(sheet, tile_w, tile_h)


# ----------------------------- Drawing --------------------------------
class PygameRenderer:
    """Blits onto a target surface shifted by the camera offset."""

    def __init__(self, target: pygame.Surface):
        self.target = target
        self.offset: Tuple[float, float] = (0.0, 0.0)

    def translate(self, cam_x: float, cam_y: float):
        self.offset = (cam_x, cam_y)

    def draw(self, texture: pygame.Surface, quad: Optional[pygame.Rect], x: float, y: float):
        ox, oy = self.offset
        pos = (math.floor(x - ox + 0.5), math.floor(y - oy + 0.5))
        self.target.blit(texture, pos, quad)


# ----------------------------- Audio ----------------------------------
class PygameAudio:
    """Background track streamed through pygame.mixer.music."""

    def __init__(self, path: str):
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(path)
        self.path = path
        self.looping = False

    def set_looping(self, looping: bool):
        self.looping = looping

    def play(self):
        pygame.mixer.music.play(-1 if self.looping else 0)
        logger.info("playing %s (looping=%s)", self.path, self.looping)


class NullAudio:
    def __init__(self):
        self.looping = False
        self.playing = False

    def set_looping(self, looping: bool):
        self.looping = looping

    def play(self):
        self.playing = True
