"""
Scanline terrain generator.

Walks the grid one column at a time from left to right. Each step rolls for a
feature, stamps it into the grid and moves the cursor past it. The last
columns are reserved for the closing pyramid and the flagpole, which are
always built regardless of what the sweep produced.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Optional

from . import config as cfg
from .animation import Animation, AnimationRegistry
from .grid import TileGrid
from .rng import RandomStream
from .tiles import TileKind

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    columns: int = 0
    clouds: int = 0
    pyramids: int = 0
    descents: int = 0
    pits: int = 0
    mushrooms: int = 0
    bushes: int = 0
    jump_blocks: int = 0
    gaps: int = 0


class TerrainGenerator:
    def __init__(self, stream: RandomStream):
        self.stream = stream
        self.grid: Optional[TileGrid] = None
        self.midline = 0

    # ------------------------- Sweep ----------------------------------
    def generate(self, grid: TileGrid, animations: AnimationRegistry) -> GenerationStats:
        self.grid = grid
        self.midline = grid.height // 2
        stats = GenerationStats()
        roll = self.stream.roll
        w = grid.width

        x = 1
        while x <= w - cfg.END_RESERVED:
            # clouds float above whatever this column becomes
            if x < w - 2 and roll(cfg.CLOUD_CHANCE) == 1:
                self._cloud(x, roll(self.midline - cfg.CLOUD_CLEARANCE))
                stats.clouds += 1

            # rolls are drawn before position guards; draw order never depends on x
            if roll(cfg.PYRAMID_CHANCE) == 1 and cfg.PYRAMID_MIN_X < x < w - 2 * cfg.END_RESERVED:
                x = self._pyramid_run(x, stats)
            elif roll(cfg.MUSHROOM_CHANCE) == 1:
                self._mushroom(x)
                stats.mushrooms += 1
                x += 1
            elif roll(cfg.BUSH_CHANCE) == 1 and x < w - 3:
                self._bush(x)
                stats.bushes += 1
                x += 2
            elif roll(cfg.GAP_CHANCE) != 1:
                self._ground(x)
                if roll(cfg.JUMP_BLOCK_CHANCE) == 1:
                    grid.set(x, self.midline - cfg.JUMP_BLOCK_RISE, TileKind.JUMP_BLOCK)
                    stats.jump_blocks += 1
                stats.columns += 1
                x += 1
            else:
                stats.gaps += 1
                x += 2

        while x <= w:
            self._ground(x)
            stats.columns += 1
            if x == w - cfg.END_PYRAMID_BASE:
                self._steps_up(x, cfg.END_PYRAMID_HEIGHT, ground=False)
            if x == w - cfg.FLAG_POSITION:
                self._flagpole(x, animations)
            x += 1

        logger.debug("generated %dx%d terrain: %s", w, grid.height, asdict(stats))
        return stats

    # ------------------------- Features -------------------------------
    def _ground(self, x: int, kind: TileKind = TileKind.BRICK):
        self.grid.fill_column(x, self.midline, self.grid.height, kind)

    def _cloud(self, x: int, row: int):
        self.grid.set(x, row, TileKind.CLOUD_LEFT)
        self.grid.set(x + 1, row, TileKind.CLOUD_RIGHT)

    def _steps_up(self, x: int, height: int, ground: bool = True):
        # column x+i gets a stack of i bricks on top of the midline
        for i in range(1, height + 1):
            self.grid.fill_column(x + i, self.midline - i, self.midline - 1, TileKind.BRICK)
            if ground:
                self._ground(x + i)

    def _steps_down(self, x: int, height: int):
        for j in range(1, height + 1):
            self.grid.fill_column(x + j, self.midline - (height - j), self.midline - 1, TileKind.BRICK)
            self._ground(x + j)

    def _pyramid_run(self, x: int, stats: GenerationStats) -> int:
        """Rising pyramid, a three column pit or ledge, maybe a falling pyramid."""
        height = self.stream.between(*cfg.PYRAMID_HEIGHT_RANGE)
        self._steps_up(x, height)
        stats.pyramids += 1
        x += height

        # the whole block is either solid or open, never mixed
        fill = TileKind.BRICK if self.stream.roll(cfg.PIT_FILL_CHANCE) == 1 else TileKind.EMPTY
        for i in range(1, cfg.PYRAMID_PIT_WIDTH + 1):
            self._ground(x + i, fill)
        if fill is TileKind.EMPTY:
            stats.pits += 1
        x += cfg.PYRAMID_PIT_WIDTH

        if self.stream.roll(cfg.DESCENT_CHANCE) == 1:
            height += self.stream.between(*cfg.DESCENT_EXTRA_RANGE)
            self._steps_down(x, height)
            stats.descents += 1
            x += height
        return x

    def _mushroom(self, x: int):
        self.grid.set(x, self.midline - 2, TileKind.MUSHROOM_TOP)
        self.grid.set(x, self.midline - 1, TileKind.MUSHROOM_BOTTOM)
        self._ground(x)

    def _bush(self, x: int):
        self.grid.set(x, self.midline - 1, TileKind.BUSH_LEFT)
        self._ground(x)
        self.grid.set(x + 1, self.midline - 1, TileKind.BUSH_RIGHT)
        self._ground(x + 1)

    def _flagpole(self, x: int, animations: AnimationRegistry):
        top = self.midline - cfg.FLAG_POLE_HEIGHT
        self.grid.set(x, self.midline - 1, TileKind.FLAG_POLE_BOTTOM)
        self.grid.fill_column(x, top, self.midline - 2, TileKind.FLAG_POLE_MID)
        self.grid.set(x, top, TileKind.FLAG_POLE_TOP)

        flag = Animation([TileKind.FLAG_1, TileKind.FLAG_2], cfg.FLAG_INTERVAL)
        animations.add(x, top, flag, *cfg.FLAG_OFFSET)
