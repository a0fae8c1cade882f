#!/usr/bin/env python3
"""
Side-scrolling viewer for a procedurally generated tile level (Pygame)

Features
- Level built column by column by the scanline generator: pyramids, pits,
  mushrooms, bushes, clouds and jump blocks, closed by a flagpole.
- Deterministic level via a visible seed.
- Camera follows a stand-in player that glides left and right.

Controls
- Left/Right or A/D: scroll
- Esc: quit
- R: regenerate at current seed
- N: new seed
- F1: show/hide debug overlay

Run headless with --dump to print the level as text.
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

import pygame

from . import config as cfg
from .errors import InvalidConfiguration
from .host import NullAudio, PygameAudio, PygameRenderer, SpriteAtlas
from .map import Map
from .rng import SeededStream

logger = logging.getLogger(__name__)

PLAYER_W, PLAYER_H = 12, 20
PLAYER_COLOR = (240, 240, 255)


# ----------------------------- Player ---------------------------------
class ScrollPlayer:
    """Keyboard-driven marker the camera follows. No physics."""

    def __init__(self, level: Map):
        self.map = level
        self.x = 10.0
        self.y = (level.config.midline - 1) * level.tile_height - PLAYER_H
        self.sprite = pygame.Surface((PLAYER_W, PLAYER_H))
        self.sprite.fill(PLAYER_COLOR)

    def update(self, dt: float):
        keys = pygame.key.get_pressed()
        dx = 0.0
        if keys[pygame.K_LEFT] or keys[pygame.K_a]:
            dx -= cfg.SCROLL_SPEED * dt
        if keys[pygame.K_RIGHT] or keys[pygame.K_d]:
            dx += cfg.SCROLL_SPEED * dt
        self.x = min(max(0.0, self.x + dx), self.map.map_width_pixels - PLAYER_W)

    def render(self, renderer):
        renderer.draw(self.sprite, None, self.x, self.y)


# ----------------------------- Game -----------------------------------
class Game:
    def __init__(self, config: cfg.MapConfig, sprites: Optional[str] = None, music: Optional[str] = None):
        self.config = config
        self.sprites_path = sprites
        self.music_path = music
        pygame.init()
        pygame.display.set_caption("Scanline Platformer")
        self.screen = pygame.display.set_mode((cfg.WINDOW_WIDTH, cfg.WINDOW_HEIGHT))
        self.canvas = pygame.Surface((cfg.VIRTUAL_WIDTH, cfg.VIRTUAL_HEIGHT))
        self.renderer = PygameRenderer(self.canvas)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 16)

        if sprites:
            self.atlas = SpriteAtlas.load(sprites, config.tile_width, config.tile_height)
        else:
            self.atlas = SpriteAtlas.placeholder(config.tile_width, config.tile_height)
        self.audio = self._open_audio()

        self.show_debug = False
        self.reset_map(config.seed)

    def _open_audio(self):
        if not self.music_path:
            return NullAudio()
        try:
            return PygameAudio(self.music_path)
        except pygame.error as e:
            logger.warning("could not load music %s: %s", self.music_path, e)
            return NullAudio()

    def reset_map(self, seed: Optional[int]):
        self.map = Map(self.config, SeededStream(seed), self.atlas, self.audio, ScrollPlayer)
        self.seed = self.map.stream.seed

    # --------------------------- Update --------------------------------
    def update(self, dt: float) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_F1:
                    self.show_debug = not self.show_debug
                if event.key == pygame.K_r:
                    self.reset_map(self.seed)
                if event.key == pygame.K_n:
                    self.reset_map(random.randint(1, 1_000_000_000))

        self.map.update(min(dt, 1.0 / 20.0))  # avoid huge steps
        return True

    # --------------------------- Render --------------------------------
    def draw_hud(self):
        hud = f"Seed: {self.seed}   X: {int(self.map.player.x)}   Cam: {int(self.map.cam_x)}"
        self.screen.blit(self.font.render(hud, True, (15, 15, 20)), (10, 10))

        if self.show_debug:
            s = self.map.stats
            lines = [
                f"map={self.map.map_width}x{self.map.map_height} midline={self.config.midline}",
                f"pyramids={s.pyramids} descents={s.descents} pits={s.pits} gaps={s.gaps}",
                f"mushrooms={s.mushrooms} bushes={s.bushes} clouds={s.clouds} blocks={s.jump_blocks}",
                f"fps={self.clock.get_fps():.0f}",
            ]
            for i, txt in enumerate(lines):
                self.screen.blit(self.font.render(txt, True, (0, 0, 0)), (10, 30 + 18 * i))

    def render(self):
        self.canvas.fill(cfg.SKY_COLOR)
        self.renderer.translate(self.map.cam_x, self.map.cam_y)
        self.map.render(self.renderer)
        pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
        self.draw_hud()
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(cfg.FPS) / 1000.0
            running = self.update(dt)
            self.render()
        pygame.quit()


# ----------------------------- CLI ------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scanline-platformer",
                                     description="Procedurally generated side-scrolling tile level")
    parser.add_argument("--seed", type=int, default=None, help="generation seed (random if omitted)")
    parser.add_argument("--width", type=int, default=cfg.MAP_WIDTH, help="map width in tiles")
    parser.add_argument("--height", type=int, default=cfg.MAP_HEIGHT, help="map height in tiles")
    parser.add_argument("--sprites", default=None, help="16x16 sprite sheet image")
    parser.add_argument("--music", default=None, help="background track to loop")
    parser.add_argument("--dump", action="store_true", help="print the level as text and exit")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = cfg.MapConfig(width=args.width, height=args.height, seed=args.seed)
    try:
        config.validate()
    except InvalidConfiguration as e:
        parser.error(str(e))

    if args.dump:
        level = Map(config)
        print(f"seed {level.stream.seed}")
        print(level.tiles.to_text())
        return 0

    Game(config, args.sprites, args.music).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
