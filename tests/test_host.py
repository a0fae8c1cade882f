import pygame

from scanline_platformer.host import NullAudio, PygameRenderer, SpriteAtlas, generate_quads
from scanline_platformer.tiles import TileKind


def test_generate_quads_numbers_row_by_row():
    quads = generate_quads(pygame.Surface((64, 32)), 16, 16)
    assert len(quads) == 8
    assert quads[1] == pygame.Rect(0, 0, 16, 16)
    assert quads[4] == pygame.Rect(48, 0, 16, 16)
    assert quads[6] == pygame.Rect(16, 16, 16, 16)


def test_generate_quads_ignores_partial_tiles():
    assert len(generate_quads(pygame.Surface((40, 20)), 16, 16)) == 2


def test_placeholder_has_a_slot_for_every_kind():
    atlas = SpriteAtlas.placeholder()
    for kind in TileKind:
        if kind != TileKind.EMPTY:
            assert kind in atlas.quads


def test_placeholder_paints_bricks():
    atlas = SpriteAtlas.placeholder()
    quad = atlas.quads[TileKind.BRICK]
    assert tuple(atlas.texture.get_at(quad.center))[:3] == (200, 76, 12)


def test_renderer_applies_camera_offset():
    target = pygame.Surface((64, 64))
    texture = pygame.Surface((16, 16))
    texture.fill((255, 0, 0))
    renderer = PygameRenderer(target)
    renderer.translate(10, -3)
    renderer.draw(texture, pygame.Rect(0, 0, 4, 4), 20, 5)
    assert tuple(target.get_at((10, 8)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((13, 11)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((14, 8)))[:3] == (0, 0, 0)


def test_null_audio():
    audio = NullAudio()
    audio.set_looping(True)
    audio.play()
    assert audio.looping and audio.playing
