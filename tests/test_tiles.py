from scanline_platformer.tiles import COLLIDABLE, TOUCHABLE, TileKind, is_collidable, is_touchable


def test_collidable_kinds():
    assert {k for k in TileKind if is_collidable(k)} == {
        TileKind.BRICK, TileKind.JUMP_BLOCK, TileKind.JUMP_BLOCK_HIT,
        TileKind.MUSHROOM_TOP, TileKind.MUSHROOM_BOTTOM,
    }


def test_touchable_kinds():
    assert {k for k in TileKind if is_touchable(k)} == {
        TileKind.FLAG_POLE_TOP, TileKind.FLAG_POLE_MID, TileKind.FLAG_POLE_BOTTOM,
    }


def test_no_kind_is_both():
    assert not COLLIDABLE & TOUCHABLE


def test_decorations_are_neither():
    for kind in (TileKind.EMPTY, TileKind.CLOUD_LEFT, TileKind.BUSH_RIGHT, TileKind.FLAG_1):
        assert not is_collidable(kind)
        assert not is_touchable(kind)


def test_sprite_slots():
    assert TileKind.EMPTY == -1
    assert TileKind.BRICK == 1
    assert TileKind.FLAG_POLE_BOTTOM == 16
