from enum import IntEnum


class TileKind(IntEnum):
    """Tile identifiers. Values are the sprite-sheet slots used to draw them."""
    EMPTY = -1
    BRICK = 1
    BUSH_LEFT = 2
    BUSH_RIGHT = 3
    JUMP_BLOCK = 5
    CLOUD_LEFT = 6
    CLOUD_RIGHT = 7
    FLAG_POLE_TOP = 8
    JUMP_BLOCK_HIT = 9
    MUSHROOM_TOP = 10
    MUSHROOM_BOTTOM = 11
    FLAG_POLE_MID = 12
    FLAG_1 = 13
    FLAG_2 = 14
    FLAG_POLE_BOTTOM = 16


# block the player
COLLIDABLE = frozenset({
    TileKind.BRICK, TileKind.JUMP_BLOCK, TileKind.JUMP_BLOCK_HIT,
    TileKind.MUSHROOM_TOP, TileKind.MUSHROOM_BOTTOM,
})

# trigger without blocking (end of level)
TOUCHABLE = frozenset({
    TileKind.FLAG_POLE_TOP, TileKind.FLAG_POLE_MID, TileKind.FLAG_POLE_BOTTOM,
})

# single characters for ASCII dumps
GLYPHS = {
    TileKind.EMPTY: ".",
    TileKind.BRICK: "#",
    TileKind.BUSH_LEFT: "b",
    TileKind.BUSH_RIGHT: "b",
    TileKind.JUMP_BLOCK: "?",
    TileKind.JUMP_BLOCK_HIT: "!",
    TileKind.CLOUD_LEFT: "c",
    TileKind.CLOUD_RIGHT: "c",
    TileKind.MUSHROOM_TOP: "M",
    TileKind.MUSHROOM_BOTTOM: "m",
    TileKind.FLAG_POLE_TOP: "o",
    TileKind.FLAG_POLE_MID: "|",
    TileKind.FLAG_POLE_BOTTOM: "|",
    TileKind.FLAG_1: "F",
    TileKind.FLAG_2: "F",
}


def is_collidable(kind: TileKind) -> bool:
    return kind in COLLIDABLE


def is_touchable(kind: TileKind) -> bool:
    return kind in TOUCHABLE
