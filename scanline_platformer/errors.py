"""Errors raised by the tile map and its configuration."""


class MapError(Exception):
    """Base class for tile map failures."""


class OutOfBounds(MapError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"tile ({x}, {y}) outside grid 1..{width} x 1..{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class InvalidConfiguration(MapError, ValueError):
    pass
