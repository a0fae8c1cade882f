from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import OutOfBounds
from .tiles import GLYPHS, TileKind


@dataclass(frozen=True)
class TileRef:
    """A tile kind together with the 1-based cell it was read from."""
    x: int
    y: int
    kind: TileKind


class TileGrid:
    """Fixed-size grid of tile kinds addressed with 1-based (x, y)."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells: List[TileKind] = [TileKind.EMPTY] * (width * height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return (y - 1) * self.width + (x - 1)

    def get(self, x: int, y: int) -> TileKind:
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, kind: TileKind) -> None:
        self._cells[self._index(x, y)] = TileKind(kind)

    def fill_column(self, x: int, top: int, bottom: int, kind: TileKind) -> None:
        # inclusive; an inverted range writes nothing
        for y in range(top, bottom + 1):
            self.set(x, y, kind)

    def __iter__(self) -> Iterator[Tuple[int, int, TileKind]]:
        # row-major, the order tiles are drawn in
        for i, kind in enumerate(self._cells):
            yield i % self.width + 1, i // self.width + 1, kind

    def rows(self) -> List[List[TileKind]]:
        w = self.width
        return [self._cells[r * w:(r + 1) * w] for r in range(self.height)]

    def to_text(self) -> str:
        return "\n".join("".join(GLYPHS[k] for k in row) for row in self.rows())
