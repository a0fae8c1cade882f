import pytest

from scanline_platformer.errors import OutOfBounds
from scanline_platformer.grid import TileGrid
from scanline_platformer.tiles import TileKind


def test_starts_empty():
    grid = TileGrid(7, 5)
    assert all(kind == TileKind.EMPTY for _, _, kind in grid)
    assert len(list(grid)) == 35


def test_set_then_get_everywhere():
    grid = TileGrid(6, 4)
    for y in range(1, 5):
        for x in range(1, 7):
            grid.set(x, y, TileKind.BRICK)
            assert grid.get(x, y) == TileKind.BRICK
            grid.set(x, y, TileKind.CLOUD_LEFT)
            assert grid.get(x, y) == TileKind.CLOUD_LEFT


def test_cells_do_not_alias():
    grid = TileGrid(4, 3)
    grid.set(4, 1, TileKind.BRICK)
    assert grid.get(1, 2) == TileKind.EMPTY
    assert grid.rows()[0][3] == TileKind.BRICK


@pytest.mark.parametrize("x,y", [(0, 1), (1, 0), (5, 1), (1, 4), (-1, -1)])
def test_out_of_bounds(x, y):
    grid = TileGrid(4, 3)
    with pytest.raises(OutOfBounds):
        grid.get(x, y)
    with pytest.raises(OutOfBounds):
        grid.set(x, y, TileKind.BRICK)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        TileGrid(2, 2).get(3, 1)


def test_fill_column_is_inclusive():
    grid = TileGrid(3, 6)
    grid.fill_column(2, 3, 6, TileKind.BRICK)
    assert [grid.get(2, y) for y in range(1, 7)] == [TileKind.EMPTY] * 2 + [TileKind.BRICK] * 4


def test_fill_column_inverted_range_writes_nothing():
    grid = TileGrid(3, 6)
    grid.fill_column(2, 5, 4, TileKind.BRICK)
    assert all(kind == TileKind.EMPTY for _, _, kind in grid)


def test_iterates_row_major():
    grid = TileGrid(2, 2)
    assert [(x, y) for x, y, _ in grid] == [(1, 1), (2, 1), (1, 2), (2, 2)]


def test_to_text():
    grid = TileGrid(3, 2)
    grid.fill_column(1, 2, 2, TileKind.BRICK)
    grid.set(3, 1, TileKind.JUMP_BLOCK)
    assert grid.to_text() == "..?\n#.."
