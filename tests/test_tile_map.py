import pytest

from tilerogue.position import Position
from tilerogue.tile_map import TileMap


@pytest.fixture
def grid():
    return TileMap([["a", "b", "c"], ["d", "e", "f"]])


def test_indexing_is_column_major(grid):
    assert grid[Position(0, 2)] == "c"
    assert grid[Position(1, 0)] == "d"


def test_set_then_get(grid):
    grid[Position(1, 1)] = "z"
    assert grid[Position(1, 1)] == "z"
    assert grid.tiles[1][1] == "z"


def test_in_bounds(grid):
    assert grid.in_bounds(Position(1, 2))
    assert not grid.in_bounds(Position(2, 0))
    assert not grid.in_bounds(Position(0, 3))


def test_out_of_bounds_access_raises(grid):
    with pytest.raises(IndexError):
        grid[Position(5, 0)]


def test_empty_map_has_nothing_in_bounds():
    assert not TileMap([]).in_bounds(Position(0, 0))