"""A rectangular grid of tiles addressed by position."""

from __future__ import annotations

from typing import Generic, TypeVar

from tilerogue.position import Position

T = TypeVar("T")


class TileMap(Generic[T]):
    """Tiles stored column-major: ``tiles[x][y]``."""

    def __init__(self, tiles: list[list[T]]) -> None:
        self.tiles = tiles

    def in_bounds(self, pos: Position) -> bool:
        """Whether ``pos`` addresses a tile in the map."""
        return pos.x < len(self.tiles) and pos.y < len(self.tiles[0])

    def __getitem__(self, pos: Position) -> T:
        return self.tiles[pos.x][pos.y]

    def __setitem__(self, pos: Position, tile: T) -> None:
        self.tiles[pos.x][pos.y] = tile

    def __repr__(self) -> str:
        return f"TileMap({self.tiles!r})"