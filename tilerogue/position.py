"""Grid positions and compass directions."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

_COORD_MAX = 2**64 - 1


class Direction(enum.Enum):
    """A step direction on the grid."""

    UP = enum.auto()
    RIGHT = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    UP_RIGHT = enum.auto()
    DOWN_RIGHT = enum.auto()
    DOWN_LEFT = enum.auto()
    UP_LEFT = enum.auto()
    NONE = enum.auto()


@dataclass(frozen=True)
class Position:
    """A non-negative cell coordinate on the map grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name, value in (("x", self.x), ("y", self.y)):
            if not 0 <= value <= _COORD_MAX:
                raise ValueError(f"coordinate {name}={value} is out of range")

    def is_valid(self, width: int, height: int) -> bool:
        """Whether the position lies inside a grid of the given size."""
        return self.x < width and self.y < height

    def _euclidean(self, other: Position) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(float(dx * dx + dy * dy))

    def distance_to(self, other: Position) -> int:
        """Euclidean distance to ``other``, rounded down."""
        return math.floor(self._euclidean(other))

    def in_range(self, other: Position, distance: int) -> bool:
        """Whether ``other`` lies within ``distance`` tiles (Euclidean)."""
        return self._euclidean(other) <= distance

    def north(self) -> Position | None:
        if self.y == 0:
            return None
        return Position(self.x, self.y - 1)

    def east(self) -> Position:
        return Position(self.x + 1, self.y)

    def south(self) -> Position:
        return Position(self.x, self.y + 1)

    def west(self) -> Position | None:
        if self.x == 0:
            return None
        return Position(self.x - 1, self.y)

    def north_east(self) -> Position | None:
        # Guarded on x only; a zero y makes the step invalid.
        if self.x == 0:
            return None
        return Position(self.x - 1, self.y - 1)

    def south_east(self) -> Position:
        return Position(self.x + 1, self.y + 1)

    def south_west(self) -> Position | None:
        # Guarded on y only; a zero x makes the step invalid.
        if self.y == 0:
            return None
        return Position(self.x - 1, self.y + 1)

    def north_west(self) -> Position | None:
        if self.x == 0 or self.y == 0:
            return None
        return Position(self.x - 1, self.y - 1)

    def positions_around(self) -> list[Position]:
        """Neighbouring positions that exist, in a fixed order."""
        candidates = (
            self.north(),
            self.west(),
            self.east(),
            self.south(),
            self.south_west(),
            self.north_east(),
            self.south_east(),
            self.north_west(),
        )
        return [pos for pos in candidates if pos is not None]


POSITION_INVALID = Position(_COORD_MAX, _COORD_MAX)