"""Floating-point points, sizes and rectangles for widget layout."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class PointF:
    x: float
    y: float

    @classmethod
    def zero(cls) -> PointF:
        return cls(0.0, 0.0)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def is_valid(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass
class QuadF:
    """A rectangle with origin (x, y) and extent (w, h)."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def zero(cls) -> QuadF:
        return cls(0.0, 0.0, 0.0, 0.0)

    def is_valid(self) -> bool:
        return self.w > 0.0 and self.h > 0.0

    def is_zero(self) -> bool:
        return self.w == 0.0 and self.h == 0.0

    def is_empty(self) -> bool:
        return self.w <= 0.0 or self.h <= 0.0

    def area(self) -> float:
        return 0.0 if self.is_empty() else self.w * self.h

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; right and bottom edges excluded."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


@dataclass
class SizeF:
    w: float
    h: float

    @classmethod
    def zero(cls) -> SizeF:
        return cls(0.0, 0.0)

    def is_zero(self) -> bool:
        return self.w == 0.0 and self.h == 0.0

    def is_valid(self) -> bool:
        return self.w > 0.0 and self.h > 0.0

    def to_quad(self, pos: PointF) -> QuadF:
        return QuadF(pos.x, pos.y, self.w, self.h)