"""Points on a plane with Euclidean distance and component-wise addition."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    """A point with floating-point coordinates, defaulting to the origin."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Point) -> float:
        """Return the Euclidean distance from this point to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def increment(self) -> Point:
        """Add one to both coordinates in place and return this point."""
        self.x += 1
        self.y += 1
        return self

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"X = {self.x:g}\tY = {self.y:g}"


def distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between points ``a`` and ``b``."""
    return math.hypot(a.x - b.x, a.y - b.y)