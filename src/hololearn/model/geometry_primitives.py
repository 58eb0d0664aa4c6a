"""
Geometric primitives for source positions and marker placement.
"""
from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vector:
    """A 2D displacement in pixel units."""
    x: float
    y: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @classmethod
    def from_polar(cls, length: float, angle_rad: float) -> Vector:
        return cls(length * math.cos(angle_rad), length * math.sin(angle_rad))


@dataclass(frozen=True)
class Point:
    """A point on the simulation raster (x to the right, y down)."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Point from a Point.")
