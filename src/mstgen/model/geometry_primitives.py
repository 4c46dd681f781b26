"""
Geometric Primitives for the point set and its spanning tree.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import math

@dataclass
class Vector:
    """
    A vector in 2D space representing direction and magnitude.
    """
    x: float
    y: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Point:
    """A point in the plane, tagged with its index in a PointSet."""
    x: float
    y: float
    id: Optional[int] = None  # Assigned by PointSet.insert

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return (self - other).magnitude

    @property
    def coordinate(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass
class Line:
    """A straight line between two points, e.g. one drawn tree edge."""
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)
