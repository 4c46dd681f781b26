"""
Point Set (Data Model)
======================
Append-only, ordered collection of the points placed so far.

Why is this file needed?
------------------------
1. Identity: A point's index is its position in insertion order. Index 0 is
   the root of every spanning tree, so the order is part of the result.
2. Snapshots: The tree builder reads a copy of the coordinates, so a build
   never observes points inserted after it started.

Classes:
    PointSet: The container class.
"""
from __future__ import annotations

import logging
import math
import numbers
import operator
from typing import Iterable, Iterator, Optional, Sequence, TYPE_CHECKING

import numpy as np

from mstgen.model.geometry_primitives import Point

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Coordinate = Sequence[float]


class PointSet:
    """
    Ordered sequence of points. Indices are exactly 0..len-1 and never reused.
    """
    def __init__(self, coordinates: Optional[Iterable[Coordinate]] = None) -> None:
        self._points: list[Point] = []
        if coordinates is not None:
            for coordinate in coordinates:
                self.insert(coordinate)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={len(self._points)})"

    def insert(self, coordinate: Coordinate) -> int:
        """
        Append a point and return its index.

        Args:
            coordinate: (x, y) pair of finite numbers.

        Raises:
            ValueError: If the coordinate is not a pair of finite numbers.
        """
        x, y = self._validate(coordinate)
        index = len(self._points)
        self._points.append(Point(x=x, y=y, id=index))
        logger.debug(f"Inserted point {index} at ({x}, {y})")
        return index

    def get(self, index: int) -> tuple[float, float]:
        """Coordinate of a previously inserted point."""
        return self.point(index).coordinate

    def point(self, index: int) -> Point:
        """
        Point record of a previously inserted point.

        Raises:
            IndexError: If `index` is not an integer in 0..len-1.
        """
        try:
            index = operator.index(index)
        except TypeError as e:
            raise IndexError(f"Point index must be an integer, got {index!r}.") from e

        # Negative indices are a caller bug, not Python-style wrap-around.
        if not 0 <= index < len(self._points):
            raise IndexError(f"Point index {index} out of range for {len(self._points)} points.")
        return self._points[index]

    def coordinates(self) -> npt.NDArray[np.float64]:
        """Snapshot of all coordinates as an (n, 2) array."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([p.coordinate for p in self._points], dtype=np.float64)

    @staticmethod
    def _validate(coordinate: Coordinate) -> tuple[float, float]:
        message = f"Coordinate must be an (x, y) pair of numbers, got {coordinate!r}."
        # Strings and bytes unpack into characters or byte values.
        if isinstance(coordinate, (str, bytes, bytearray)):
            raise ValueError(message)

        try:
            x, y = coordinate
        except (TypeError, ValueError) as e:
            raise ValueError(message) from e

        if not (isinstance(x, numbers.Real) and isinstance(y, numbers.Real)):
            raise ValueError(message)
        x, y = float(x), float(y)

        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Coordinate must be finite, got ({x}, {y}).")
        return x, y
