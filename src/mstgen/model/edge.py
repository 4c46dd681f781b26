from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING

from mstgen.model.geometry_primitives import Line

if TYPE_CHECKING:
    from mstgen.model.point_set import PointSet


@dataclass(frozen=True)
class Edge:
    """
    An accepted spanning-tree edge between two point indices.

    `start` ("from") is the vertex already in the tree when the edge was
    accepted, `end` ("to") the vertex it connected. Weight is their
    Euclidean distance.
    """
    start: int
    end: int
    weight: float

    def to_line(self, points: PointSet) -> Line:
        return Line(start=points.point(self.start), end=points.point(self.end))


def total_weight(edges: Iterable[Edge]) -> float:
    """Sum of edge weights."""
    return sum((edge.weight for edge in edges), 0.0)
