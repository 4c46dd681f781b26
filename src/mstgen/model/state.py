"""
Tree State (Data Model)
=======================
This module defines the data a presentation layer keeps while points are
being placed.

Why is this file needed?
------------------------
1. State Management: It holds the current points and the current spanning
   tree in one place.
2. Decoupling: The presentation layer calls `add_point` on every "add point"
   event and reads `edges` or `segments()` back. No drawing resource lives here.

Classes:
    MstState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

from mstgen.analysis.mst import MstBuilder
from mstgen.model.edge import Edge, total_weight
from mstgen.model.geometry_utils import edges_to_segments
from mstgen.model.point_set import Coordinate, PointSet

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class MstState:
    """
    Points placed so far and the spanning tree over all of them.
    The tree is rebuilt in full after every insertion.
    """
    points: PointSet = field(default_factory=PointSet)
    edges: list[Edge] = field(default_factory=list)

    def add_point(self, coordinate: Coordinate) -> int:
        """Insert a point, rebuild the tree and replace `edges`."""
        index = self.points.insert(coordinate)
        self.edges = MstBuilder.build(self.points)
        logger.debug(f"Point {index} added, tree now has {len(self.edges)} edges.")
        return index

    @property
    def total_weight(self) -> float:
        return total_weight(self.edges)

    def segments(self) -> npt.NDArray[np.float64]:
        """Current edges as an (m, 2, 2) array of endpoint coordinates."""
        return edges_to_segments(self.points.coordinates(), self.edges)

    def reset(self) -> None:
        """Clear all points and edges."""
        self.points = PointSet()
        self.edges = []
        logger.info("Tree state has been reset.")
