"""
Minimum Spanning Tree Builder
=============================
Computes the Euclidean minimum spanning tree of a PointSet with Prim's
algorithm grown from point 0.

Frontier entries live in a binary min-heap as (weight, sequence, start, end)
tuples. Entries whose `end` is already in the tree are dropped when popped
(lazy deletion). `sequence` increases with every push, so entries of equal
weight pop in the order they were pushed and the output is reproducible.
"""
from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING

import numpy as np

from mstgen.model.edge import Edge, total_weight
from mstgen.model.geometry_utils import distances_from

if TYPE_CHECKING:
    from mstgen.model.point_set import PointSet

logger = logging.getLogger(__name__)

ROOT_INDEX = 0

FrontierEntry = tuple[float, int, int, int]


class MstBuilder:
    """
    Stateless builder; every call recomputes the tree from scratch.
    """

    @staticmethod
    def build(points: PointSet) -> list[Edge]:
        """
        Build the minimum spanning tree of all points.

        Args:
            points: The point set. Read once, as a coordinate snapshot.

        Returns:
            The n-1 tree edges in the order they were accepted, or an empty
            list for fewer than two points.
        """
        coords = points.coordinates()
        n_points = len(coords)
        if n_points == 0:
            return []

        visited = np.zeros(n_points, dtype=bool)
        sequence = itertools.count()
        # Root self-loop: the first pop visits the root without emitting an edge.
        frontier: list[FrontierEntry] = [(0.0, next(sequence), ROOT_INDEX, ROOT_INDEX)]
        edges: list[Edge] = []

        while frontier:
            weight, _, start, end = heapq.heappop(frontier)
            if visited[end]:
                continue

            visited[end] = True
            if start != end:
                edges.append(Edge(start=start, end=end, weight=weight))

            distances = distances_from(coords, end)
            for k in np.flatnonzero(~visited):
                heapq.heappush(frontier, (float(distances[k]), next(sequence), end, int(k)))

        logger.debug(
            f"Built spanning tree over {n_points} points: "
            f"{len(edges)} edges, total weight {total_weight(edges):.6g}"
        )
        return edges


def build_mst(points: PointSet) -> list[Edge]:
    """Module-level shortcut for MstBuilder.build."""
    return MstBuilder.build(points)
