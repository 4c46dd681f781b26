"""
Euclidean minimum spanning tree over a growing set of 2D points.

Typical use by a presentation layer::

    state = MstState()
    state.add_point((0.0, 0.0))
    state.add_point((10.0, 0.0))
    state.edges  # [Edge(start=0, end=1, weight=10.0)]
"""
import logging

from mstgen.analysis.mst import MstBuilder, build_mst
from mstgen.model.edge import Edge, total_weight
from mstgen.model.point_set import PointSet
from mstgen.model.state import MstState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Edge",
    "MstBuilder",
    "MstState",
    "PointSet",
    "build_mst",
    "total_weight",
]
