from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

    from mstgen.model.edge import Edge


def distances_from(
    coords: npt.NDArray[np.float64],
    index: int
) -> npt.NDArray[np.float64]:
    """
    Euclidean distance from one point to every point of a coordinate array.

    Args:
        coords: Array of shape (n, 2) containing the (x, y) coordinates.
        index: Row of `coords` to measure from.

    Returns:
        An array of shape (n,) where entry k is the distance between
        `coords[index]` and `coords[k]` (zero at `index` itself). A distance
        larger than the float64 range (points near +-1e308) is `inf`.
    """
    # Overflow only happens when the true distance is itself out of range.
    with np.errstate(over="ignore"):
        delta = coords - coords[index]
        return np.hypot(delta[:, 0], delta[:, 1])


def edges_to_segments(
    coords: npt.NDArray[np.float64],
    edges: Sequence[Edge]
) -> npt.NDArray[np.float64]:
    """
    Convert tree edges into line segments for a drawing layer.

    Args:
        coords: Array of shape (n, 2) containing the (x, y) coordinates.
        edges: Edges whose `start` and `end` index into `coords`.

    Returns:
        An array of shape (m, 2, 2): for each edge, its start and end coordinates.
    """
    if not edges:
        return np.empty((0, 2, 2), dtype=np.float64)

    starts = np.fromiter((edge.start for edge in edges), dtype=np.int64, count=len(edges))
    ends = np.fromiter((edge.end for edge in edges), dtype=np.int64, count=len(edges))
    return np.stack((coords[starts], coords[ends]), axis=1)
