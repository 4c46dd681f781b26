import logging

import numpy as np
import pytest

from mstgen import Edge, MstBuilder, MstState


def test_new_state_is_empty():
    state = MstState()

    assert len(state.points) == 0
    assert state.edges == []
    assert state.total_weight == 0.0
    assert state.segments().shape == (0, 2, 2)


def test_add_point_rebuilds_tree():
    state = MstState()

    assert state.add_point((0, 0)) == 0
    assert state.edges == []

    assert state.add_point((10, 0)) == 1
    assert state.edges == [Edge(0, 1, 10.0)]

    state.add_point((5, 0))
    assert state.edges == [Edge(0, 2, 5.0), Edge(2, 1, 5.0)]
    assert state.total_weight == pytest.approx(10.0)


def test_edges_are_replaced_not_mutated():
    state = MstState()
    state.add_point((0, 0))
    state.add_point((4, 0))
    first = state.edges

    state.add_point((2, 0))

    assert first == [Edge(0, 1, 4.0)]
    assert state.edges is not first


def test_edges_match_full_rebuild(rng):
    state = MstState()
    for coordinate in rng.uniform(0, 20, size=(15, 2)):
        state.add_point(coordinate)
        assert state.edges == MstBuilder.build(state.points)


def test_invalid_point_keeps_previous_tree():
    state = MstState()
    state.add_point((0, 0))
    state.add_point((1, 0))

    with pytest.raises(ValueError):
        state.add_point((float("nan"), 0))

    assert len(state.points) == 2
    assert state.edges == [Edge(0, 1, 1.0)]


def test_segments():
    state = MstState()
    for coordinate in [(0, 0), (10, 0), (5, 5)]:
        state.add_point(coordinate)

    expected = np.array([
        [[0.0, 0.0], [5.0, 5.0]],
        [[5.0, 5.0], [10.0, 0.0]],
    ])
    np.testing.assert_array_equal(state.segments(), expected)


def test_reset(caplog):
    state = MstState()
    state.add_point((0, 0))
    state.add_point((1, 1))

    with caplog.at_level(logging.INFO, logger="mstgen"):
        state.reset()

    assert len(state.points) == 0
    assert state.edges == []
    assert "Tree state has been reset." in caplog.text
    assert state.add_point((3, 3)) == 0
