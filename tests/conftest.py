import logging

import numpy as np
import pytest

from mstgen import PointSet


@pytest.fixture(scope="function")
def rng():
    """Seeded generator so random point sets are reproducible."""
    return np.random.default_rng(20240611)


@pytest.fixture(scope="function")
def unit_square():
    """Unit square corners; four sides of equal weight exercise the tie-break."""
    return PointSet([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)])


@pytest.fixture(scope="function")
def random_points(rng):
    """Factory for PointSets of uniformly scattered points."""
    def _make(n_points: int, scale: float = 100.0) -> PointSet:
        return PointSet(rng.uniform(0.0, scale, size=(n_points, 2)))
    return _make


@pytest.fixture(scope="function")
def package_logger():
    """
    The 'mstgen' logger, restored to its previous handlers and level afterwards.
    """
    logger = logging.getLogger("mstgen")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
