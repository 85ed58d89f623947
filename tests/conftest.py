"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrices.matrix.factory import (
    BASIC1D_FACTORY,
    BASIC2D_FACTORY,
    CCS_FACTORY,
    CRS_FACTORY,
)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[BASIC1D_FACTORY, BASIC2D_FACTORY, CRS_FACTORY, CCS_FACTORY],
                ids=lambda f: f.name)
def factory(request):
    """Every storage kind, so behaviour is checked independently of layout."""
    return request.param


@pytest.fixture
def small_matrix(factory):
    """[[1, 2], [3, 4]] in the parametrised storage."""
    return factory.create_matrix_from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def spd_array(rng):
    """Well-conditioned symmetric positive definite 5x5 array."""
    m = rng.standard_normal((5, 5))
    return m @ m.T + 5.0 * np.eye(5)
