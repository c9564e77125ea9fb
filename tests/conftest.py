"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Dense, mat


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_2x3():
    """Small integer matrix used across indexing and transpose tests."""
    return mat([0, 1, 2], [3, 4, 5])


@pytest.fixture
def random_float(rng):
    """Random 4x3 float64 matrix."""
    return Dense(rng.standard_normal(12), 4, 3)
