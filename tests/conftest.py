"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def lower_4x4(rng):
    """Well-conditioned random 4x4 lower-triangular matrix."""
    a = np.tril(rng.standard_normal((4, 4)))
    a[np.diag_indices(4)] = rng.uniform(1.0, 3.0, 4) * rng.choice([-1.0, 1.0], 4)
    return a


@pytest.fixture
def spd_3x3():
    """Classic symmetric positive definite example with integer Cholesky factor."""
    return np.array([
        [4.0, 12.0, -16.0],
        [12.0, 37.0, -43.0],
        [-16.0, -43.0, 98.0],
    ])


@pytest.fixture
def hermitian_3x3():
    """Hermitian positive definite complex matrix."""
    return np.array([
        [4.0 + 0j, 1.0 - 2.0j, 0.5j],
        [1.0 + 2.0j, 6.0 + 0j, 1.0 + 1.0j],
        [-0.5j, 1.0 - 1.0j, 5.0 + 0j],
    ])
