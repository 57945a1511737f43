"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_pair(rng):
    """Two random 4x4 float64 matrices."""
    a = Matrix.from_array(rng.standard_normal((4, 4)))
    b = Matrix.from_array(rng.standard_normal((4, 4)))
    return a, b


@pytest.fixture
def counting_3x3():
    """[[1, 2, 3], [4, 5, 6], [7, 8, 9]] as int64."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
