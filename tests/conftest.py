"""
pytest configuration and shared fixtures.

Failure policy under test: caller-contract violations (shape mismatch,
out-of-range index, bad element type) raise exceptions from
yamatrix.core.exceptions. Nothing aborts the process.
"""

import numpy as np
import pytest

from yamatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_pair(rng):
    """Two random 3x4 int64 matrices of the same shape."""
    a = Matrix.from_rows(rng.integers(-100, 100, size=(3, 4)))
    b = Matrix.from_rows(rng.integers(-100, 100, size=(3, 4)))
    return a, b


@pytest.fixture
def float_pair(rng):
    """Two random 4x2 float64 matrices of the same shape."""
    a = Matrix.from_rows(rng.standard_normal((4, 2)))
    b = Matrix.from_rows(rng.standard_normal((4, 2)))
    return a, b


@pytest.fixture
def counting():
    """2x3 int matrix [[0, 1, 2], [3, 4, 5]]."""
    return Matrix.from_rows([[0, 1, 2], [3, 4, 5]])
