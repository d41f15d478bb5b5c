"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


def make_dominant(rng, n):
    """Random n x n matrix with a strictly dominant positive diagonal."""
    A = rng.standard_normal((n, n))
    A += np.diag(np.sum(np.abs(A), axis=1) + 1.0)
    return A


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def dominant_array(rng):
    """Factory: n -> random diagonally dominant n x n array."""
    return lambda n: make_dominant(rng, n)


@pytest.fixture
def dominant_matrix(rng):
    """6x6 diagonally dominant (hence safely invertible) matrix."""
    return Matrix.from_array(make_dominant(rng, 6))


@pytest.fixture
def rectangular_pair(rng):
    """A 3x4 and a 4x2 matrix with compatible inner dimensions."""
    A = Matrix.from_array(rng.standard_normal((3, 4)))
    B = Matrix.from_array(rng.standard_normal((4, 2)))
    return A, B


@pytest.fixture
def textbook_matrix():
    """[[4, 7], [2, 6]], inverse [[0.6, -0.7], [-0.2, 0.4]], determinant 10."""
    return Matrix.from_rows([[4, 7], [2, 6]])
