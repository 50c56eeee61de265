"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def example_3x3():
    """[[1, 2, 3], [3, 2, 1], [2, 1, 3]]; det = -12."""
    return Matrix.from_sequence(3, 3, [1, 2, 3, 3, 2, 1, 2, 1, 3])


@pytest.fixture
def example_8x8():
    """Integer 8x8 matrix with det = -15546220."""
    return Matrix.from_sequence(8, 8, [
        8, 6, 1, 0, 1, 9, 5, 9,
        9, 9, 0, 8, 4, 3, 4, 0,
        5, 6, 5, 1, 0, 9, 4, 6,
        4, 9, 8, 3, 5, 1, 10, 6,
        3, 10, 7, 4, 9, 2, 0, 1,
        2, 1, 6, 8, 7, 3, 2, 9,
        1, 7, 1, 4, 4, 9, 0, 0,
        7, 6, 4, 0, 10, 4, 5, 9,
    ])


@pytest.fixture
def example_2x2():
    """[[1, 2], [3, 4]]; inverse [[-2, 1], [3/2, -1/2]]."""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def example_2x2_inverse():
    return Matrix.from_rows([
        [Fraction(-2), Fraction(1)],
        [Fraction(3, 2), Fraction(-1, 2)],
    ])


@pytest.fixture
def singular_3x3():
    """Third row is the sum of the first two."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [5, 7, 9]])


@pytest.fixture
def random_float_6x6(rng):
    """Well-conditioned 6x6 float matrix (diagonally dominant)."""
    X = rng.standard_normal((6, 6)) + 6.0 * np.eye(6)
    return Matrix.from_numpy(X)
