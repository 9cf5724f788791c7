"""
pytest configuration and shared fixtures.
"""

import math

import numpy as np
import pytest

from geode import Matrix, Vector


class Degrees:
    """Minimal angle object exposing ``to_radians()``."""

    def __init__(self, value):
        self.value = value

    def to_radians(self):
        return math.radians(self.value)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def degrees():
    """Factory for angle objects measured in degrees."""
    return Degrees


@pytest.fixture
def matrix3():
    """3x3 integer matrix used by the product and traversal tests."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def vectors4():
    """Four-component vectors with known pairwise angles."""
    root3 = math.sqrt(3)
    return {
        "a": Vector([root3, 1, 0.5, -0.25]),
        "b": Vector([-root3, 1, 0.5, 0.25]),
        "c": Vector([0, -1, 1, 0.5]),
        "d": Vector([root3, -1, -1, -0.5]),
    }
