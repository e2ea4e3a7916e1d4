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
def random_vector3_pairs(rng):
    """Pairs of random (almost surely non-parallel) 3-D component triples."""
    return [
        (rng.uniform(-10.0, 10.0, size=3), rng.uniform(-10.0, 10.0, size=3))
        for _ in range(20)
    ]
