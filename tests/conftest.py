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
def sample_values():
    """Six-value sample with known quartiles and fences."""
    return [54.0, 93.0, 87.0, 3.5, 10.0, 12.0]


@pytest.fixture
def correlated_pair(rng):
    """Noisy linear pair without ties."""
    x = rng.standard_normal(60)
    y = 0.7 * x + 0.5 * rng.standard_normal(60)
    return x, y
