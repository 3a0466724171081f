"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from ldarobust.core.compute.random import RandomSource
from ldarobust.sampling import Sample, generate


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def source():
    """Seeded RandomSource for reproducible tests."""
    return RandomSource(42)


@pytest.fixture
def baseline_sample():
    """Full-size baseline sample: 1000 rows per class, normal latents."""
    return generate(1000, 1000, source=7)


@pytest.fixture
def small_sample():
    """Ten rows, six of class 0 and four of class 1, non-contiguous ids."""
    X = np.arange(20, dtype=np.float64).reshape(10, 2)
    y = np.array([0, 1, 0, 0, 1, 0, 1, 0, 0, 1])
    ids = np.arange(100, 110)
    return Sample.from_arrays(X, y, ids)
