import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so sampling tests are reproducible."""
    return np.random.default_rng(12345)
