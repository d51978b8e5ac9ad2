import numpy as np
import pytest


@pytest.fixture
def random_rgb():
    """A fixed batch of random 8-bit RGB triples."""
    rng = np.random.default_rng(1234)
    return [tuple(int(c) for c in row) for row in rng.integers(0, 256, size=(300, 3))]
