"""pytest configuration and shared fixtures."""

import numpy
import pytest
from imgcast import build_default_resolver


@pytest.fixture
def resolver():
    """Default image-or-pixel resolver."""
    return build_default_resolver()


@pytest.fixture
def filter_arguments():
    """Arguments as a user would pass them to a Gaussian filter."""
    return {
        "image": numpy.zeros((6, 8), dtype=numpy.float32),
        "sigmas": 1.5,
        "out_type": "SFLOAT",
    }
