"""
Pytest configuration and fixtures for intensity transform tests.
"""

import pytest
import numpy as np
from image_intensity.utils.config_manager import ConfigManager


@pytest.fixture
def config_manager():
    """Fixture providing a configuration manager instance."""
    return ConfigManager()


@pytest.fixture
def rng():
    """Fixture providing a seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def gray_ramp():
    """Fixture providing a grayscale image holding every intensity once."""
    return np.arange(256, dtype=np.uint8).reshape(16, 16)


@pytest.fixture
def low_contrast_gray(rng):
    """Fixture providing a grayscale image confined to [60, 140]."""
    return rng.integers(60, 141, (48, 64), dtype=np.uint8)


@pytest.fixture
def channel_planes(rng):
    """Fixture providing four distinct grayscale planes used as R, G, B, A."""
    height, width = 32, 40
    return [
        rng.integers(0, 256, (height, width), dtype=np.uint8),
        rng.integers(30, 90, (height, width), dtype=np.uint8),
        rng.integers(100, 230, (height, width), dtype=np.uint8),
        rng.integers(200, 256, (height, width), dtype=np.uint8),
    ]


@pytest.fixture
def rgba_image(channel_planes):
    """Fixture providing an RGBA image built from the channel planes."""
    return np.dstack(channel_planes)


@pytest.fixture
def step_edge_gray():
    """Fixture providing a vertical step edge from 100 to 150."""
    image = np.full((32, 32), 100, dtype=np.uint8)
    image[:, 16:] = 150
    return image
