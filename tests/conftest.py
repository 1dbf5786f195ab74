"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest
from PIL import Image

from xorpng.imaging import PixelBuffer


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_buffer(rng):
    """Factory for opaque buffers filled with seeded test data."""

    def make(width, height):
        array = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
        array[..., 3] = 255
        return PixelBuffer.from_array(array)

    return make


@pytest.fixture
def make_png(tmp_path):
    """Factory writing a numpy array (or PIL image) to a PNG under tmp_path."""

    def make(name, data):
        path = tmp_path / name
        img = data if isinstance(data, Image.Image) else Image.fromarray(data)
        img.save(path, format="PNG")
        return str(path)

    return make
