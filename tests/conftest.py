"""Shared fixtures.

pygame must not open real windows or print its banner during tests, so the
dummy SDL video driver is selected before anything imports it.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from rasterbmp import Bitmap


@pytest.fixture
def bitmap():
    """A 20x16 opaque black bitmap, closed after the test."""
    with Bitmap(20, 16) as bmp:
        yield bmp


@pytest.fixture
def noisy_bitmap():
    """A 7x5 bitmap filled with reproducible random bytes, alpha included."""
    rng = np.random.default_rng(1234)
    bmp = Bitmap(7, 5)
    bmp.buffer[:] = rng.integers(0, 256, size=bmp.image_size, dtype=np.uint8).tobytes()
    yield bmp
    bmp.close()
