# -*- coding: utf-8 -*-
"""
Shared test fixtures - Synthetic pixel buffers for filter tests.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-11

Modified
--------
2026-10-19
"""

import numpy as np
import pytest

from pixelforge.buffer import PixelBuffer


def make_buffer(rgba_rows):
    """Build a PixelBuffer from nested ``[[(r, g, b, a), ...], ...]`` rows."""
    return PixelBuffer(np.array(rgba_rows, dtype=np.uint8))


@pytest.fixture
def uniform_gray_3x3():
    """3x3 image, every pixel (128, 128, 128, 255)."""
    return PixelBuffer(np.full((3, 3, 4), (128, 128, 128, 255), dtype=np.uint8))


@pytest.fixture
def black_white_2x2():
    """2x2 image alternating opaque black and white by column."""
    black = (0, 0, 0, 255)
    white = (255, 255, 255, 255)
    return make_buffer([[black, white], [black, white]])


@pytest.fixture
def random_image():
    """24x17 image with random colors and random alpha."""
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, size=(17, 24, 4), dtype=np.uint8))


@pytest.fixture
def flat_color_image():
    """6x4 image, every pixel the same non-gray, semi-transparent color."""
    return PixelBuffer(np.full((4, 6, 4), (200, 30, 90, 100), dtype=np.uint8))


@pytest.fixture
def salt_pepper_image():
    """20x20 opaque gray (100) image with sparse 0/255 impulses."""
    rng = np.random.default_rng(7)
    gray = np.full((20, 20), 100, dtype=np.uint8)
    mask = rng.random((20, 20))
    gray[mask < 0.05] = 0
    gray[mask > 0.95] = 255
    return PixelBuffer.from_gray(gray)
