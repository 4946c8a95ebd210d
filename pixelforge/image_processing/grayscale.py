# -*- coding: utf-8 -*-
"""
Grayscale Helpers - Luma conversion, histogram, and lookup-table primitives.

Shared building blocks for the intensity transforms:

- ``luma``: truncated ``0.2989 R + 0.5870 G + 0.1140 B`` gray level
- ``compute_histogram`` / ``cumulative_histogram``: 256-bin counts
- ``equalization_lut``: cumulative counts scaled by ``255 / total``
- ``gray_to_buffer``: write a gray map to R, G, B with opaque alpha

The luma weights sum to 0.9999, so a pure white pixel maps to 254, not
255. Outputs of these helpers are consumed once and discarded; nothing
is cached between calls.

Author
------
Steven Siebert

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

# Third-party
import numpy as np

# Pixelforge internal
from pixelforge.buffer import PixelBuffer
from pixelforge.exceptions import ValidationError

#: Number of 8-bit intensity levels.
NUM_LEVELS = 256

LUMA_RED = 0.2989
LUMA_GREEN = 0.5870
LUMA_BLUE = 0.1140


def luma(source: PixelBuffer) -> np.ndarray:
    """Compute the truncated gray level of every pixel.

    Evaluated in float64 as ``(0.2989*R + 0.5870*G) + 0.1140*B`` and
    truncated toward zero. Alpha is ignored.

    Parameters
    ----------
    source : PixelBuffer
        Input image.

    Returns
    -------
    np.ndarray
        int64 array of shape ``(rows, cols)`` with values in [0, 254].
    """
    r = source.red.astype(np.float64)
    g = source.green.astype(np.float64)
    b = source.blue.astype(np.float64)
    gray = LUMA_RED * r + LUMA_GREEN * g + LUMA_BLUE * b
    return np.trunc(gray).astype(np.int64)


def compute_histogram(gray: np.ndarray) -> np.ndarray:
    """Count occurrences of each of the 256 gray levels.

    Parameters
    ----------
    gray : np.ndarray
        Integer gray levels in [0, 255], any shape.

    Returns
    -------
    np.ndarray
        int64 array of 256 counts summing to ``gray.size``.
    """
    gray = np.asarray(gray)
    if gray.size and (gray.min() < 0 or gray.max() >= NUM_LEVELS):
        raise ValidationError(
            f"Gray levels must lie in [0, {NUM_LEVELS - 1}], got range "
            f"[{gray.min()}, {gray.max()}]"
        )
    return np.bincount(gray.ravel(), minlength=NUM_LEVELS).astype(np.int64)


def cumulative_histogram(histogram: np.ndarray) -> np.ndarray:
    """Running prefix sum over the histogram bins."""
    return np.cumsum(histogram, dtype=np.int64)


def equalization_lut(cumulative: np.ndarray, total_pixels: int) -> np.ndarray:
    """Build the equalization lookup table from a cumulative histogram.

    ``lut[i] = trunc(cumulative[i] * (255.0 / total_pixels))`` clamped to
    [0, 255]. The scale is ``255 / total`` rather than
    ``255 / (total - 1)``, which compresses small images slightly toward
    the dark end.

    Parameters
    ----------
    cumulative : np.ndarray
        256-entry cumulative histogram.
    total_pixels : int
        Pixel count of the image, >= 1.

    Returns
    -------
    np.ndarray
        int64 lookup table of 256 entries.
    """
    if total_pixels < 1:
        raise ValidationError(
            f"total_pixels must be >= 1, got {total_pixels}"
        )
    scale = 255.0 / total_pixels
    lut = np.trunc(np.asarray(cumulative, dtype=np.float64) * scale)
    return np.clip(lut, 0, 255).astype(np.int64)


def gray_to_buffer(gray: np.ndarray) -> PixelBuffer:
    """Write *gray* to the R, G, and B channels with alpha 255."""
    return PixelBuffer.from_gray(gray)
