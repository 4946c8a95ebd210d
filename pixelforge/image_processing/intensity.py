# -*- coding: utf-8 -*-
"""
Intensity Transforms - Grayscale histogram equalization and contrast stretch.

Provides ``ImageTransform`` components that convert an RGBA buffer to a
luma gray map and remap it:

- ``HistogramEqualization``: cumulative-histogram lookup table
- ``LinearContrast``: min-max stretch of gray levels to [0, 255]

Both produce opaque grayscale output (R = G = B, alpha 255), except
that ``LinearContrast`` hands back its input unchanged for a flat image.

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

# Standard library
import logging
from typing import Any

# Third-party
import numpy as np

# Pixelforge internal
from pixelforge.buffer import PixelBuffer
from pixelforge.image_processing.base import ImageTransform
from pixelforge.image_processing.grayscale import (
    compute_histogram,
    cumulative_histogram,
    equalization_lut,
    gray_to_buffer,
    luma,
)
from pixelforge.image_processing.versioning import processor_tags, processor_version
from pixelforge.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.ENHANCE,
                description='Equalize Histogram')
class HistogramEqualization(ImageTransform):
    """Grayscale histogram equalization.

    Converts every pixel to its truncated luma gray level, builds the
    256-bin histogram and its prefix sum, and maps each level through
    ``lut[i] = trunc(cumulative[i] * 255 / (W * H))``. Output is always
    grayscale and fully opaque.

    Applying the transform to its own output reproduces that output
    whenever the equalized levels map to distinct gray levels, which
    holds for any image that does not contain both level 0 and level 1
    after equalization.

    Examples
    --------
    >>> from pixelforge.image_processing.intensity import HistogramEqualization
    >>> equalized = HistogramEqualization().apply(buffer)
    """

    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """Apply histogram equalization.

        Parameters
        ----------
        source : PixelBuffer
            Input image, any colors.

        Returns
        -------
        PixelBuffer
            Grayscale buffer, same dimensions, alpha 255.
        """
        source = self._check_source(source)

        gray = luma(source)
        self._report_progress(kwargs, 0.25)
        histogram = compute_histogram(gray)
        lut = equalization_lut(cumulative_histogram(histogram), source.size)
        self._report_progress(kwargs, 0.5)
        logger.debug("Equalizing %dx%d image, %d occupied gray levels",
                     source.width, source.height,
                     int(np.count_nonzero(histogram)))

        result = gray_to_buffer(lut[gray])
        self._report_progress(kwargs, 1.0)
        return result


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.ENHANCE,
                description='Linear Contrast')
class LinearContrast(ImageTransform):
    """Linear min-max contrast stretch of luma gray levels.

    Finds the darkest and brightest truncated gray levels and maps each
    level with ``(gray - min) * 255 // (max - min)``. A flat image
    (``max == min``, including any 1x1 image) is returned as the very
    same ``PixelBuffer`` object, colors and alpha untouched.

    Examples
    --------
    >>> from pixelforge.image_processing.intensity import LinearContrast
    >>> stretched = LinearContrast().apply(buffer)
    """

    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """Apply the contrast stretch.

        Parameters
        ----------
        source : PixelBuffer
            Input image, any colors.

        Returns
        -------
        PixelBuffer
            Grayscale buffer with levels spanning [0, 255], or *source*
            itself when the image is flat.
        """
        source = self._check_source(source)

        gray = luma(source)
        min_gray = min(255, int(gray.min()))
        max_gray = max(0, int(gray.max()))
        self._report_progress(kwargs, 0.5)

        if max_gray == min_gray:
            logger.debug("Flat image (gray=%d), returning input unchanged",
                         min_gray)
            self._report_progress(kwargs, 1.0)
            return source

        stretched = (gray - min_gray) * 255 // (max_gray - min_gray)
        logger.debug("Stretching gray range [%d, %d] to [0, 255]",
                     min_gray, max_gray)
        result = gray_to_buffer(stretched)
        self._report_progress(kwargs, 1.0)
        return result
