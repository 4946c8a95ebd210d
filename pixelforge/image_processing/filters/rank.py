# -*- coding: utf-8 -*-
"""
Rank Filters - 3x3 per-channel median filter.

Provides ``MedianFilter``, backed by scipy's C-optimized
``scipy.ndimage.median_filter``. Only interior pixels (one pixel in from
every edge) are written; the border is left unprocessed.

Dependencies
------------
scipy

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

# Standard library
import logging
from typing import Annotated, Any

# Third-party
import numpy as np
from scipy.ndimage import median_filter

# Pixelforge internal
from pixelforge.buffer import NUM_CHANNELS, OPAQUE, PixelBuffer
from pixelforge.image_processing.base import ImageTransform
from pixelforge.image_processing.params import Desc, Options
from pixelforge.image_processing.versioning import processor_tags, processor_version
from pixelforge.image_processing.filters._validation import (
    BORDER_POLICIES,
    validate_border,
)
from pixelforge.vocabulary import Channel, ProcessorCategory

logger = logging.getLogger(__name__)

#: Side length of the median window.
KERNEL_SIZE = 3

_COLOR_CHANNELS = (Channel.RED, Channel.GREEN, Channel.BLUE)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS, description='Median Filter')
class MedianFilter(ImageTransform):
    """3x3 median filter applied independently to R, G, and B.

    For each interior pixel ``1 <= x <= W-2``, ``1 <= y <= H-2`` the nine
    red, green, and blue values of its 3x3 neighborhood are ranked
    separately and the fifth (index 4) of each is kept. Alpha of every
    processed pixel is forced to 255.

    Border pixels are not processed. With the default ``border='zero'``
    they stay all-zero in the output, alpha included, so an image with
    width or height below 3 yields an all-zero buffer.

    Parameters
    ----------
    border : str
        ``'zero'`` (default) or ``'copy'`` to carry the source border
        pixels over unchanged.

    Examples
    --------
    >>> from pixelforge.image_processing.filters import MedianFilter
    >>> denoised = MedianFilter().apply(noisy)
    """

    border: Annotated[str, Options(*BORDER_POLICIES),
                      Desc('Policy for the unprocessed 1-pixel border')] = 'zero'

    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """Apply the median filter.

        Parameters
        ----------
        source : PixelBuffer
            Input image.

        Returns
        -------
        PixelBuffer
            Filtered image with the same dimensions.
        """
        source = self._check_source(source)
        border = self._resolve_params(kwargs)['border']
        validate_border(border)

        rows, cols = source.shape
        if border == 'copy':
            out = np.array(source.pixels)
        else:
            out = np.zeros((rows, cols, NUM_CHANNELS), dtype=np.uint8)

        if rows < KERNEL_SIZE or cols < KERNEL_SIZE:
            logger.debug("%dx%d image has no interior pixels", cols, rows)
            self._report_progress(kwargs, 1.0)
            return PixelBuffer(out)

        interior = (slice(1, rows - 1), slice(1, cols - 1))
        for i, channel in enumerate(_COLOR_CHANNELS):
            ranked = median_filter(source.pixels[..., channel],
                                   size=KERNEL_SIZE, mode='nearest')
            out[interior + (channel,)] = ranked[interior]
            self._report_progress(kwargs, (i + 1) / (len(_COLOR_CHANNELS) + 1))
        out[interior + (Channel.ALPHA,)] = OPAQUE

        self._report_progress(kwargs, 1.0)
        return PixelBuffer(out)
