# -*- coding: utf-8 -*-
"""
PNG Writer - Write pixel buffers to RGBA PNG files.

Also provides ``side_by_side`` for composing the original and the
processed image into a single display view, original on top.

Dependencies
------------
Pillow

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
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import numpy as np

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# Pixelforge internal
from pixelforge.buffer import NUM_CHANNELS, PixelBuffer
from pixelforge.exceptions import DependencyError, ValidationError
from pixelforge.IO.base import ImageWriter

logger = logging.getLogger(__name__)


class PngWriter(ImageWriter):
    """Write a ``PixelBuffer`` to an RGBA PNG file.

    Parameters
    ----------
    filepath : str or Path
        Output PNG file path.
    metadata : Dict[str, Any], optional
        Writer bookkeeping metadata (not embedded in the PNG).

    Raises
    ------
    DependencyError
        If Pillow is not installed.

    Examples
    --------
    >>> from pixelforge.IO.png import PngWriter
    >>> with PngWriter('output.png') as writer:
    ...     writer.write(buffer)
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not _HAS_PIL:
            raise DependencyError(
                "Pillow is required for PNG writing. "
                "Install with: pip install Pillow"
            )
        super().__init__(filepath, metadata)

    def write(self, data: PixelBuffer) -> None:
        """Encode *data* as RGBA and save it to ``filepath``.

        Raises
        ------
        ValidationError
            If *data* is not a ``PixelBuffer``.
        """
        if not isinstance(data, PixelBuffer):
            raise ValidationError(
                f"Expected a PixelBuffer, got {type(data).__name__}"
            )
        img = Image.fromarray(np.ascontiguousarray(data.pixels))
        img.save(str(self.filepath), format='PNG')
        logger.debug("Wrote %dx%d PNG to %s", data.width, data.height,
                     self.filepath)


def side_by_side(
    original: PixelBuffer,
    processed: PixelBuffer,
    gap: int = 8,
) -> PixelBuffer:
    """Stack *original* above *processed* on a transparent canvas.

    Parameters
    ----------
    original : PixelBuffer
        Image as loaded.
    processed : PixelBuffer
        Filter output.
    gap : int
        Transparent rows between the two images. Default 8.

    Returns
    -------
    PixelBuffer
        Canvas ``max(widths)`` wide and ``h1 + gap + h2`` tall; each
        image is horizontally centered.
    """
    if gap < 0:
        raise ValidationError(f"gap must be >= 0, got {gap}")
    width = max(original.width, processed.width)
    height = original.height + gap + processed.height
    canvas = np.zeros((height, width, NUM_CHANNELS), dtype=np.uint8)

    top = 0
    for part in (original, processed):
        left = (width - part.width) // 2
        canvas[top:top + part.height, left:left + part.width] = part.pixels
        top += part.height + gap
    return PixelBuffer(canvas)
