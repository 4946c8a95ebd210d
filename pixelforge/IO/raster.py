# -*- coding: utf-8 -*-
"""
Raster Reader - Decode common image files into RGBA pixel buffers.

Reads any format Pillow can decode (PNG, JPEG, BMP, GIF, TIFF, ...) and
converts it to 8-bit RGBA. Images without an alpha channel come back
fully opaque.

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
from typing import Union

# Third-party
import numpy as np

try:
    from PIL import Image, UnidentifiedImageError
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# Pixelforge internal
from pixelforge.buffer import PixelBuffer
from pixelforge.exceptions import DependencyError, ProcessorError, ValidationError
from pixelforge.IO.base import ImageReader

logger = logging.getLogger(__name__)


class RasterReader(ImageReader):
    """Read an encoded image file as a ``PixelBuffer``.

    Parameters
    ----------
    filepath : str or Path
        Path to the image file.

    Raises
    ------
    DependencyError
        If Pillow is not installed.
    FileNotFoundError
        If the file does not exist.
    ProcessorError
        If Pillow cannot decode the file.

    Examples
    --------
    >>> from pixelforge.IO import RasterReader
    >>> with RasterReader('photo.jpg') as reader:
    ...     buffer = reader.read_full()
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        if not _HAS_PIL:
            raise DependencyError(
                "Pillow is required for image decoding. "
                "Install with: pip install Pillow"
            )
        self._pixels = None
        super().__init__(filepath)

    def _load_metadata(self) -> None:
        try:
            with Image.open(self.filepath) as img:
                self.metadata['format'] = img.format
                self.metadata['mode'] = img.mode
                self.metadata['cols'], self.metadata['rows'] = img.size
                rgba = img.convert('RGBA')
                self._pixels = np.asarray(rgba, dtype=np.uint8)
        except (UnidentifiedImageError, Image.DecompressionBombError,
                OSError) as e:
            raise ProcessorError(
                f"Cannot decode image {self.filepath}: {e}"
            ) from e
        logger.debug("Decoded %s (%s, %s) %dx%d", self.filepath,
                     self.metadata['format'], self.metadata['mode'],
                     self.metadata['cols'], self.metadata['rows'])

    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
    ) -> PixelBuffer:
        rows, cols = self.get_shape()
        if not (0 <= row_start < row_end <= rows
                and 0 <= col_start < col_end <= cols):
            raise ValidationError(
                f"Chip [{row_start}:{row_end}, {col_start}:{col_end}] "
                f"is empty or outside {rows}x{cols} image"
            )
        return PixelBuffer(self._pixels[row_start:row_end, col_start:col_end])

    def close(self) -> None:
        self._pixels = None
