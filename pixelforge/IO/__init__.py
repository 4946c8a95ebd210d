# -*- coding: utf-8 -*-
"""
IO Module - Pixel sources and sinks for the filter engine.

Readers decode image files into ``PixelBuffer`` objects; writers encode
buffers back to disk. These are thin adapters around Pillow and are not
required to use the filters themselves.

Key Classes
-----------
- ImageReader, ImageWriter: abstract bases
- RasterReader: decode any Pillow-readable file to RGBA
- PngWriter: write RGBA PNG files

Dependencies
------------
Pillow

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
2026-01-30

Modified
--------
2026-10-19
"""

from pixelforge.IO.base import ImageReader, ImageWriter
from pixelforge.IO.png import PngWriter, side_by_side
from pixelforge.IO.raster import RasterReader

__all__ = [
    'ImageReader',
    'ImageWriter',
    'RasterReader',
    'PngWriter',
    'side_by_side',
]
