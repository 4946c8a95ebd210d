# -*- coding: utf-8 -*-
"""
Pixelforge - Pixel-level image filter engine.

A small library of stateless ``PixelBuffer -> PixelBuffer`` filters for
8-bit RGBA rasters: 3x3 median filtering, grayscale histogram
equalization, and linear min-max contrast stretch. Decoding, display,
and background dispatch are thin adapters around the engine.

Dependencies
------------
numpy
scipy
Pillow (IO only)

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from pixelforge.exceptions import (
    PixelforgeError,
    ValidationError,
    ProcessorError,
    DependencyError,
)
from pixelforge.vocabulary import Channel, ProcessorCategory
from pixelforge.buffer import PixelBuffer
from pixelforge.engine import (
    FILTERS,
    FilterRunner,
    apply_filter,
    get_filter,
    histogram_equalization,
    linear_contrast,
    median_filter,
)

__all__ = [
    'PixelforgeError',
    'ValidationError',
    'ProcessorError',
    'DependencyError',
    'Channel',
    'ProcessorCategory',
    'PixelBuffer',
    'FILTERS',
    'FilterRunner',
    'apply_filter',
    'get_filter',
    'histogram_equalization',
    'linear_contrast',
    'median_filter',
]
