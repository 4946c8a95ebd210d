# -*- coding: utf-8 -*-
"""
Image Processing Module - Processor framework and pixel filters.

Provides the ``ImageProcessor``/``ImageTransform`` interfaces and the three
one-shot filters of the filter engine. Every filter reads an immutable
``PixelBuffer`` and returns a new one of the same dimensions.

Sub-modules
-----------
filters/
    Neighborhood filters -- ``MedianFilter`` (3x3 per-channel median).
intensity.py
    Luma remapping -- ``HistogramEqualization``, ``LinearContrast``.
grayscale.py
    Luma, histogram, and lookup-table primitives shared by the
    intensity transforms.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Options``, ``Desc`` constraint markers for tunable parameters via
    ``Annotated`` type hints.

Usage
-----
    >>> from pixelforge.image_processing import MedianFilter
    >>> result = MedianFilter().apply(buffer)

Dependencies
------------
numpy
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
2026-01-30

Modified
--------
2026-10-19
"""

from pixelforge.image_processing.base import ImageProcessor, ImageTransform
from pixelforge.image_processing.filters import MedianFilter
from pixelforge.image_processing.intensity import HistogramEqualization, LinearContrast
from pixelforge.image_processing.versioning import processor_version, processor_tags
from pixelforge.image_processing.params import Desc, Options, ParamSpec

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'MedianFilter',
    'HistogramEqualization',
    'LinearContrast',
    'processor_version',
    'processor_tags',
    'Desc',
    'Options',
    'ParamSpec',
]
