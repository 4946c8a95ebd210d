# -*- coding: utf-8 -*-
"""
Spatial Filters - Neighborhood filters operating on RGBA pixel buffers.

Rank Filters
    ``MedianFilter`` - 3x3 per-channel median (salt-and-pepper removal)

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

from pixelforge.image_processing.filters.rank import MedianFilter

__all__ = [
    'MedianFilter',
]
