# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the pixelforge framework.

Defines the controlled vocabularies used to tag processors and to name
pixel buffer channels, so tag values stay consistent and typo-free.

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
2026-02-10

Modified
--------
2026-10-19
"""

from enum import Enum, IntEnum


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    Each value corresponds to a functional grouping of image processing
    operations.
    """

    FILTERS = "filters"
    ENHANCE = "enhance"
    NOISE = "noise"


class Channel(IntEnum):
    """Index of each channel along the last axis of a pixel buffer.

    Buffers store channels in RGBA order, matching Pillow's ``RGBA`` mode.
    """

    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3
