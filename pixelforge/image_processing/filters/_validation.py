# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared border policy validation.

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

# Pixelforge internal
from pixelforge.exceptions import ValidationError


#: ``'zero'`` leaves unprocessed border pixels all-zero (transparent black);
#: ``'copy'`` carries the source border pixels over unchanged.
BORDER_POLICIES = ('zero', 'copy')


def validate_border(border: str) -> None:
    """Validate that *border* is a supported border policy.

    Raises
    ------
    ValidationError
        If ``border`` is not one of ``BORDER_POLICIES``.
    """
    if border not in BORDER_POLICIES:
        raise ValidationError(
            f"border must be one of {BORDER_POLICIES}, got {border!r}"
        )
