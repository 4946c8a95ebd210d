# -*- coding: utf-8 -*-
"""
Pixelforge Exception Hierarchy - Domain-specific exceptions for filter operations.

Provides a small exception hierarchy that lets callers (UI shells, batch
scripts) catch pixelforge errors distinctly from Python built-in
exceptions. All pixelforge exceptions subclass both ``PixelforgeError``
and the appropriate built-in exception for backward compatibility.

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
2026-02-06

Modified
--------
2026-10-19
"""


class PixelforgeError(Exception):
    """Base exception for all pixelforge errors."""


class ValidationError(PixelforgeError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for malformed pixel buffers (wrong shape, zero size, channel
    values outside 8-bit range), out-of-range parameters, and unknown
    filter names. Always raised before any processing begins.
    """


class ProcessorError(PixelforgeError, RuntimeError):
    """Algorithm or IO failure during apply() or decoding.

    Raised when a processor or reader encounters a non-recoverable
    error that is not an input validation issue.
    """


class DependencyError(PixelforgeError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when a module requires an optional package (Pillow) that
    is not installed.
    """
