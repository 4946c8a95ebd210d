# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability-tag class decorators.

Provides ``@processor_version`` for stamping a semantic version string on
a processor class and ``@processor_tags`` for stamping its category and a
short description, used by callers that list the available filters.

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

# Standard library
import importlib.metadata
from typing import Optional, Type, TypeVar

# Pixelforge vocabulary
from pixelforge.vocabulary import ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps ``__processor_version__`` on a processor.

    When *version* is omitted the installed ``pixelforge`` distribution
    version is used, or ``'unknown'`` when running from a source tree.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g. ``'1.0.0'``).

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class MyFilter(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> MyFilter.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('pixelforge')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` as ``{'category': ..., 'description': ...}``.

    Parameters
    ----------
    category : ProcessorCategory, optional
        Processing category.
    description : str, optional
        Short human-readable description, e.g. a button label.

    Raises
    ------
    TypeError
        If *category* is not a ``ProcessorCategory`` member.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
        }
        return cls
    return decorator
