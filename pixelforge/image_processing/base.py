# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for pixel filters.

Defines the ``ImageProcessor`` common base class and the ``ImageTransform``
ABC for one-shot ``PixelBuffer -> PixelBuffer`` filters. ``ImageProcessor``
provides version checking at first instantiation and
``typing.Annotated``-based tunable parameter declarations with automatic
``__init__`` generation and runtime resolution through ``**kwargs``.

Processors hold no per-call state: an instance only carries its tunable
parameters, so one instance may be shared across worker threads.

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

# Standard library
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Pixelforge internal
from pixelforge.buffer import PixelBuffer
from pixelforge.exceptions import ValidationError
from pixelforge.image_processing.params import ParamSpec, collect_param_specs, make_init

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: concrete subclasses that do not declare a
    version via ``@processor_version('x.y.z')`` trigger a ``UserWarning``
    at first instantiation. The check runs in ``__new__`` so that class
    decorators have already been applied.

    **Tunable parameters**: subclasses declare options as ``Annotated``
    class-body fields with ``Options``/``Desc`` markers.
    ``__init_subclass__`` collects them into ``__param_specs__`` and
    generates an ``__init__`` unless the subclass defines its own.
    ``_resolve_params(kwargs)`` merges instance values with per-call
    overrides.
    """

    _version_warned_classes: set = set()

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance parameter values with runtime *kwargs* overrides.

        Keys in *kwargs* that are not declared parameters (for example
        ``progress_callback``) are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared parameter.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValidationError
            If a value is not among the declared choices.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs[spec.name] if spec.name in kwargs else getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(self, kwargs: Dict[str, Any], fraction: float) -> None:
        """Forward *fraction* in [0, 1] to ``kwargs['progress_callback']``, if given."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))


class ImageTransform(ImageProcessor):
    """
    Abstract base class for pixel filters.

    Subclasses implement ``apply``, which reads an immutable
    ``PixelBuffer`` and returns a freshly allocated one of the same
    dimensions. The input is never modified.
    """

    @staticmethod
    def _check_source(source: Any) -> PixelBuffer:
        """Reject anything that is not a ``PixelBuffer`` before processing.

        Raises
        ------
        ValidationError
            If *source* is not a ``PixelBuffer``.
        """
        if not isinstance(source, PixelBuffer):
            raise ValidationError(
                f"Expected a PixelBuffer, got {type(source).__name__}"
            )
        return source

    @abstractmethod
    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """
        Apply the filter to a pixel buffer.

        Parameters
        ----------
        source : PixelBuffer
            Input image. Never modified.
        **kwargs
            Per-call parameter overrides and an optional
            ``progress_callback(fraction)``.

        Returns
        -------
        PixelBuffer
            Filtered image with the same width and height.
        """
        ...

    def __call__(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        return self.apply(source, **kwargs)
