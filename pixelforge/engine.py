# -*- coding: utf-8 -*-
"""
Filter Engine - Function API, filter registry, and background runner.

The three filters are exposed as plain ``PixelBuffer -> PixelBuffer``
functions. ``FILTERS`` maps the user-facing filter names to their
transform classes so a caller can dispatch on a menu choice.

``FilterRunner`` is the caller-side half of the concurrency model: it
submits one filter call to a ``ThreadPoolExecutor`` and hands back a
``Future``, so an interactive front end never blocks on a filter. The
filters themselves stay synchronous and stateless, so abandoning a
future leaves nothing to clean up.

Usage
-----
    >>> from pixelforge.engine import FilterRunner, median_filter
    >>> out = median_filter(buffer)
    >>> with FilterRunner(on_result=display.show) as runner:
    ...     runner.submit('equalize', buffer)

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
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Type

# Pixelforge internal
from pixelforge.buffer import PixelBuffer
from pixelforge.exceptions import ValidationError
from pixelforge.image_processing.base import ImageTransform
from pixelforge.image_processing.filters import MedianFilter
from pixelforge.image_processing.intensity import HistogramEqualization, LinearContrast

logger = logging.getLogger(__name__)

#: User-facing filter names, in menu order.
FILTERS: Dict[str, Type[ImageTransform]] = {
    'median': MedianFilter,
    'equalize': HistogramEqualization,
    'contrast': LinearContrast,
}


def median_filter(source: PixelBuffer) -> PixelBuffer:
    """3x3 per-channel median of interior pixels; border left all-zero."""
    return MedianFilter().apply(source)


def histogram_equalization(source: PixelBuffer) -> PixelBuffer:
    """Grayscale histogram equalization with opaque output."""
    return HistogramEqualization().apply(source)


def linear_contrast(source: PixelBuffer) -> PixelBuffer:
    """Min-max gray stretch; a flat image is returned as-is."""
    return LinearContrast().apply(source)


def get_filter(name: str, **params: Any) -> ImageTransform:
    """Instantiate the filter registered under *name*.

    Parameters
    ----------
    name : str
        One of the keys of ``FILTERS``.
    **params
        Tunable parameters forwarded to the filter constructor.

    Raises
    ------
    ValidationError
        If *name* is not a registered filter.
    """
    try:
        cls = FILTERS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown filter {name!r}, expected one of {tuple(FILTERS)}"
        ) from None
    return cls(**params)


def apply_filter(name: str, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
    """Run the filter registered under *name* on *source*.

    ``kwargs`` are per-call overrides passed to ``apply``.
    """
    return get_filter(name).apply(source, **kwargs)


class FilterRunner:
    """Run filter calls on a worker thread pool.

    Parameters
    ----------
    max_workers : int
        Worker threads. Default 1, one filter in flight per user action.
    on_result : callable, optional
        Called with each successful result ``PixelBuffer``. Runs on the
        worker thread, or on the submitting thread if the call has already
        finished; a GUI caller should marshal it to its own thread.

    Examples
    --------
    >>> with FilterRunner() as runner:
    ...     future = runner.submit('contrast', buffer)
    ...     processed = future.result()
    """

    def __init__(
        self,
        max_workers: int = 1,
        on_result: Optional[Callable[[PixelBuffer], None]] = None,
    ) -> None:
        if max_workers < 1:
            raise ValidationError(f"max_workers must be >= 1, got {max_workers}")
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix='pixelforge',
        )
        self._on_result = on_result

    def submit(self, name: str, source: PixelBuffer, **kwargs: Any) -> 'Future[PixelBuffer]':
        """Schedule the filter registered under *name* on *source*.

        The filter name is resolved before scheduling, so an unknown name
        raises ``ValidationError`` immediately rather than through the
        future.

        Returns
        -------
        Future[PixelBuffer]
            Resolves to the processed buffer, or raises whatever the
            filter raised.
        """
        transform = get_filter(name)
        logger.debug("Submitting %s on %r", type(transform).__name__, source)
        future = self._executor.submit(transform.apply, source, **kwargs)
        if self._on_result is not None:
            future.add_done_callback(self._deliver)
        return future

    def _deliver(self, future: 'Future[PixelBuffer]') -> None:
        # Failures stay on the future for the submitter to observe.
        if future.cancelled() or future.exception() is not None:
            logger.debug("Filter call did not complete, no result delivered")
            return
        self._on_result(future.result())

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; by default wait for in-flight calls."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> 'FilterRunner':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False
