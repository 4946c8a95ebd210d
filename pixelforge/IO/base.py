# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for pixel sources and sinks.

Defines the reader (pixel source) and writer (display or file sink)
interfaces around ``PixelBuffer``. Decoding failures are entirely the
reader's concern; the filter engine only ever sees well-formed buffers.

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pixelforge.buffer import PixelBuffer


class ImageReader(ABC):
    """
    Abstract base class for pixel sources.

    Attributes
    ----------
    filepath : Path
        Path to the image file.
    metadata : Dict[str, Any]
        Format metadata populated by ``_load_metadata``.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Raises
        ------
        FileNotFoundError
            If the specified filepath does not exist.
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """Populate ``self.metadata`` with at least ``rows`` and ``cols``."""
        pass

    @abstractmethod
    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
    ) -> PixelBuffer:
        """
        Read a rectangular subset of the image.

        Parameters
        ----------
        row_start, col_start : int
            First row/column (inclusive).
        row_end, col_end : int
            Last row/column (exclusive).

        Returns
        -------
        PixelBuffer

        Raises
        ------
        ValidationError
            If the bounds are empty or outside the image.
        """
        pass

    def read_full(self) -> PixelBuffer:
        """Read the entire image as one ``PixelBuffer``."""
        rows, cols = self.get_shape()
        return self.read_chip(0, rows, 0, cols)

    def get_shape(self) -> Tuple[int, int]:
        """Image dimensions as ``(rows, cols)``."""
        return (self.metadata['rows'], self.metadata['cols'])

    def close(self) -> None:
        """Release resources. Default does nothing."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for pixel sinks.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written.
    metadata : Dict[str, Any]
        Writer bookkeeping metadata.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.filepath = Path(filepath)
        self.metadata = metadata or {}

    @abstractmethod
    def write(self, data: PixelBuffer) -> None:
        """
        Write a pixel buffer.

        Raises
        ------
        ValidationError
            If *data* is not a ``PixelBuffer``.
        """
        pass

    def close(self) -> None:
        """Release resources. Default does nothing."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
