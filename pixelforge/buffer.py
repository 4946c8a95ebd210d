# -*- coding: utf-8 -*-
"""
Pixel Buffer - Immutable in-memory RGBA raster shared by all filters.

Defines ``PixelBuffer``, the single data type flowing between a pixel
source (decoder), the filter engine, and a display sink. A buffer is a
``(rows, cols, 4)`` uint8 array in RGBA channel order. The array is
copied on construction and flagged read-only, so a buffer can be handed
to a worker thread and read concurrently without locking.

Conversions to and from the packed ``0xAARRGGBB`` integer layout used
by platform bitmaps are provided for callers that exchange pixels with
such APIs.

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
2026-02-09

Modified
--------
2026-10-19
"""

# Standard library
from typing import Any, Tuple

# Third-party
import numpy as np

# Pixelforge internal
from pixelforge.exceptions import ValidationError
from pixelforge.vocabulary import Channel

#: Number of channels per pixel (R, G, B, A).
NUM_CHANNELS = 4

#: Alpha value for a fully opaque pixel.
OPAQUE = 255


def _validate_pixels(pixels: Any) -> np.ndarray:
    """Check shape, size, and value range and return a uint8 array.

    Parameters
    ----------
    pixels : array_like
        Candidate ``(rows, cols, 4)`` pixel array.

    Returns
    -------
    np.ndarray
        uint8 array (not yet copied when already uint8).

    Raises
    ------
    ValidationError
        If the array is not 3D, does not have 4 channels, has a zero
        dimension, is not an integer type, or holds values outside
        ``[0, 255]``.
    """
    try:
        arr = np.asarray(pixels)
    except ValueError as e:
        raise ValidationError(
            f"Pixel data is not a rectangular array: {e}"
        ) from e
    if arr.ndim != 3:
        raise ValidationError(
            f"Pixel array must be 3D (rows, cols, 4), got shape {arr.shape}"
        )
    if arr.shape[2] != NUM_CHANNELS:
        raise ValidationError(
            f"Pixel array must have {NUM_CHANNELS} channels, "
            f"got {arr.shape[2]}"
        )
    if arr.shape[0] < 1 or arr.shape[1] < 1:
        raise ValidationError(
            f"Width and height must be >= 1, got "
            f"width={arr.shape[1]}, height={arr.shape[0]}"
        )
    if arr.dtype == np.uint8:
        return arr
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValidationError(
            f"Pixel array must have an integer dtype, got {arr.dtype}"
        )
    if arr.min() < 0 or arr.max() > 255:
        raise ValidationError(
            f"Channel values must lie in [0, 255], got range "
            f"[{arr.min()}, {arr.max()}]"
        )
    return arr.astype(np.uint8)


class PixelBuffer:
    """Immutable width x height grid of 8-bit RGBA pixels.

    Parameters
    ----------
    pixels : array_like
        Integer array of shape ``(rows, cols, 4)`` in RGBA channel
        order with values in ``[0, 255]``. The data is copied.

    Raises
    ------
    ValidationError
        If *pixels* is malformed (see ``_validate_pixels``).

    Examples
    --------
    >>> import numpy as np
    >>> from pixelforge.buffer import PixelBuffer
    >>> buf = PixelBuffer(np.zeros((2, 3, 4), dtype=np.uint8))
    >>> buf.width, buf.height
    (3, 2)
    """

    __slots__ = ('_pixels',)

    def __init__(self, pixels: Any) -> None:
        arr = np.array(_validate_pixels(pixels), dtype=np.uint8, copy=True)
        arr.setflags(write=False)
        # A view of a read-only base cannot be made writeable again.
        self._pixels = arr.view()

    # -----------------------------------------------------------------
    # Alternate constructors
    # -----------------------------------------------------------------
    @classmethod
    def blank(cls, width: int, height: int) -> 'PixelBuffer':
        """Create a zero-initialized buffer (all channels 0, transparent).

        Parameters
        ----------
        width : int
            Number of columns, >= 1.
        height : int
            Number of rows, >= 1.

        Returns
        -------
        PixelBuffer
        """
        if width < 1 or height < 1:
            raise ValidationError(
                f"Width and height must be >= 1, got "
                f"width={width}, height={height}"
            )
        return cls(np.zeros((height, width, NUM_CHANNELS), dtype=np.uint8))

    @classmethod
    def from_rgb(cls, rgb: Any, alpha: int = OPAQUE) -> 'PixelBuffer':
        """Create a buffer from a ``(rows, cols, 3)`` RGB array.

        Parameters
        ----------
        rgb : array_like
            Integer RGB array with values in ``[0, 255]``.
        alpha : int
            Alpha value applied to every pixel. Default 255 (opaque).

        Returns
        -------
        PixelBuffer
        """
        rgb = np.asarray(rgb)
        if rgb.ndim != 3 or rgb.shape[2] != 3:
            raise ValidationError(
                f"RGB array must have shape (rows, cols, 3), got {rgb.shape}"
            )
        if not 0 <= alpha <= 255:
            raise ValidationError(f"alpha must lie in [0, 255], got {alpha}")
        alpha_plane = np.full(rgb.shape[:2] + (1,), alpha, dtype=np.int64)
        return cls(np.concatenate([rgb, alpha_plane], axis=2))

    @classmethod
    def from_gray(cls, gray: Any) -> 'PixelBuffer':
        """Create an opaque grayscale buffer (R = G = B = gray).

        Parameters
        ----------
        gray : array_like
            2D integer array of intensities in ``[0, 255]``.

        Returns
        -------
        PixelBuffer
        """
        gray = np.asarray(gray)
        if gray.ndim != 2:
            raise ValidationError(
                f"Gray array must be 2D (rows, cols), got shape {gray.shape}"
            )
        return cls.from_rgb(np.stack([gray, gray, gray], axis=2))

    @classmethod
    def from_packed_argb(
        cls, values: Any, width: int, height: int,
    ) -> 'PixelBuffer':
        """Create a buffer from packed ``0xAARRGGBB`` integers.

        Parameters
        ----------
        values : array_like
            Row-major sequence of ``width * height`` packed pixels.
        width : int
            Number of columns.
        height : int
            Number of rows.

        Returns
        -------
        PixelBuffer
        """
        packed = np.asarray(values, dtype=np.int64).ravel() & 0xFFFFFFFF
        if packed.size != width * height:
            raise ValidationError(
                f"Expected {width * height} packed pixels for "
                f"{width}x{height}, got {packed.size}"
            )
        if width < 1 or height < 1:
            raise ValidationError(
                f"Width and height must be >= 1, got "
                f"width={width}, height={height}"
            )
        packed = packed.reshape(height, width)
        pixels = np.stack([
            (packed >> 16) & 0xFF,
            (packed >> 8) & 0xFF,
            packed & 0xFF,
            (packed >> 24) & 0xFF,
        ], axis=2)
        return cls(pixels)

    def to_packed_argb(self) -> np.ndarray:
        """Pack pixels into ``0xAARRGGBB`` integers.

        Returns
        -------
        np.ndarray
            uint32 array of shape ``(rows, cols)``.
        """
        p = self._pixels.astype(np.uint32)
        return (
            (p[..., Channel.ALPHA] << 24)
            | (p[..., Channel.RED] << 16)
            | (p[..., Channel.GREEN] << 8)
            | p[..., Channel.BLUE]
        )

    # -----------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------
    @property
    def pixels(self) -> np.ndarray:
        """Read-only ``(rows, cols, 4)`` uint8 RGBA array."""
        return self._pixels

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """Dimensions as ``(rows, cols)``."""
        return (self.height, self.width)

    @property
    def size(self) -> int:
        """Total number of pixels, ``width * height``."""
        return self.width * self.height

    @property
    def red(self) -> np.ndarray:
        return self._pixels[..., Channel.RED]

    @property
    def green(self) -> np.ndarray:
        return self._pixels[..., Channel.GREEN]

    @property
    def blue(self) -> np.ndarray:
        return self._pixels[..., Channel.BLUE]

    @property
    def alpha(self) -> np.ndarray:
        return self._pixels[..., Channel.ALPHA]

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the ``(r, g, b, a)`` tuple at column *x*, row *y*.

        Raises
        ------
        IndexError
            If the coordinates fall outside the buffer.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer"
            )
        r, g, b, a = self._pixels[y, x]
        return (int(r), int(g), int(b), int(a))

    def is_grayscale(self) -> bool:
        """Whether every pixel has R == G == B."""
        return bool(
            np.array_equal(self.red, self.green)
            and np.array_equal(self.green, self.blue)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
