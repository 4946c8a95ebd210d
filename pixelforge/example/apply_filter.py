# -*- coding: utf-8 -*-
"""
Apply Filter Example - Load an image, run one filter, save the result.

Decodes an image with ``RasterReader``, runs the chosen filter on a
``FilterRunner`` worker thread, and writes the processed image (or the
original stacked above the processed one) to a PNG.

Demonstrates pixelforge integration:
  - ``pixelforge.IO.RasterReader`` as the pixel source
  - ``pixelforge.engine.FilterRunner`` for off-thread filtering
  - ``pixelforge.IO.PngWriter`` and ``side_by_side`` as the display sink

Usage:
  python apply_filter.py <image> --filter median
  python apply_filter.py <image> --filter equalize --output eq.png
  python apply_filter.py <image> --filter contrast --side-by-side
  python apply_filter.py --help

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

# Standard library
import argparse
from pathlib import Path
from typing import List, Optional

# Pixelforge
from pixelforge.engine import FILTERS, FilterRunner
from pixelforge.IO import PngWriter, RasterReader, side_by_side


# ── CLI ──────────────────────────────────────────────────────────────


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Apply a pixel filter to an image and save it as PNG.",
    )
    parser.add_argument(
        "filepath",
        type=Path,
        help="Path to any image Pillow can decode.",
    )
    parser.add_argument(
        "--filter",
        choices=tuple(FILTERS),
        default="median",
        help="Filter to apply (default: median).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output PNG path (default: <image>_<filter>.png).",
    )
    parser.add_argument(
        "--side-by-side",
        action="store_true",
        help="Write the original above the processed image.",
    )
    return parser.parse_args(argv)


# ── Main ─────────────────────────────────────────────────────────────


def apply_filter_example(
    filepath: Path,
    filter_name: str = "median",
    output: Optional[Path] = None,
    stacked: bool = False,
) -> Path:
    """Load *filepath*, apply *filter_name*, and write a PNG.

    Parameters
    ----------
    filepath : Path
        Input image.
    filter_name : str
        Key of ``pixelforge.engine.FILTERS``.
    output : Path, optional
        Output path. Defaults to ``<stem>_<filter>.png`` beside the input.
    stacked : bool
        Write original and processed images together.

    Returns
    -------
    Path
        Path of the written PNG.
    """
    print(f"Opening: {filepath}")
    with RasterReader(filepath) as reader:
        original = reader.read_full()
    print(f"  Image size: {original.width} x {original.height}")

    print(f"  Applying {filter_name}...")
    with FilterRunner() as runner:
        processed = runner.submit(filter_name, original).result()

    view = side_by_side(original, processed) if stacked else processed
    if output is None:
        output = filepath.with_name(f"{filepath.stem}_{filter_name}.png")
    with PngWriter(output) as writer:
        writer.write(view)
    print(f"  Wrote: {output}")
    return output


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    apply_filter_example(
        args.filepath,
        filter_name=args.filter,
        output=args.output,
        stacked=args.side_by_side,
    )


if __name__ == "__main__":
    main()
