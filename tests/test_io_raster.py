# -*- coding: utf-8 -*-
"""
Raster Reader Tests - Decoding image files into PixelBuffers, and the
apply_filter example end to end.

Dependencies
------------
pytest
Pillow

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
2026-02-11

Modified
--------
2026-10-19
"""

import numpy as np
import pytest

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

from pixelforge.engine import histogram_equalization, median_filter
from pixelforge.exceptions import ProcessorError, ValidationError

pytestmark = pytest.mark.skipif(
    not _HAS_PIL, reason="Pillow not installed"
)


@pytest.fixture
def rgb_png(tmp_path):
    """12x9 RGB PNG with no alpha channel."""
    rng = np.random.default_rng(42)
    data = rng.integers(0, 256, size=(9, 12, 3), dtype=np.uint8)
    filepath = tmp_path / "rgb.png"
    Image.fromarray(data).save(str(filepath))
    return filepath, data


class TestRasterReader:
    def test_rgb_gets_opaque_alpha(self, rgb_png):
        from pixelforge.IO.raster import RasterReader

        filepath, data = rgb_png
        with RasterReader(filepath) as reader:
            buf = reader.read_full()
        assert buf.shape == (9, 12)
        np.testing.assert_array_equal(buf.pixels[..., :3], data)
        assert np.all(buf.alpha == 255)

    def test_metadata(self, rgb_png):
        from pixelforge.IO.raster import RasterReader

        filepath, _ = rgb_png
        with RasterReader(filepath) as reader:
            assert reader.metadata['format'] == 'PNG'
            assert reader.metadata['mode'] == 'RGB'
            assert reader.get_shape() == (9, 12)

    def test_rgba_written_then_read(self, tmp_path, random_image):
        from pixelforge.IO import PngWriter, RasterReader

        filepath = tmp_path / "rgba.png"
        with PngWriter(filepath) as writer:
            writer.write(random_image)
        with RasterReader(filepath) as reader:
            assert reader.read_full() == random_image

    def test_read_chip(self, rgb_png):
        from pixelforge.IO.raster import RasterReader

        filepath, data = rgb_png
        with RasterReader(filepath) as reader:
            chip = reader.read_chip(2, 5, 3, 10)
        assert chip.shape == (3, 7)
        np.testing.assert_array_equal(chip.pixels[..., :3], data[2:5, 3:10])

    @pytest.mark.parametrize('bounds', [
        (0, 0, 0, 12),
        (0, 10, 0, 12),
        (-1, 5, 0, 12),
        (0, 9, 4, 13),
    ])
    def test_read_chip_out_of_bounds(self, rgb_png, bounds):
        from pixelforge.IO.raster import RasterReader

        filepath, _ = rgb_png
        with RasterReader(filepath) as reader:
            with pytest.raises(ValidationError):
                reader.read_chip(*bounds)

    def test_missing_file(self, tmp_path):
        from pixelforge.IO.raster import RasterReader

        with pytest.raises(FileNotFoundError):
            RasterReader(tmp_path / "absent.png")

    def test_decompression_bomb(self, rgb_png, monkeypatch):
        from pixelforge.IO.raster import RasterReader

        filepath, _ = rgb_png
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
        with pytest.raises(ProcessorError, match="Cannot decode"):
            RasterReader(filepath)

    def test_undecodable_file(self, tmp_path):
        from pixelforge.IO.raster import RasterReader

        filepath = tmp_path / "garbage.png"
        filepath.write_bytes(b"this is not an image")
        with pytest.raises(ProcessorError, match="Cannot decode"):
            RasterReader(filepath)


class TestApplyFilterExample:
    def test_default_output_path(self, rgb_png):
        from pixelforge.example.apply_filter import apply_filter_example
        from pixelforge.IO import RasterReader

        filepath, _ = rgb_png
        output = apply_filter_example(filepath, filter_name='median')
        assert output == filepath.with_name("rgb_median.png")

        with RasterReader(filepath) as reader:
            expected = median_filter(reader.read_full())
        with RasterReader(output) as reader:
            assert reader.read_full() == expected

    def test_main_side_by_side(self, rgb_png, tmp_path):
        from pixelforge.example.apply_filter import main
        from pixelforge.IO import RasterReader

        filepath, _ = rgb_png
        output = tmp_path / "stacked.png"
        main([str(filepath), '--filter', 'equalize',
              '--output', str(output), '--side-by-side'])

        with RasterReader(output) as reader:
            view = reader.read_full()
        assert view.shape == (9 + 8 + 9, 12)
        with RasterReader(filepath) as reader:
            expected = histogram_equalization(reader.read_full())
        assert view.pixel(0, 17) == expected.pixel(0, 0)

    def test_rejects_unknown_filter(self, rgb_png):
        from pixelforge.example.apply_filter import parse_args

        filepath, _ = rgb_png
        with pytest.raises(SystemExit):
            parse_args([str(filepath), '--filter', 'sharpen'])
