# -*- coding: utf-8 -*-
"""
Filter Engine Tests - Function API, registry dispatch, and FilterRunner.

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

import threading
from concurrent.futures import Future

import numpy as np
import pytest

import pixelforge
from pixelforge.engine import (
    FILTERS,
    FilterRunner,
    apply_filter,
    get_filter,
    histogram_equalization,
    linear_contrast,
    median_filter,
)
from pixelforge.exceptions import ValidationError
from pixelforge.image_processing import HistogramEqualization, LinearContrast, MedianFilter


# ---------------------------------------------------------------------------
# Function API
# ---------------------------------------------------------------------------

class TestFunctions:
    def test_median_filter(self, random_image):
        assert median_filter(random_image) == MedianFilter().apply(random_image)

    def test_histogram_equalization(self, random_image):
        assert (histogram_equalization(random_image)
                == HistogramEqualization().apply(random_image))

    def test_linear_contrast(self, random_image):
        assert linear_contrast(random_image) == LinearContrast().apply(random_image)

    def test_linear_contrast_flat_identity(self, flat_color_image):
        assert linear_contrast(flat_color_image) is flat_color_image

    def test_top_level_exports(self):
        assert pixelforge.median_filter is median_filter
        assert pixelforge.PixelBuffer is not None

    @pytest.mark.parametrize('func', [median_filter, histogram_equalization,
                                      linear_contrast])
    def test_dimensions_preserved(self, func, random_image):
        assert func(random_image).shape == random_image.shape

    @pytest.mark.parametrize('func', [median_filter, histogram_equalization,
                                      linear_contrast])
    def test_malformed_input_rejected(self, func):
        with pytest.raises(ValidationError):
            func(np.zeros((4, 4, 4), dtype=np.uint8))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_names(self):
        assert list(FILTERS) == ['median', 'equalize', 'contrast']

    def test_get_filter_returns_instance(self):
        assert isinstance(get_filter('equalize'), HistogramEqualization)

    def test_get_filter_forwards_params(self):
        assert get_filter('median', border='copy').border == 'copy'

    def test_unknown_filter_raises(self):
        with pytest.raises(ValidationError, match="Unknown filter"):
            get_filter('sharpen')

    def test_apply_filter(self, random_image):
        assert apply_filter('contrast', random_image) == linear_contrast(random_image)

    def test_apply_filter_runtime_override(self, random_image):
        result = apply_filter('median', random_image, border='copy')
        assert result.pixel(0, 0) == random_image.pixel(0, 0)


# ---------------------------------------------------------------------------
# FilterRunner
# ---------------------------------------------------------------------------

class TestFilterRunner:
    def test_future_result(self, random_image):
        with FilterRunner() as runner:
            future = runner.submit('median', random_image)
            assert future.result(timeout=30) == median_filter(random_image)

    def test_on_result_callback(self, random_image):
        received = []
        done = threading.Event()

        def show(buffer):
            received.append(buffer)
            done.set()

        with FilterRunner(on_result=show) as runner:
            runner.submit('equalize', random_image)
        assert done.wait(timeout=30)
        assert received == [histogram_equalization(random_image)]

    def test_failure_surfaces_on_future(self):
        received = []
        with FilterRunner(on_result=received.append) as runner:
            future = runner.submit('contrast', 'not a buffer')
            with pytest.raises(ValidationError):
                future.result(timeout=30)
        assert received == []

    def test_unknown_name_raises_immediately(self, random_image):
        with FilterRunner() as runner:
            with pytest.raises(ValidationError):
                runner.submit('blur', random_image)

    def test_parallel_submissions(self, random_image):
        expected = median_filter(random_image)
        with FilterRunner(max_workers=4) as runner:
            futures = [runner.submit('median', random_image) for _ in range(8)]
            results = [f.result(timeout=30) for f in futures]
        assert all(r == expected for r in results)

    def test_abandoned_future_is_harmless(self, random_image):
        with FilterRunner() as runner:
            runner.submit('median', random_image)
            kept = runner.submit('contrast', random_image)
            assert kept.result(timeout=30) == linear_contrast(random_image)

    def test_submit_after_shutdown_raises(self, random_image):
        runner = FilterRunner()
        runner.shutdown()
        with pytest.raises(RuntimeError):
            runner.submit('median', random_image)

    def test_invalid_worker_count(self):
        with pytest.raises(ValidationError):
            FilterRunner(max_workers=0)

    def test_on_result_runs_inline_for_finished_call(self, random_image):
        callers = []
        with FilterRunner(on_result=lambda buf: callers.append(
                threading.current_thread())) as runner:
            done = Future()
            done.set_result(random_image)
            done.add_done_callback(runner._deliver)
        assert callers == [threading.current_thread()]
