# -*- coding: utf-8 -*-
"""
Processor Versioning Tests.

Tests for the @processor_version and @processor_tags decorators and the
version warning fired by ImageProcessor at first instantiation.

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
2026-02-06

Modified
--------
2026-10-19
"""

import warnings

import pytest

from pixelforge.engine import FILTERS
from pixelforge.image_processing.base import ImageProcessor, ImageTransform
from pixelforge.image_processing.versioning import processor_tags, processor_version
from pixelforge.vocabulary import ProcessorCategory


def _version_warnings(caught):
    return [
        x for x in caught
        if issubclass(x.category, UserWarning)
        and 'processor version' in str(x.message).lower()
    ]


class TestProcessorVersionDecorator:
    def test_stamps_version_on_class(self):
        @processor_version('2.1.0')
        class _Versioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        assert _Versioned.__processor_version__ == '2.1.0'

    def test_decorated_class_is_same_class(self):
        class _Plain:
            pass

        assert processor_version('1.0.0')(_Plain) is _Plain

    def test_version_without_argument(self):
        @processor_version()
        class _Inferred(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        assert isinstance(_Inferred.__processor_version__, str)
        assert _Inferred.__processor_version__


class TestMissingVersionWarning:
    def test_warns_once_for_undecorated_class(self):
        class _Unversioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        ImageProcessor._version_warned_classes.discard(_Unversioned)

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Unversioned()
            _Unversioned()
            found = _version_warnings(w)
            assert len(found) == 1
            assert '_Unversioned' in str(found[0].message)

    def test_no_warning_for_decorated_class(self):
        @processor_version('1.0.0')
        class _Versioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Versioned()
            assert _version_warnings(w) == []

    def test_abstract_transform_not_instantiable(self):
        with pytest.raises(TypeError):
            ImageTransform()

    @pytest.mark.parametrize('name', sorted(FILTERS))
    def test_registered_filters_have_versions(self, name):
        assert FILTERS[name].__processor_version__ == '1.0.0'


class TestProcessorTagsDecorator:
    def test_stamps_tags(self):
        @processor_tags(category=ProcessorCategory.ENHANCE, description='Boost')
        class _Tagged:
            pass

        assert _Tagged.__processor_tags__ == {
            'category': ProcessorCategory.ENHANCE,
            'description': 'Boost',
        }

    def test_empty_tags(self):
        @processor_tags()
        class _Bare:
            pass

        assert _Bare.__processor_tags__['category'] is None

    def test_bad_category_raises(self):
        with pytest.raises(TypeError, match="ProcessorCategory"):
            processor_tags(category='filters')

    @pytest.mark.parametrize('name, label', [
        ('median', 'Median Filter'),
        ('equalize', 'Equalize Histogram'),
        ('contrast', 'Linear Contrast'),
    ])
    def test_registered_filter_labels(self, name, label):
        assert FILTERS[name].__processor_tags__['description'] == label
