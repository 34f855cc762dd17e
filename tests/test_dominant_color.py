"""
Tests for dominant color detection.

Tests cover:
- Bucket key quantization
- Histogram accumulation and tie-breaking
- Alpha filtering and the mid-gray fallback
- Downscaling of large images through the toolkit
"""

from unittest.mock import Mock

import numpy as np
import pytest
from PIL import Image

from ISW_Libs.ColorLib.color_models import Color
from ISW_Libs.ColorLib.dominant_color import (
    ColorHistogram,
    bucket_key,
    build_histogram,
    detect_dominant_color,
    sample_scale,
)


class TestBucketKey:
    """Tests for bucket_key."""

    def test_concatenates_top_nibbles(self):
        assert bucket_key(0xAB, 0xCD, 0xEF) == 0xACE

    def test_extremes(self):
        assert bucket_key(0, 0, 0) == 0
        assert bucket_key(255, 255, 255) == 4095

    def test_near_colors_share_bucket(self):
        assert bucket_key(16, 16, 16) == bucket_key(31, 31, 31)
        assert bucket_key(15, 15, 15) != bucket_key(16, 16, 16)


class TestColorHistogram:
    """Tests for ColorHistogram."""

    def test_starts_empty(self):
        histogram = ColorHistogram()

        assert histogram.counts.shape == (4096,)
        assert histogram.total_samples == 0
        assert histogram.dominant_bucket() is None

    def test_accumulates_counts_and_sums(self):
        histogram = ColorHistogram()
        histogram.add(np.array([16, 20]), np.array([16, 20]), np.array([16, 20]))

        bucket = histogram.bucket(bucket_key(16, 16, 16))
        assert bucket.count == 2
        assert bucket.red_sum == 36.0
        assert bucket.mean() == Color.rgb(18, 18, 18)

    def test_tie_goes_to_lowest_key(self):
        """Two equally populated buckets resolve to the lower key."""
        histogram = ColorHistogram()
        histogram.add(np.array([255, 0]), np.array([0, 0]), np.array([0, 255]))

        best = histogram.dominant_bucket()
        assert best.key == bucket_key(0, 0, 255)


class TestBuildHistogram:
    """Tests for build_histogram."""

    def test_rgba_skips_nearly_transparent(self):
        pixels = np.array([[[10, 10, 10, 7], [200, 200, 200, 8]]], dtype=np.uint8)

        histogram = build_histogram(pixels)

        assert histogram.total_samples == 1
        assert histogram.dominant_bucket().mean() == Color.rgb(200, 200, 200)

    def test_single_band_repeats_red(self):
        pixels = np.array([[[90], [90]]], dtype=np.uint8)

        best = build_histogram(pixels).dominant_bucket()

        assert best.key == bucket_key(90, 90, 90)
        assert best.mean() == Color.rgb(90, 90, 90)

    def test_two_band_uses_last_band_as_alpha(self):
        pixels = np.array([[[50, 0], [60, 255]]], dtype=np.uint8)

        histogram = build_histogram(pixels)

        assert histogram.total_samples == 1
        assert histogram.dominant_bucket().mean() == Color.rgb(60, 60, 60)

    def test_empty_buffer(self):
        histogram = build_histogram(np.zeros((0, 0, 3), dtype=np.uint8))
        assert histogram.total_samples == 0


class TestSampleScale:
    """Tests for sample_scale."""

    @pytest.mark.parametrize("size", [(160, 10), (10, 160), (1, 1), (0, 0)])
    def test_small_images_untouched(self, size):
        assert sample_scale(*size) == 1.0

    def test_longest_side_drives_scale(self):
        assert sample_scale(320, 100) == 0.5
        assert sample_scale(100, 640) == 0.25


class TestDetectDominantColor:
    """Tests for detect_dominant_color with real images."""

    def test_uniform_with_speckle(self, toolkit):
        """A single odd pixel must not change the result."""
        image = Image.new("RGB", (50, 50), (200, 30, 60))
        image.putpixel((25, 25), (10, 10, 10))

        color = detect_dominant_color(image, toolkit)

        assert color.bands == 3
        assert color.components == (200.0, 30.0, 60.0)

    def test_mean_of_bucket_not_midpoint(self, toolkit):
        """The result averages exact values inside the winning bucket."""
        image = Image.new("RGB", (4, 1), (16, 16, 16))
        image.putpixel((0, 0), (20, 20, 20))
        image.putpixel((1, 0), (20, 20, 20))

        assert detect_dominant_color(image, toolkit) == Color.rgb(18, 18, 18)

    def test_fully_transparent_falls_back_to_gray(self, toolkit):
        image = Image.new("RGBA", (20, 20), (255, 0, 0, 0))

        assert detect_dominant_color(image, toolkit) == Color.rgb(128, 128, 128)

    def test_transparent_pixels_do_not_bias(self, toolkit):
        """A large transparent area is ignored in favour of visible pixels."""
        image = Image.new("RGBA", (10, 10), (255, 255, 255, 0))
        for x in range(3):
            image.putpixel((x, 0), (0, 100, 0, 255))

        assert detect_dominant_color(image, toolkit) == Color.rgb(0, 100, 0)

    def test_equal_regions_pick_lowest_bucket(self, toolkit):
        """Red (key 0xF00) and blue (key 0x00F) tie; blue has the lower key."""
        image = Image.new("RGB", (10, 10), (255, 0, 0))
        image.paste((0, 0, 255), (5, 0, 10, 10))

        assert detect_dominant_color(image, toolkit) == Color.rgb(0, 0, 255)

    def test_large_uniform_image(self, toolkit):
        """Downscaling a uniform image keeps its color."""
        image = Image.new("RGB", (400, 200), (12, 200, 99))

        color = detect_dominant_color(image, toolkit)

        assert color.components == pytest.approx((12.0, 200.0, 99.0), abs=1.0)

    def test_default_toolkit(self):
        image = Image.new("RGB", (3, 3), (1, 2, 3))
        assert detect_dominant_color(image) == Color.rgb(1, 2, 3)


class TestDetectWithMockToolkit:
    """Tests for the toolkit interaction of detect_dominant_color."""

    def test_resizes_large_images(self, make_pixel_buffer):
        toolkit = Mock()
        toolkit.size.return_value = (320, 100)
        toolkit.resize.return_value = "sample"
        toolkit.read_pixels.return_value = make_pixel_buffer([[(5, 6, 7)]])

        color = detect_dominant_color("image", toolkit)

        toolkit.resize.assert_called_once_with("image", 0.5)
        toolkit.read_pixels.assert_called_once_with("sample")
        assert color == Color.rgb(5, 6, 7)

    def test_small_images_read_directly(self, make_pixel_buffer):
        toolkit = Mock()
        toolkit.size.return_value = (160, 160)
        toolkit.read_pixels.return_value = make_pixel_buffer([[(5, 6, 7)]])

        detect_dominant_color("image", toolkit)

        toolkit.resize.assert_not_called()
        toolkit.read_pixels.assert_called_once_with("image")

    def test_zero_size_image(self):
        """An empty image yields mid-gray rather than an error."""
        toolkit = Mock()
        toolkit.size.return_value = (0, 0)
        toolkit.read_pixels.return_value = Mock(data=np.zeros((0, 0, 3), dtype=np.uint8))

        assert detect_dominant_color("image", toolkit) == Color.rgb(128, 128, 128)
