"""
Dominant color detection.

Estimates the single most representative color of an image by sampling a
downscaled copy into a coarse 16x16x16 color histogram and averaging the
exact values that fell into the most populated cell.

The image must already be normalized to 8-bit sRGB with 3 or 4 bands.

Classes:
    Bucket: Read view of one histogram cell
    ColorHistogram: Fixed 4096-cell histogram of quantized colors

Functions:
    bucket_key: 12-bit histogram key of an RGB triplet
    sample_scale: Downscale factor used before sampling
    build_histogram: Accumulate a pixel buffer into a ColorHistogram
    detect_dominant_color: Estimate the dominant color of an image
"""

from dataclasses import dataclass
from typing import Any, Optional
import logging

import numpy as np

from ISW_Libs.ColorLib.color_models import Color
from ISW_Libs.constants import (
    ALPHA_SKIP_THRESHOLD,
    BUCKET_COUNT,
    DOMINANT_SAMPLE_TARGET,
    FALLBACK_COLOR,
    QUANTIZE_SHIFT,
)

logger = logging.getLogger(__name__)

_LEVELS = 256 >> QUANTIZE_SHIFT


def bucket_key(red: int, green: int, blue: int) -> int:
    """Concatenate the top 4 bits of each channel into a 12-bit key."""
    return (
        ((red >> QUANTIZE_SHIFT) * _LEVELS + (green >> QUANTIZE_SHIFT)) * _LEVELS
        + (blue >> QUANTIZE_SHIFT)
    )


@dataclass(frozen=True)
class Bucket:
    key: int
    count: int
    red_sum: float
    green_sum: float
    blue_sum: float

    def mean(self) -> Color:
        return Color.rgb(
            self.red_sum / self.count,
            self.green_sum / self.count,
            self.blue_sum / self.count,
        )


class ColorHistogram:
    """
    Fixed-size histogram of quantized colors.

    Counts and per-channel sums live in flat arrays of BUCKET_COUNT slots,
    indexed directly by the 12-bit bucket key.
    """

    def __init__(self):
        self.counts = np.zeros(BUCKET_COUNT, dtype=np.int64)
        self.red_sums = np.zeros(BUCKET_COUNT, dtype=np.float64)
        self.green_sums = np.zeros(BUCKET_COUNT, dtype=np.float64)
        self.blue_sums = np.zeros(BUCKET_COUNT, dtype=np.float64)

    @property
    def total_samples(self) -> int:
        return int(self.counts.sum())

    def add(self, red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> None:
        """Accumulate equally sized arrays of 8-bit channel values."""
        red = np.asarray(red, dtype=np.int64).ravel()
        green = np.asarray(green, dtype=np.int64).ravel()
        blue = np.asarray(blue, dtype=np.int64).ravel()
        if red.size == 0:
            return

        keys = bucket_key(red, green, blue)
        self.counts += np.bincount(keys, minlength=BUCKET_COUNT)
        self.red_sums += np.bincount(keys, weights=red, minlength=BUCKET_COUNT)
        self.green_sums += np.bincount(keys, weights=green, minlength=BUCKET_COUNT)
        self.blue_sums += np.bincount(keys, weights=blue, minlength=BUCKET_COUNT)

    def bucket(self, key: int) -> Bucket:
        return Bucket(
            key=key,
            count=int(self.counts[key]),
            red_sum=float(self.red_sums[key]),
            green_sum=float(self.green_sums[key]),
            blue_sum=float(self.blue_sums[key]),
        )

    def dominant_bucket(self) -> Optional[Bucket]:
        """Most populated bucket; ties go to the lowest key. None when empty."""
        if self.total_samples == 0:
            return None
        # argmax returns the first maximum, i.e. the lowest key
        return self.bucket(int(np.argmax(self.counts)))


def sample_scale(width: int, height: int) -> float:
    """Uniform factor bringing the longest side down to the sample target (1.0 if already small)."""
    longest = max(width, height)
    if longest > DOMINANT_SAMPLE_TARGET:
        return DOMINANT_SAMPLE_TARGET / longest
    return 1.0


def build_histogram(pixels: np.ndarray) -> ColorHistogram:
    """
    Accumulate a ``(height, width, bands)`` uint8 array into a histogram.

    With 1 or 2 bands green and blue repeat the first channel. The last band
    is alpha for 2- and 4-band data; pixels with alpha below the skip
    threshold are ignored.
    """
    bands = pixels.shape[-1] if pixels.ndim == 3 else 1
    flat = pixels.reshape(-1, bands)

    if bands in (2, 4):
        flat = flat[flat[:, -1] >= ALPHA_SKIP_THRESHOLD]

    red = flat[:, 0]
    green = flat[:, 1] if bands > 2 else red
    blue = flat[:, 2] if bands > 2 else red

    histogram = ColorHistogram()
    histogram.add(red, green, blue)
    return histogram


def detect_dominant_color(image: Any, toolkit: Any = None) -> Color:
    """
    Estimate the dominant color of an image.

    Args:
        image: Normalized image (8-bit sRGB, 3 or 4 bands)
        toolkit: Image toolkit used for resizing and pixel reads
            (default: the shared PillowToolkit)

    Returns:
        A 3-band Color: the mean of the exact values in the most populated
        bucket, or mid-gray when no pixel could be sampled

    Raises:
        ImageProcessingError: If the toolkit fails to resize or read the image
    """
    if toolkit is None:
        from ISW_Libs.CanvasLib.image_toolkit import get_default_toolkit
        toolkit = get_default_toolkit()

    width, height = toolkit.size(image)
    scale = sample_scale(width, height)
    sample = toolkit.resize(image, scale) if scale < 1.0 else image

    buffer = toolkit.read_pixels(sample)
    histogram = build_histogram(buffer.data)

    best = histogram.dominant_bucket()
    if best is None:
        logger.debug("No opaque samples; falling back to mid-gray")
        return Color(FALLBACK_COLOR)

    color = best.mean()
    logger.debug(
        f"Dominant bucket {best.key:#05x} holds {best.count}/{histogram.total_samples} samples: {color.components}"
    )
    return color
