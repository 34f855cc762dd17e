"""
Pytest configuration and shared fixtures for image-square-wizard tests.

This module provides shared test fixtures used across multiple test modules.
"""

import pytest
import numpy as np

from ISW_Libs.CanvasLib.image_toolkit import PillowToolkit, PixelBuffer


@pytest.fixture
def toolkit():
    """Provide a fresh Pillow-backed toolkit."""
    return PillowToolkit()


@pytest.fixture
def make_pixel_buffer():
    """
    Build a PixelBuffer from nested pixel rows.

    Returns:
        Callable taking a list of rows of pixel tuples
    """
    def _make(rows):
        data = np.array(rows, dtype=np.uint8)
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        height, width, bands = data.shape
        return PixelBuffer(data=data, width=width, height=height, bands=bands)

    return _make

