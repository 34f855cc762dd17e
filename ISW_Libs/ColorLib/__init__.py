"""
ColorLib - Color models and color analysis

This module provides color value types, color specification parsing
and dominant color detection for image-square-wizard.
"""

from ISW_Libs.ColorLib.color_models import BackgroundMode, Color, TRANSPARENT_COLOR
from ISW_Libs.ColorLib.color_spec import ColorSpec, parse_color_spec
from ISW_Libs.ColorLib.dominant_color import (
    Bucket,
    ColorHistogram,
    bucket_key,
    build_histogram,
    detect_dominant_color,
)

__all__ = [
    "BackgroundMode",
    "Color",
    "TRANSPARENT_COLOR",
    "ColorSpec",
    "parse_color_spec",
    "Bucket",
    "ColorHistogram",
    "bucket_key",
    "build_histogram",
    "detect_dominant_color",
]
