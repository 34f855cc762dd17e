"""
CanvasLib - Square canvas construction

This module resolves canvas backgrounds, plans the square layout and
drives the Pillow-backed image toolkit that decodes, pads and writes images.
"""

from ISW_Libs.CanvasLib.image_toolkit import PillowToolkit, PixelBuffer, get_default_toolkit
from ISW_Libs.CanvasLib.canvas_layout import CanvasLayout, plan_square_canvas
from ISW_Libs.CanvasLib.background_resolver import ResolvedBackground, resolve_background
from ISW_Libs.CanvasLib.output_formats import (
    extract_extension,
    extension_supports_alpha,
    is_supported_extension,
    validate_output_request,
)
from ISW_Libs.CanvasLib.square_pipeline import (
    SquareResult,
    pad_to_square,
    prepare_image,
    square_image,
)

__all__ = [
    "PillowToolkit",
    "PixelBuffer",
    "get_default_toolkit",
    "CanvasLayout",
    "plan_square_canvas",
    "ResolvedBackground",
    "resolve_background",
    "extract_extension",
    "extension_supports_alpha",
    "is_supported_extension",
    "validate_output_request",
    "SquareResult",
    "pad_to_square",
    "prepare_image",
    "square_image",
]
