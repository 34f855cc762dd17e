"""
Square padding pipeline.

Decodes an image, normalizes it, resolves the background, plans the square
canvas and writes the padded result.

Classes:
    SquareResult: Summary of one processed image

Functions:
    prepare_image: Decode and normalize an image to 8-bit sRGB with 3 or 4 bands
    pad_to_square: Pad an already-decoded image onto its square canvas
    square_image: Full file-to-file transform
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple, Union
import logging

from ISW_Libs.ColorLib.color_models import BackgroundMode, Color
from ISW_Libs.CanvasLib.background_resolver import resolve_background
from ISW_Libs.CanvasLib.canvas_layout import CanvasLayout, plan_square_canvas
from ISW_Libs.CanvasLib.image_toolkit import get_default_toolkit

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class SquareResult:
    """Outcome of padding one image.

    Attributes:
        layout: Canvas size and placement of the original image
        background: Fill color used for the margins
        bands: Band count of the written canvas
    """
    layout: CanvasLayout
    background: Color
    bands: int


def prepare_image(input_path: PathLike, toolkit: Any = None) -> Any:
    """Decode an image and normalize it to 8-bit sRGB with 3 or 4 bands."""
    if toolkit is None:
        toolkit = get_default_toolkit()

    image = toolkit.decode(input_path)
    image = toolkit.to_srgb(image)
    image = toolkit.to_8bit(image)
    return toolkit.ensure_3_or_4_bands(image)


def pad_to_square(image: Any, mode: BackgroundMode, toolkit: Any = None) -> Tuple[Any, SquareResult]:
    """
    Pad a normalized image onto a square canvas.

    Args:
        image: Normalized image (8-bit sRGB, 3 or 4 bands)
        mode: Requested background mode
        toolkit: Image toolkit (default: the shared PillowToolkit)

    Returns:
        Tuple of (canvas, result)
    """
    if toolkit is None:
        toolkit = get_default_toolkit()

    resolved = resolve_background(mode, image, toolkit)
    width, height = toolkit.size(resolved.image)
    layout = plan_square_canvas(width, height)
    logger.debug(
        f"Embedding {width}x{height} at ({layout.left_offset}, {layout.top_offset}) "
        f"on {layout.target_size}x{layout.target_size}"
    )

    canvas = toolkit.embed(resolved.image, *layout.embed_arguments(), resolved.color)
    result = SquareResult(
        layout=layout,
        background=resolved.color,
        bands=toolkit.band_count(resolved.image),
    )
    return canvas, result


def square_image(
    input_path: PathLike,
    output_path: PathLike,
    mode: Optional[BackgroundMode] = None,
    toolkit: Any = None,
) -> SquareResult:
    """
    Pad the image at ``input_path`` to a square and write it to ``output_path``.

    Args:
        input_path: Source image path
        output_path: Destination path; its extension selects the format
        mode: Background mode (default: auto)
        toolkit: Image toolkit (default: the shared PillowToolkit)

    Returns:
        SquareResult describing the written canvas

    Raises:
        ImageProcessingError: If decoding, processing or writing fails
    """
    if toolkit is None:
        toolkit = get_default_toolkit()
    if mode is None:
        mode = BackgroundMode.auto()

    image = prepare_image(input_path, toolkit)
    canvas, result = pad_to_square(image, mode, toolkit)
    toolkit.encode(canvas, output_path)
    return result
