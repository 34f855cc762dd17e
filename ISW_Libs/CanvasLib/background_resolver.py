"""
Background color resolution.

Reconciles the requested background mode with the image's band count so the
canvas fill color and the image always agree on whether alpha is present.
Alpha is only ever added to the image, never removed.

Classes:
    ResolvedBackground: The fill color and the (possibly alpha-extended) image

Functions:
    resolve_background: Resolve a BackgroundMode against an image
"""

from dataclasses import dataclass
from typing import Any
import logging

from ISW_Libs.ColorLib.color_models import TRANSPARENT_COLOR, BackgroundMode, Color
from ISW_Libs.ColorLib.dominant_color import detect_dominant_color
from ISW_Libs.CanvasLib.image_toolkit import get_default_toolkit
from ISW_Libs.constants import OPAQUE_ALPHA

logger = logging.getLogger(__name__)


@dataclass
class ResolvedBackground:
    color: Color
    image: Any


def resolve_background(mode: BackgroundMode, image: Any, toolkit: Any = None) -> ResolvedBackground:
    """
    Resolve the canvas background for an image.

    Args:
        mode: Requested background mode
        image: Normalized image (8-bit sRGB, 3 or 4 bands)
        toolkit: Image toolkit (default: the shared PillowToolkit)

    Returns:
        ResolvedBackground whose color is clamped to [0, 255] and has the same
        band count as its image

    Raises:
        ImageProcessingError: If the toolkit fails to add alpha or sample the image
    """
    if toolkit is None:
        toolkit = get_default_toolkit()

    bands = toolkit.band_count(image)

    if mode.is_auto:
        color = detect_dominant_color(image, toolkit)
        if bands == 4:
            color = color.with_opacity(OPAQUE_ALPHA)
    elif mode.is_transparent:
        color = TRANSPARENT_COLOR
        if bands == 3:
            image = toolkit.add_alpha(image)
    else:
        color = mode.color
        if color.bands == 4 and bands == 3:
            image = toolkit.add_alpha(image)
        elif color.bands == 3 and bands == 4:
            color = color.with_opacity(OPAQUE_ALPHA)

    color = color.clamped()
    logger.debug(f"Resolved {mode.kind} background to {color.components}")
    return ResolvedBackground(color=color, image=image)
