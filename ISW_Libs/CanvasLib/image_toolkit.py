"""
Pillow-backed image toolkit for image-square-wizard.

Every image operation the core needs (decode, colorspace and depth
normalization, resizing, pixel reads, alpha insertion, canvas embedding and
encoding) goes through ``PillowToolkit``. Any failure reported by Pillow or
numpy is re-raised as ``ImageProcessingError`` carrying the original message.

Classes:
    PixelBuffer: Raw 8-bit pixel data read from an image
    PillowToolkit: The toolkit implementation

Functions:
    get_default_toolkit: Shared PillowToolkit instance
"""

from dataclasses import dataclass
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Tuple
import logging

import numpy as np

from ISW_Libs.ColorLib.color_models import Color
from ISW_Libs.constants import DEFAULT_JPEG_QUALITY, PILLOW_FORMATS
from ISW_Libs.errors import ImageProcessingError
from ISW_Libs.pillow_compat import (
    DecompressionBombError,
    Image,
    LANCZOS,
    UnidentifiedImageError,
)

logger = logging.getLogger(__name__)

# Modes converted to sRGB; grayscale modes are left for ensure_3_or_4_bands
_SRGB_CONVERSIONS = {
    "CMYK": "RGB",
    "YCbCr": "RGB",
    "LAB": "RGB",
    "HSV": "RGB",
    "PA": "RGBA",
    "RGBX": "RGB",
    "RGBa": "RGBA",
    "La": "LA",
}

_EIGHT_BIT_MODES = {
    "L", "LA", "La", "P", "PA", "RGB", "RGBA", "RGBX", "RGBa", "CMYK", "YCbCr", "LAB", "HSV",
}

_TOOLKIT_ERRORS = (
    OSError,
    ValueError,
    KeyError,
    TypeError,
    UnidentifiedImageError,
    DecompressionBombError,
)


def _wrap_toolkit_errors(func: Callable) -> Callable:
    """Re-raise Pillow/numpy failures as ImageProcessingError."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ImageProcessingError:
            raise
        except _TOOLKIT_ERRORS as exc:
            raise ImageProcessingError(str(exc) or exc.__class__.__name__) from exc

    return wrapper


@dataclass
class PixelBuffer:
    """8-bit pixel data shaped ``(height, width, bands)``."""

    data: np.ndarray
    width: int
    height: int
    bands: int


class PillowToolkit:
    """Image operations backed by Pillow."""

    def size(self, image: Any) -> Tuple[int, int]:
        return image.size

    def band_count(self, image: Any) -> int:
        return len(image.getbands())

    @_wrap_toolkit_errors
    def decode(self, path: Path) -> Any:
        """
        Open and fully decode an image file.

        Args:
            path: Path to the image file

        Returns:
            PIL Image object

        Raises:
            ImageProcessingError: If the file is missing or cannot be decoded
        """
        with Image.open(path) as opened:
            opened.load()
            image = opened.copy()
        logger.debug(f"Decoded {path}: mode={image.mode} size={image.size}")
        return image

    @_wrap_toolkit_errors
    def to_srgb(self, image: Any) -> Any:
        """Convert non-RGB colorspaces and padded or premultiplied layouts to RGB, RGBA or LA."""
        if image.mode == "P":
            target = "RGBA" if "transparency" in image.info else "RGB"
        else:
            target = _SRGB_CONVERSIONS.get(image.mode)

        if target is None:
            return image
        logger.debug(f"Converting {image.mode} to {target}")
        return image.convert(target)

    @_wrap_toolkit_errors
    def to_8bit(self, image: Any) -> Any:
        """Cast to 8 bits per channel; no-op for images that already are."""
        if image.mode in _EIGHT_BIT_MODES:
            return image

        if image.mode == "1":
            return image.convert("L")

        values = np.asarray(image)
        if image.mode.startswith("I;16"):
            converted = (values.astype(np.uint32) >> 8).astype(np.uint8)
        else:
            # Plain cast like vips_cast: values are clipped, not rescaled
            converted = np.clip(values, 0, 255).astype(np.uint8)
        logger.debug(f"Cast {image.mode} to 8-bit")
        return Image.fromarray(converted)

    @_wrap_toolkit_errors
    def ensure_3_or_4_bands(self, image: Any) -> Any:
        """
        Promote the image to RGB or RGBA.

        Grayscale images are converted through the colorspace; any other band
        layout falls back to its first three channels.
        """
        if image.mode in ("RGB", "RGBA"):
            return image
        if image.mode == "L":
            return image.convert("RGB")
        if image.mode == "LA":
            return image.convert("RGBA")
        return _truncate_to_rgb(image)

    @_wrap_toolkit_errors
    def resize(self, image: Any, scale: float) -> Any:
        width, height = image.size
        new_size = (max(1, round(width * scale)), max(1, round(height * scale)))
        logger.debug(f"Resizing {image.size} by {scale:.4f} to {new_size}")
        return image.resize(new_size, LANCZOS)

    @_wrap_toolkit_errors
    def read_pixels(self, image: Any) -> PixelBuffer:
        width, height = image.size
        bands = self.band_count(image)
        data = np.asarray(image, dtype=np.uint8).reshape(height, width, bands)
        return PixelBuffer(data=data, width=width, height=height, bands=bands)

    @_wrap_toolkit_errors
    def add_alpha(self, image: Any) -> Any:
        """Append a fully opaque alpha band."""
        if image.mode == "L":
            return image.convert("LA")
        if image.mode == "RGB":
            return image.convert("RGBA")
        raise ImageProcessingError(f"cannot add alpha to {image.mode} image")

    @_wrap_toolkit_errors
    def embed(
        self,
        image: Any,
        width: int,
        height: int,
        left: int,
        top: int,
        background: Color,
    ) -> Any:
        """
        Place the image on a new canvas filled with the background color.

        The source pixels (alpha included) are copied, not blended.

        Args:
            image: PIL Image to place
            width: Canvas width
            height: Canvas height
            left: Horizontal offset of the image
            top: Vertical offset of the image
            background: Fill color, band count matching the image

        Returns:
            The new canvas as a PIL Image
        """
        if background.bands != self.band_count(image):
            raise ImageProcessingError(
                f"background has {background.bands} bands but image has {self.band_count(image)}"
            )
        canvas = Image.new(image.mode, (width, height), background.as_fill())
        canvas.paste(image, (left, top))
        return canvas

    @_wrap_toolkit_errors
    def encode(self, image: Any, path: Path) -> None:
        """
        Save the image, choosing the format from the file extension.

        Raises:
            ImageProcessingError: If the format is unknown or the write fails
        """
        path = Path(path)
        save_format = PILLOW_FORMATS.get(path.suffix.lower().lstrip("."))
        if save_format is None:
            raise ImageProcessingError(f"unknown output format for '{path}'")

        kwargs = {"format": save_format}
        if save_format == "JPEG":
            kwargs["quality"] = DEFAULT_JPEG_QUALITY
            if image.mode in ("RGBA", "LA"):
                image = image.convert("RGB" if image.mode == "RGBA" else "L")

        image.save(path, **kwargs)
        logger.debug(f"Wrote {path} as {save_format}")


def _truncate_to_rgb(image: Any) -> Any:
    """Fallback for exotic band layouts: keep the first three channels."""
    bands = image.split()
    if len(bands) < 3:
        raise ImageProcessingError(f"cannot build RGB from {image.mode} image")
    logger.debug(f"Truncating {image.mode} image to its first three bands")
    return Image.merge("RGB", [band.convert("L") for band in bands[:3]])


_default_toolkit = PillowToolkit()


def get_default_toolkit() -> PillowToolkit:
    return _default_toolkit
