"""
Constants and configuration values for image-square-wizard.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Program identity
PROGRAM_NAME = "isw"

# Dominant color detection
DOMINANT_SAMPLE_TARGET = 160  # Longest side of the sampled copy, in pixels
ALPHA_SKIP_THRESHOLD = 8  # Pixels with alpha below this are ignored
QUANTIZE_SHIFT = 4  # Keep the top 4 bits of each channel
BUCKET_COUNT = 4096  # 16 * 16 * 16 quantized color cells
FALLBACK_COLOR = (128.0, 128.0, 128.0)

# Color component range
COMPONENT_MIN = 0.0
COMPONENT_MAX = 255.0
OPAQUE_ALPHA = 255.0

# Color specification keywords
TRANSPARENT_KEYWORD = "transparent"
HEX_PREFIX = "#"
COMPONENT_SEPARATOR = ","

# Supported file formats
SUPPORTED_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "heic", "heif", "tif", "tiff", "avif"}
ALPHA_CAPABLE_EXTENSIONS = {"png", "webp", "heic", "heif", "tif", "tiff", "avif"}

# Extension -> Pillow save format
PILLOW_FORMATS = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "heic": "HEIF",
    "heif": "HEIF",
    "tif": "TIFF",
    "tiff": "TIFF",
    "avif": "AVIF",
}
DEFAULT_JPEG_QUALITY = 95

# Logging
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
