"""
File format rules for image-square-wizard.

Functions:
    extract_extension: Lower-cased extension of a path, without the dot
    get_supported_extensions: Sorted list of supported extensions
    get_alpha_capable_extensions: Sorted list of extensions that can store alpha
    is_supported_extension: Check an extension against the supported set
    extension_supports_alpha: Check whether an extension can store alpha
    validate_output_request: Reject unusable input/output/background combinations
"""

from pathlib import Path
from typing import List, Optional, Union

from ISW_Libs.ColorLib.color_models import BackgroundMode
from ISW_Libs.constants import ALPHA_CAPABLE_EXTENSIONS, SUPPORTED_EXTENSIONS
from ISW_Libs.errors import InvalidArguments

PathLike = Union[str, Path]


def extract_extension(path: PathLike) -> Optional[str]:
    """
    Get the extension of a path.

    Args:
        path: File path

    Returns:
        The lower-cased extension without the dot, or None if there is none
    """
    suffix = Path(path).suffix
    if len(suffix) < 2:
        return None
    return suffix[1:].lower()


def get_supported_extensions() -> List[str]:
    return sorted(SUPPORTED_EXTENSIONS)


def get_alpha_capable_extensions() -> List[str]:
    return sorted(ALPHA_CAPABLE_EXTENSIONS)


def is_supported_extension(ext: Optional[str]) -> bool:
    return ext is not None and ext.lower() in SUPPORTED_EXTENSIONS


def extension_supports_alpha(ext: Optional[str]) -> bool:
    return ext is not None and ext.lower() in ALPHA_CAPABLE_EXTENSIONS


def validate_output_request(input_path: PathLike, output_path: PathLike, mode: BackgroundMode) -> None:
    """
    Check paths and background mode before any image is touched.

    Args:
        input_path: Source image path
        output_path: Destination image path
        mode: Requested background mode

    Raises:
        InvalidArguments: If a path is missing, an extension is unsupported, or
            the background needs alpha the output format cannot store
    """
    if not input_path or not output_path:
        raise InvalidArguments("input and output paths are required")

    supported = ", ".join(get_supported_extensions())
    if not is_supported_extension(extract_extension(input_path)):
        raise InvalidArguments(f"unsupported input extension for '{input_path}' (supported: {supported})")

    output_ext = extract_extension(output_path)
    if not is_supported_extension(output_ext):
        raise InvalidArguments(f"unsupported output extension for '{output_path}' (supported: {supported})")

    if extension_supports_alpha(output_ext):
        return

    if mode.is_transparent:
        formats = ", ".join(get_alpha_capable_extensions())
        raise InvalidArguments(f"transparent background requires alpha-capable formats ({formats})")
    if mode.requires_alpha:
        raise InvalidArguments("4-component backgrounds require alpha-capable output formats")
