"""
Compatibility wrapper around Pillow (which provides the `PIL` namespace).

This module loads the Pillow-provided modules via importlib and re-exports the
symbols the library needs: `Image`, `UnidentifiedImageError`,
`DecompressionBombError` and the `LANCZOS` resampling filter. Importing
from `pillow_compat` keeps the Pillow entry points in one place.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil = _import("PIL")
_pil_image = _import("PIL.Image")

if _pil is None or _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image

UnidentifiedImageError = getattr(_pil, "UnidentifiedImageError")
DecompressionBombError = getattr(_pil_image, "DecompressionBombError")

LANCZOS = _pil_image.Resampling.LANCZOS
