"""
Color data models for image-square-wizard.

This module defines the core color structures used throughout the library.

Classes:
    Color: Immutable 3- or 4-component color (RGB or RGBA, 0-255 logical range)
    BackgroundMode: How the canvas background is chosen (auto, manual, transparent)

Type Aliases:
    FillColor: Integer tuple handed to the image toolkit
    BackgroundKind: Literal tag of a BackgroundMode
"""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from ISW_Libs.constants import COMPONENT_MAX, COMPONENT_MIN, OPAQUE_ALPHA

FillColor = Tuple[int, ...]
BackgroundKind = Literal["auto", "manual", "transparent"]


@dataclass(frozen=True)
class Color:
    """A color with 3 (RGB) or 4 (RGBA) components.

    Components may transiently fall outside [0, 255]; call ``clamped()``
    before handing the color to the toolkit.
    """

    components: Tuple[float, ...]

    def __post_init__(self):
        components = tuple(float(value) for value in self.components)
        if len(components) not in (3, 4):
            raise ValueError(f"Color needs 3 or 4 components, got {len(components)}")
        object.__setattr__(self, "components", components)

    @classmethod
    def rgb(cls, red: float, green: float, blue: float) -> "Color":
        return cls((red, green, blue))

    @classmethod
    def rgba(cls, red: float, green: float, blue: float, alpha: float) -> "Color":
        return cls((red, green, blue, alpha))

    @property
    def bands(self) -> int:
        return len(self.components)

    @property
    def has_alpha(self) -> bool:
        return self.bands == 4

    def with_opacity(self, alpha: float = OPAQUE_ALPHA) -> "Color":
        """Return this color widened to 4 bands with the given alpha.

        A color that already carries alpha has it replaced.
        """
        return Color(self.components[:3] + (alpha,))

    def clamped(self) -> "Color":
        return Color(tuple(min(COMPONENT_MAX, max(COMPONENT_MIN, value)) for value in self.components))

    def as_fill(self) -> FillColor:
        """Integer components, clamped and rounded, for canvas fills."""
        return tuple(int(round(value)) for value in self.clamped().components)

    def __iter__(self):
        return iter(self.components)

    def __len__(self) -> int:
        return self.bands

    def __getitem__(self, index):
        return self.components[index]


TRANSPARENT_COLOR = Color((0.0, 0.0, 0.0, 0.0))


@dataclass(frozen=True)
class BackgroundMode:
    """Requested background behaviour.

    Use the ``auto()``, ``manual(color)`` and ``transparent()`` constructors;
    ``color`` is only set for manual mode.
    """

    kind: BackgroundKind
    color: Optional[Color] = None

    def __post_init__(self):
        if self.kind not in ("auto", "manual", "transparent"):
            raise ValueError(f"Unsupported background mode: {self.kind}")
        if self.kind == "manual" and self.color is None:
            raise ValueError("Manual background mode requires a color")
        if self.kind != "manual" and self.color is not None:
            raise ValueError(f"Background mode '{self.kind}' does not take a color")

    @classmethod
    def auto(cls) -> "BackgroundMode":
        return cls("auto")

    @classmethod
    def manual(cls, color: Color) -> "BackgroundMode":
        return cls("manual", color)

    @classmethod
    def transparent(cls) -> "BackgroundMode":
        return cls("transparent")

    @property
    def is_auto(self) -> bool:
        return self.kind == "auto"

    @property
    def is_manual(self) -> bool:
        return self.kind == "manual"

    @property
    def is_transparent(self) -> bool:
        return self.kind == "transparent"

    @property
    def requires_alpha(self) -> bool:
        """True when the output format must be able to store alpha."""
        if self.is_transparent:
            return True
        return self.is_manual and self.color.has_alpha
