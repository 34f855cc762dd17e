"""
Square canvas layout.

Computes the side of the square canvas and where the original image sits on
it. Offsets use floor division, so an odd margin leaves the extra pixel on
the right or bottom.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CanvasLayout:
    target_size: int
    left_offset: int
    top_offset: int

    def embed_arguments(self):
        """(width, height, left, top) as expected by the toolkit's embed."""
        return self.target_size, self.target_size, self.left_offset, self.top_offset


def plan_square_canvas(width: int, height: int) -> CanvasLayout:
    if width < 0 or height < 0:
        raise ValueError(f"Image dimensions must be non-negative, got {width}x{height}")

    target = max(width, height)
    return CanvasLayout(
        target_size=target,
        left_offset=(target - width) // 2,
        top_offset=(target - height) // 2,
    )
