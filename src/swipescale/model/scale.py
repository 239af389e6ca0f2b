"""
Scale Mapping
=============
Converts "movement units" (eDPI × inches) into an on-screen pixel length.

The calibration point is REFERENCE_EDPI moved over REFERENCE_INCHES: that
configuration fills FILL_RATIO of the drawable width, which leaves headroom
for larger values before the length saturates at the full width.
"""
from __future__ import annotations

from dataclasses import dataclass

from swipescale.config import (
    FILL_RATIO, PADDING, ORIGIN_OFFSET, REFERENCE_EDPI, REFERENCE_INCHES, RIGHT_RESERVE
)

REFERENCE_UNITS: float = REFERENCE_EDPI * REFERENCE_INCHES


@dataclass(frozen=True)
class DrawGeometry:
    """
    Layout of the drawing surface, derived from its current size.
    Recomputed on every render, never cached across resizes.
    """
    width: float
    height: float
    padding: float = PADDING
    origin_offset: float = ORIGIN_OFFSET

    @property
    def origin_x(self) -> float:
        return self.padding + self.origin_offset

    @property
    def mid_y(self) -> float:
        return self.height / 2.0

    @property
    def drawable_width(self) -> float:
        return max(0.0, self.width - self.padding * 2.0 - RIGHT_RESERVE)


def edpi_to_length(edpi: float, inches: float, drawable_width: float) -> float:
    """
    Map eDPI × inches to a pixel length within [0, drawable_width].

    Args:
        edpi: Effective DPI (dpi × sens).
        inches: Physical swipe distance; negative values count as 0.
        drawable_width: Horizontal pixel extent available for drawing.

    Returns:
        Length in pixels, monotonic in eDPI × inches and saturating at
        drawable_width.
    """
    units = edpi * max(0.0, inches)
    target = FILL_RATIO * drawable_width
    scale = target / REFERENCE_UNITS
    return min(units * scale, drawable_width)
