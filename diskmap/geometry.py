"""Integer screen rectangles and their floating-point counterparts."""

from __future__ import annotations

import math
from dataclasses import dataclass

_U16_MAX = 0xFFFF


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_cell(value: float) -> int:
    """Convert to a screen coordinate, saturating at the bounds of a 16-bit cell index."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U16_MAX:
        return _U16_MAX
    return int(value)


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class RectFloat:
    """A rectangle with fractional position and size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_rect(cls, rect: Rect) -> RectFloat:
        return cls(float(rect.x), float(rect.y), float(rect.width), float(rect.height))

    def round(self) -> Rect:
        """Snap to whole cells so that neighbouring rectangles keep sharing their edges."""
        rounded_x = _round_half_away(self.x)
        rounded_y = _round_half_away(self.y)
        x = _to_cell(rounded_x)
        y = _to_cell(rounded_y)
        width = _to_cell(_round_half_away((self.x - rounded_x) + self.width))
        height = _to_cell(_round_half_away((self.y - rounded_y) + self.height))

        # fix rounding errors
        if _to_cell(_round_half_away(self.x + self.width)) > x + width:
            width += 1
        if _to_cell(_round_half_away(self.y + self.height)) > y + height:
            height += 1
        return Rect(x, y, width, height)