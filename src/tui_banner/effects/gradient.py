"""Gradient coloring along an axis of the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from tui_banner.core.color import Color, Palette
from tui_banner.core.grid import Grid


class GradientDirection(Enum):
    VERTICAL = "vertical"      # Top to bottom
    HORIZONTAL = "horizontal"  # Left to right
    DIAGONAL = "diagonal"      # Top-left to bottom-right


def axis_position(direction: GradientDirection, row: int, col: int, height: int, width: int) -> float:
    """Normalized [0, 1] position of (row, col) along a gradient axis."""
    if direction is GradientDirection.VERTICAL:
        return row / (height - 1) if height > 1 else 0.0
    if direction is GradientDirection.HORIZONTAL:
        return col / (width - 1) if width > 1 else 0.0
    if width + height <= 2:
        return 0.0
    return (row + col) / (width + height - 2)


def color_at(stops: Sequence[Color], t: float) -> Color:
    """
    Map ``t`` onto the stop list.

    The right-hand stop index is clamped to ``min(idx, n - 2) + 1``, so
    ``t == 1`` resolves to a full blend into the last stop.
    """
    if len(stops) == 1:
        return stops[0]

    t = max(0.0, min(1.0, t))
    max_index = len(stops) - 1
    scaled = t * max_index
    idx = math.floor(scaled)
    nxt = min(idx, max_index - 1) + 1
    local_t = scaled - idx
    return stops[idx].lerp(stops[nxt], local_t)


@dataclass(frozen=True)
class Gradient:
    """Color stops plus a direction, applied to visible cells."""
    stops: tuple[Color, ...]
    direction: GradientDirection = GradientDirection.VERTICAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "stops", tuple(self.stops))

    @classmethod
    def vertical(cls, palette: Palette) -> Gradient:
        return cls(palette.colors, GradientDirection.VERTICAL)

    @classmethod
    def horizontal(cls, palette: Palette) -> Gradient:
        return cls(palette.colors, GradientDirection.HORIZONTAL)

    @classmethod
    def diagonal(cls, palette: Palette) -> Gradient:
        return cls(palette.colors, GradientDirection.DIAGONAL)

    def color_for(self, row: int, col: int, height: int, width: int) -> Color | None:
        """Color at a position in a ``height x width`` box (None without stops)."""
        if not self.stops:
            return None
        t = axis_position(self.direction, row, col, max(height, 1), max(width, 1))
        return color_at(self.stops, t)

    def apply(self, grid: Grid) -> None:
        """Color every visible cell in place."""
        if not self.stops:
            return
        height, width = grid.height, grid.width
        for r, c, cell in grid.visible_cells():
            cell.fg = self.color_for(r, c, height, width)
