"""Directional highlight sweep across the banner."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from tui_banner.core.color import Color
from tui_banner.core.grid import Grid


class SweepDirection(Enum):
    HORIZONTAL = "horizontal"        # Left to right
    VERTICAL = "vertical"            # Top to bottom
    DIAGONAL_DOWN = "diagonal-down"  # Top-left to bottom-right
    DIAGONAL_UP = "diagonal-up"      # Bottom-left to top-right


@dataclass(frozen=True)
class LightSweep:
    """
    Highlight band configuration.

    ``center`` and ``width`` are measured along the normalized sweep
    axis; a center outside [0, 1] places the band off-screen, which is
    how animations enter and leave. ``softness`` is the falloff
    exponent and is treated as at least 1.
    """
    direction: SweepDirection = SweepDirection.DIAGONAL_DOWN
    center: float = 0.5
    width: float = 0.25
    intensity: float = 0.8
    softness: float = 2.0

    def with_center(self, center: float) -> LightSweep:
        return replace(self, center=center)


def axis_t(direction: SweepDirection, row: int, col: int, width: int, height: int) -> float:
    if direction is SweepDirection.HORIZONTAL:
        return col / (width - 1) if width > 1 else 0.0
    if direction is SweepDirection.VERTICAL:
        return row / (height - 1) if height > 1 else 0.0
    if width + height <= 2:
        return 0.0
    if direction is SweepDirection.DIAGONAL_DOWN:
        return (row + col) / (width + height - 2)
    return (row + (width - 1 - col)) / (width + height - 2)


def sweep_amount(sweep: LightSweep, t: float) -> float:
    """Blend amount at axis position ``t`` (0 outside the band)."""
    intensity = max(0.0, min(1.0, sweep.intensity))
    band = max(0.0, sweep.width)
    if intensity <= 0.0 or band <= 0.0:
        return 0.0

    half = band / 2.0
    dist = abs(t - sweep.center)
    if dist > half:
        return 0.0
    strength = (1.0 - dist / half) ** max(sweep.softness, 1.0)
    return max(0.0, min(1.0, intensity * strength))


def apply_light_sweep_tint(grid: Grid, sweep: LightSweep, highlight: Color) -> None:
    """Blend visible foreground colors toward ``highlight`` inside the band, in place."""
    height = max(grid.height, 1)
    width = max(grid.width, 1)
    if sweep.intensity <= 0.0 or sweep.width <= 0.0:
        return

    for r, c, cell in grid.visible_cells():
        if cell.fg is None:
            continue
        amount = sweep_amount(sweep, axis_t(sweep.direction, r, c, width, height))
        if amount > 0.0:
            cell.fg = cell.fg.lerp(highlight, amount)


def apply_light_sweep(grid: Grid, sweep: LightSweep) -> None:
    """Brighten visible foreground colors toward white inside the band, in place."""
    apply_light_sweep_tint(grid, sweep, Color.WHITE)
