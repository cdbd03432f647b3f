"""Per-frame color transforms used by banner animations.

Each function is pure: it takes a finished grid plus a phase or time
value and returns a new grid. Timing, screen control and the frame loop
belong to the caller.
"""

from __future__ import annotations

import math
from typing import Iterator

from tui_banner.core.color import Color
from tui_banner.core.grid import Grid
from tui_banner.effects.light_sweep import LightSweep, SweepDirection

DEFAULT_FRAMES = 180
SWEEP_TRAVEL = 0.75

WAVE_FREQ_X = 5.0
WAVE_FREQ_Y = 3.0

ROLL_FRONT_WIDTH = 0.06
ROLL_BACK_WIDTH = 0.22
ROLL_BRIGHT = 0.6
ROLL_DIM = 0.5


def default_sweep() -> LightSweep:
    return LightSweep(SweepDirection.DIAGONAL_DOWN, width=0.25, intensity=0.9, softness=2.5)


def sweep_frames(base: LightSweep, frames: int = DEFAULT_FRAMES) -> Iterator[LightSweep]:
    """Sweep configs moving the band from ``center - 0.75`` to ``center + 0.75``."""
    start = base.center - SWEEP_TRAVEL
    end = base.center + SWEEP_TRAVEL
    for frame in range(frames):
        t = frame / frames
        yield base.with_center(start + t * (end - start))


def breathe_color(color: Color, dim: float, bright: float) -> Color:
    """Darken toward black by ``dim`` then lighten toward white by ``bright``."""
    if dim > 0.0:
        color = color.lerp(Color.BLACK, dim)
    if bright > 0.0:
        color = color.lerp(Color.WHITE, bright)
    return color


def _norm(index: int, size: int) -> float:
    return index / (size - 1) if size > 1 else 0.0


def wave_value(phase: float, row: int, col: int, width: int, height: int) -> float:
    """Traveling sine wave sampled at a cell, in [0, 1]."""
    offset = (_norm(col, width) * WAVE_FREQ_X + _norm(row, height) * WAVE_FREQ_Y) * math.tau
    return (math.sin(phase + offset) + 1.0) * 0.5


def apply_wave_breathe(grid: Grid, phase: float, dim_strength: float = 0.35, bright_strength: float = 0.2) -> Grid:
    """
    Dim the wave troughs and brighten its crests without moving glyphs.

    ``phase`` is in radians; a full animation cycle runs 0 to tau.
    """
    out = grid.copy()
    height, width = grid.height, grid.width
    if height == 0 or width == 0:
        return out

    dim_strength = max(0.0, min(1.0, dim_strength))
    bright_strength = max(0.0, min(1.0, bright_strength))
    for r, c, cell in out.visible_cells():
        if cell.fg is None:
            continue
        wave = wave_value(phase, r, c, width, height)
        if wave < 0.5:
            dim, bright = dim_strength * (0.5 - wave) / 0.5, 0.0
        else:
            dim, bright = 0.0, bright_strength * (wave - 0.5) / 0.5
        cell.fg = breathe_color(cell.fg, dim, bright)
    return out


def apply_roll(grid: Grid, t: float) -> Grid:
    """
    Rolling crest moving left to right as ``t`` goes from 0 to 1.

    Cells just ahead of the crest are lifted one row and brightened;
    the trailing band is dimmed. Rows further from the middle get a
    weaker effect.
    """
    height, width = grid.height, grid.width
    if height == 0 or width == 0:
        return grid.copy()

    center = -0.2 + t * 1.4
    mid = (height - 1) / 2.0
    out = Grid(height, width)

    for r, c, source in grid.visible_cells():
        if height > 1:
            rel = min(abs(r - mid) / mid, 1.0)
            row_falloff = 1.0 - 0.25 * rel
        else:
            row_falloff = 1.0

        d = _norm(c, width) - center
        base_color = source.fg or Color.WHITE
        if d > 0.0:
            base_color = Color.WHITE

        bright = dim = crest = 0.0
        if 0.0 <= d <= ROLL_FRONT_WIDTH:
            lead = 1.0 - d / ROLL_FRONT_WIDTH
            bright = lead ** 1.7
            crest = lead ** 1.4
        elif -ROLL_BACK_WIDTH <= d < 0.0:
            dim = (1.0 - (-d) / ROLL_BACK_WIDTH) ** 1.2

        bright_amt = max(0.0, min(1.0, bright * ROLL_BRIGHT * row_falloff))
        dim_amt = max(0.0, min(1.0, dim * ROLL_DIM * row_falloff))

        dest = r - int(crest + 0.5)
        if not 0 <= dest < height:
            continue
        cell = source.copy()
        cell.fg = breathe_color(base_color, dim_amt, bright_amt)
        out.set(dest, c, cell)

    return out
