"""Grid transforms: fills, gradients, dithering, outlines, shadows, sweeps."""

from tui_banner.effects.dither import apply_dot_dither
from tui_banner.effects.fill import Checker, Dither, DitherMode, Fill, FillMode, Noise, apply_fill
from tui_banner.effects.gradient import Gradient, GradientDirection
from tui_banner.effects.light_sweep import (
    LightSweep,
    SweepDirection,
    apply_light_sweep,
    apply_light_sweep_tint,
)
from tui_banner.effects.outline import EdgeShade, apply_edge_shade
from tui_banner.effects.shadow import Shadow, apply_shadow

__all__ = [
    "apply_dot_dither",
    "Checker",
    "Dither",
    "DitherMode",
    "Fill",
    "FillMode",
    "Noise",
    "apply_fill",
    "Gradient",
    "GradientDirection",
    "LightSweep",
    "SweepDirection",
    "apply_light_sweep",
    "apply_light_sweep_tint",
    "EdgeShade",
    "apply_edge_shade",
    "Shadow",
    "apply_shadow",
]
