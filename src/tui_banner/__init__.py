"""
tui-banner: big gradient text banners for the terminal

Render text through a FIGlet font into a grid of cells, color it, add
effects, lay it out and emit ANSI escape sequences.

Quick Start:
    >>> import tui_banner as tb
    >>> print(tb.banner("HELLO").style(tb.Style.NEON_CYBER).render())

Features:
    - FIGlet (.flf) font parsing with a bundled block font
    - Vertical, horizontal and diagonal gradients over palette presets
    - Fills, checker/noise dithering, edge shading, drop shadows
    - Light sweep, wave and roll animations
    - Padding, alignment, width clamping and box frames
    - True color, 256-color and plain output, auto-detected from the environment
"""

__version__ = "0.1.0"

from typing import Optional

# Core types
from tui_banner.core.cell import Cell
from tui_banner.core.color import Color, ColorMode, Palette, Preset
from tui_banner.core.grid import Align, Grid, Padding

# Fonts
from tui_banner.font.figlet import FigletError
from tui_banner.font.font import Font, load_builtin_font

# Effects and layout
from tui_banner.effects.fill import Dither, Fill
from tui_banner.effects.gradient import Gradient, GradientDirection
from tui_banner.effects.light_sweep import LightSweep, SweepDirection
from tui_banner.layout.frame import Frame, FrameStyle

# Output
from tui_banner.render.terminal import TerminalRenderer, emit_ansi

# Creation
from tui_banner.create.builder import Banner, BannerError
from tui_banner.create.styles import Style


def banner(text: str, font: Optional[Font] = None) -> Banner:
    """Start a banner with the fluent builder API."""
    return Banner(text, font)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "ColorMode",
    "Palette",
    "Preset",
    "Align",
    "Grid",
    "Padding",
    # Fonts
    "FigletError",
    "Font",
    "load_builtin_font",
    # Effects and layout
    "Dither",
    "Fill",
    "Gradient",
    "GradientDirection",
    "LightSweep",
    "SweepDirection",
    "Frame",
    "FrameStyle",
    # Output
    "TerminalRenderer",
    "emit_ansi",
    # Creation
    "banner",
    "Banner",
    "BannerError",
    "Style",
]
