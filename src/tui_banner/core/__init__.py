"""Core data structures for banner rendering."""

from tui_banner.core.cell import Cell
from tui_banner.core.color import Color, ColorMode, Palette, Preset, parse_hex_color
from tui_banner.core.grid import Align, Grid, Padding

__all__ = [
    "Cell",
    "Color",
    "ColorMode",
    "Palette",
    "Preset",
    "parse_hex_color",
    "Align",
    "Grid",
    "Padding",
]
