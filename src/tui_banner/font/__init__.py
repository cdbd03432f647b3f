"""Fonts and glyph rendering."""

from tui_banner.font.figlet import (
    FigletError,
    InvalidHeaderError,
    InvalidNumberError,
    MissingDataError,
    to_figlet_str,
)
from tui_banner.font.font import BUILTIN_FONTS, Font, Glyph, load_builtin_font, render_text

__all__ = [
    "FigletError",
    "InvalidHeaderError",
    "InvalidNumberError",
    "MissingDataError",
    "to_figlet_str",
    "BUILTIN_FONTS",
    "Font",
    "Glyph",
    "load_builtin_font",
    "render_text",
]
