"""Renderers for turning a banner Grid into terminal output."""

from tui_banner.render.capabilities import detect_color_mode
from tui_banner.render.terminal import TerminalRenderer, emit_ansi, rgb_to_ansi256

__all__ = ["TerminalRenderer", "detect_color_mode", "emit_ansi", "rgb_to_ansi256"]
