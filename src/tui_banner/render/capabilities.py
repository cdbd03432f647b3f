"""Terminal color capability detection from the environment."""

from __future__ import annotations

import os
from typing import Mapping

from tui_banner.core.color import ColorMode


def detect_color_mode(environ: Mapping[str, str] | None = None) -> ColorMode:
    """
    Pick a concrete color mode from environment variables.

    ``NO_COLOR`` (any value) disables color; ``COLORTERM`` mentioning
    truecolor/24bit enables 24-bit; a ``TERM`` containing ``256color``
    selects 256 colors. Anything else gets plain text.
    """
    env = os.environ if environ is None else environ
    if "NO_COLOR" in env:
        return ColorMode.NO_COLOR

    colorterm = env.get("COLORTERM", "").lower()
    if "truecolor" in colorterm or "24bit" in colorterm:
        return ColorMode.TRUE_COLOR

    if "256color" in env.get("TERM", "").lower():
        return ColorMode.ANSI_256

    return ColorMode.NO_COLOR
