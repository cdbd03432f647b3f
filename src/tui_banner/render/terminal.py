"""Render a banner Grid to terminal-compatible escape sequences."""

from __future__ import annotations

from tui_banner.core.color import Color, ColorMode
from tui_banner.core.constants import CSI, RESET
from tui_banner.core.grid import Grid
from tui_banner.render.capabilities import detect_color_mode


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Quantize an RGB triple onto the xterm 256-color palette."""
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return 232 + (r - 8) // 10
    return 16 + 36 * (r * 5 // 255) + 6 * (g * 5 // 255) + (b * 5 // 255)


def fg_sequence(color: Color, mode: ColorMode) -> str:
    """Foreground SGR escape for ``color`` under ``mode``."""
    if mode is ColorMode.ANSI_256 and color.rgb is not None:
        return f"{CSI}38;5;{rgb_to_ansi256(*color.rgb)}m"
    return f"{CSI}{color.to_sgr_fg()}m"


class TerminalRenderer:
    """
    Render a Grid to an ANSI string.

    Optimizes output by only emitting SGR codes when the foreground
    changes. Rows with an open color end in a reset; rows are joined
    with newlines and there is no trailing newline.
    """

    def __init__(self, color_mode: ColorMode = ColorMode.AUTO):
        self.color_mode = color_mode

    def resolved_mode(self) -> ColorMode:
        if self.color_mode is ColorMode.AUTO:
            return detect_color_mode()
        return self.color_mode

    def render(self, grid: Grid) -> str:
        """Render grid to a string."""
        mode = self.resolved_mode()
        if mode is ColorMode.NO_COLOR:
            return '\n'.join(grid.text_rows())

        lines: list[str] = []
        current_fg: Color | None = None

        for row in grid.rows():
            line_parts: list[str] = []
            for cell in row:
                # Invisible cells carry no color
                fg = cell.fg if cell.visible else None
                char = cell.char if cell.visible else ' '
                if fg != current_fg:
                    line_parts.append(fg_sequence(fg, mode) if fg is not None else RESET)
                    current_fg = fg
                line_parts.append(char)

            # Reset at end of each line to prevent color bleeding
            if current_fg is not None:
                line_parts.append(RESET)
                current_fg = None

            lines.append(''.join(line_parts))

        return '\n'.join(lines)


def emit_ansi(grid: Grid, color_mode: ColorMode = ColorMode.AUTO) -> str:
    """Serialize ``grid`` using ``color_mode``."""
    return TerminalRenderer(color_mode).render(grid)
