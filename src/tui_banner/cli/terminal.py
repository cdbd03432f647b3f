"""Low-level terminal operations for animated output."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator

from tui_banner.core.constants import CSI, RESET


class Terminal:
    """Cursor and screen control on stdout."""

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write(f'{CSI}2J{CSI}H')

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        Terminal.write(RESET)

    @staticmethod
    def hide_cursor() -> None:
        Terminal.write(f'{CSI}?25l')

    @staticmethod
    def show_cursor() -> None:
        Terminal.write(f'{CSI}?25h')

    @staticmethod
    @contextmanager
    def animation() -> Iterator[None]:
        """Cleared screen with a hidden cursor; restored on exit or Ctrl-C."""
        Terminal.clear()
        Terminal.hide_cursor()
        try:
            yield
        finally:
            Terminal.reset()
            Terminal.show_cursor()
            Terminal.write('\n')

    @staticmethod
    def draw_frame(frame: str) -> None:
        """Redraw from the top-left corner without clearing (avoids flicker)."""
        Terminal.write(f'{CSI}H{frame}')
