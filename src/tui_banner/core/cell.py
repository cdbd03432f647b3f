"""Cell - atomic unit of the banner grid."""

from __future__ import annotations

from dataclasses import dataclass

from tui_banner.core.color import Color


@dataclass(slots=True)
class Cell:
    """
    A single character cell with color and visibility.

    ``visible`` separates rendered glyph ink from background. Invisible
    cells are emitted as plain spaces regardless of their colors.
    """
    char: str = ' '
    fg: Color | None = None
    bg: Color | None = None  # Reserved, no effect writes it yet
    visible: bool = False

    @classmethod
    def ink(cls, char: str, fg: Color | None = None) -> Cell:
        """Create a visible cell."""
        return cls(char=char, fg=fg, visible=True)

    def copy(self) -> Cell:
        """Create a copy of this cell."""
        return Cell(
            char=self.char,
            fg=self.fg,
            bg=self.bg,
            visible=self.visible,
        )

    def is_blank(self) -> bool:
        """Check if this cell renders as background."""
        return not self.visible
