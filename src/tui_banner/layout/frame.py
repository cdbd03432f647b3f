"""Box frames drawn around a finished banner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from tui_banner.core.color import Color
from tui_banner.core.grid import Grid
from tui_banner.effects.gradient import Gradient


@dataclass(frozen=True)
class FrameChars:
    """Corner and edge characters for a frame."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str

    @classmethod
    def from_string(cls, chars: str) -> FrameChars:
        """Build from six characters: tl, tr, bl, br, horizontal, vertical."""
        if len(chars) != 6:
            raise ValueError(f"Frame needs exactly 6 characters, got {len(chars)}: {chars!r}")
        return cls(*chars)


class FrameStyle(Enum):
    """Predefined frame styles."""
    SINGLE = FrameChars('┌', '┐', '└', '┘', '─', '│')
    DOUBLE = FrameChars('╔', '╗', '╚', '╝', '═', '║')
    ROUNDED = FrameChars('╭', '╮', '╰', '╯', '─', '│')
    HEAVY = FrameChars('┏', '┓', '┗', '┛', '━', '┃')
    ASCII = FrameChars('+', '+', '+', '+', '-', '|')

    @property
    def chars(self) -> FrameChars:
        return self.value


@dataclass(frozen=True)
class SolidPaint:
    color: Color


@dataclass(frozen=True)
class GradientPaint:
    gradient: Gradient


FramePaint = Union[SolidPaint, GradientPaint]


@dataclass(frozen=True)
class Frame:
    """Frame glyphs plus optional color treatment."""
    chars: FrameChars = FrameStyle.SINGLE.value
    paint: FramePaint | None = None

    @classmethod
    def new(cls, style: FrameStyle) -> Frame:
        return cls(style.chars)

    @classmethod
    def custom(cls, chars: FrameChars) -> Frame:
        return cls(chars)

    def color(self, color: Color) -> Frame:
        """Copy of this frame painted a single color."""
        return Frame(self.chars, SolidPaint(color))

    def gradient(self, gradient: Gradient) -> Frame:
        """Copy of this frame painted with a gradient over its own bounds."""
        return Frame(self.chars, GradientPaint(gradient))


def apply_frame(grid: Grid, frame: Frame) -> Grid:
    """Wrap ``grid`` in a one-cell border; the inner grid lands at (1, 1)."""
    out_height = grid.height + 2
    out_width = grid.width + 2
    framed = Grid(out_height, out_width)
    chars = frame.chars
    bottom, right = out_height - 1, out_width - 1

    for col in range(1, right):
        framed.put_char(0, col, chars.horizontal)
        framed.put_char(bottom, col, chars.horizontal)
    for row in range(1, bottom):
        framed.put_char(row, 0, chars.vertical)
        framed.put_char(row, right, chars.vertical)
    framed.put_char(0, 0, chars.top_left)
    framed.put_char(0, right, chars.top_right)
    framed.put_char(bottom, 0, chars.bottom_left)
    framed.put_char(bottom, right, chars.bottom_right)

    if isinstance(frame.paint, SolidPaint):
        for _, _, cell in framed.visible_cells():
            cell.fg = frame.paint.color
    elif isinstance(frame.paint, GradientPaint):
        frame.paint.gradient.apply(framed)

    framed.blit(grid, 1, 1)
    return framed
