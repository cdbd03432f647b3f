"""Fill strategies and dither patterns for visible cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tui_banner.core.constants import BLOCKS_CHAR, DEFAULT_DOT
from tui_banner.core.grid import Grid

MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class Checker:
    """Include a cell when ``(row + col) % period == 0``; period 0 never dithers."""
    period: int


@dataclass(frozen=True)
class Noise:
    """Include a cell when the low byte of its hash is below ``threshold`` (0-255)."""
    seed: int
    threshold: int


DitherMode = Union[Checker, Noise]


def mix(seed: int, x: int, y: int) -> int:
    """32-bit avalanche hash of (seed, x, y). Bit-exact and process-independent."""
    v = (seed ^ ((x * 0x9E3779B1) & MASK32) ^ ((y * 0x85EBCA77) & MASK32)) & MASK32
    v ^= v >> 16
    v = (v * 0x7FEB352D) & MASK32
    v ^= v >> 15
    v = (v * 0x846CA68B) & MASK32
    v ^= v >> 16
    return v


def should_dither(row: int, col: int, mode: DitherMode) -> bool:
    if isinstance(mode, Checker):
        if mode.period <= 0:
            return False
        return (row + col) % mode.period == 0
    return (mix(mode.seed & MASK32, row & MASK32, col & MASK32) & 0xFF) < mode.threshold


def parse_dots(dots: str) -> tuple[str, str]:
    """First char is the dot, second (or the first again) the alternate."""
    first = dots[0] if dots else DEFAULT_DOT
    second = dots[1] if len(dots) > 1 else first
    return first, second


@dataclass(frozen=True)
class Dither:
    """Two-tone dot substitution: ``dot`` on even checkerboard parity, ``alt`` on odd."""
    mode: DitherMode
    dot: str = DEFAULT_DOT
    alt: str = DEFAULT_DOT

    @classmethod
    def checker(cls, period: int, dots: str = "") -> Dither:
        dot, alt = parse_dots(dots)
        return cls(Checker(max(0, min(255, period))), dot, alt)

    @classmethod
    def noise(cls, seed: int, threshold: int, dots: str = "") -> Dither:
        dot, alt = parse_dots(dots)
        return cls(Noise(seed & MASK32, max(0, min(255, threshold))), dot, alt)

    def char_for(self, row: int, col: int) -> str | None:
        """Replacement character at (row, col), or None when not included."""
        if not should_dither(row, col, self.mode):
            return None
        return self.dot if (row + col) % 2 == 0 else self.alt


@dataclass(frozen=True)
class Solid:
    """Replace every visible character."""
    char: str


@dataclass(frozen=True)
class Blocks:
    """Replace every visible character with ``#``."""


@dataclass(frozen=True)
class Keep:
    """Leave glyph characters untouched."""


@dataclass(frozen=True)
class Pixel:
    """Replace visible characters with ``block``, then optionally dither."""
    block: str
    dither: Dither | None = None


FillMode = Union[Solid, Blocks, Keep, Pixel]


class Fill:
    """Constructors for the fill variants."""
    Solid = Solid
    Blocks = Blocks
    Keep = Keep
    Pixel = Pixel

    @staticmethod
    def solid(char: str) -> Solid:
        return Solid(char)

    @staticmethod
    def blocks() -> Blocks:
        return Blocks()

    @staticmethod
    def keep() -> Keep:
        return Keep()

    @staticmethod
    def pixel(block: str, dither: Dither | None = None) -> Pixel:
        return Pixel(block, dither)


def apply_fill(grid: Grid, fill: FillMode) -> None:
    """Apply a fill to the visible cells of ``grid`` in place."""
    if isinstance(fill, Keep):
        return
    for r, c, cell in grid.visible_cells():
        if isinstance(fill, Solid):
            cell.char = fill.char
        elif isinstance(fill, Blocks):
            cell.char = BLOCKS_CHAR
        elif isinstance(fill, Pixel):
            cell.char = fill.block
            if fill.dither is not None:
                cell.char = fill.dither.char_for(r, c) or cell.char
