"""Fonts, glyphs, and text layout into a Grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from pathlib import Path

from tui_banner.core.grid import Grid
from tui_banner.font import figlet

logger = logging.getLogger(__name__)

BUILTIN_FONTS = ("block",)
DEFAULT_FONT = "block"


@dataclass(frozen=True)
class Glyph:
    """A single glyph as character rows (spaces are background)."""
    rows: tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)


@dataclass(frozen=True)
class Font:
    """
    Character-to-glyph mapping with a uniform height.

    Lookups are case-insensitive for ASCII: input is upper-cased first,
    and anything unmapped resolves to ``fallback``.
    """
    height: int
    glyphs: dict[str, Glyph] = field(hash=False)
    fallback: Glyph = field(hash=False)
    name: str = ""

    @classmethod
    def from_figlet_str(cls, data: str) -> Font:
        """Parse FIGlet ``.flf`` text into a font."""
        return figlet.parse(data)

    @classmethod
    def from_file(cls, path: str | Path) -> Font:
        """Load a FIGlet font file (UTF-8)."""
        path = Path(path)
        font = figlet.parse(path.read_text(encoding="utf-8"))
        return cls(font.height, font.glyphs, font.fallback, name=path.stem)

    @classmethod
    def builtin(cls, name: str = DEFAULT_FONT) -> Font:
        """Return a bundled font (parsed once, then shared)."""
        return load_builtin_font(name)

    def glyph(self, char: str) -> Glyph:
        """Get the glyph for ``char`` (upper-cased), or the fallback."""
        if char.isascii():
            char = char.upper()
        return self.glyphs.get(char, self.fallback)

    def glyph_exact(self, char: str) -> Glyph:
        """Get the glyph for ``char`` without case folding."""
        return self.glyphs.get(char, self.fallback)

    def characters(self) -> list[str]:
        """Mapped characters in code point order."""
        return sorted(self.glyphs)

    def to_figlet_str(self) -> str:
        return figlet.to_figlet_str(self)


@lru_cache(maxsize=None)
def load_builtin_font(name: str = DEFAULT_FONT) -> Font:
    """
    Parse a font shipped in ``tui_banner/font/data``.

    Raises:
        KeyError: unknown font name
        FigletError: the bundled data is malformed
    """
    if name not in BUILTIN_FONTS:
        raise KeyError(f"Unknown built-in font: {name!r} (have {', '.join(BUILTIN_FONTS)})")
    data = (resources.files("tui_banner.font") / "data" / f"{name}.flf").read_text(encoding="utf-8")
    font = figlet.parse(data)
    logger.debug("Loaded built-in font %r", name)
    return Font(font.height, font.glyphs, font.fallback, name=name)


def render_line(text: str, font: Font, kerning: int = 1) -> list[list[str]]:
    """Concatenate glyph rows for one line, with ``kerning`` blanks between glyphs."""
    rows: list[list[str]] = [[] for _ in range(font.height)]
    gap = [' '] * max(0, kerning)

    for idx, char in enumerate(text):
        glyph = font.glyph(char)
        width = glyph.width
        for row_idx, row in enumerate(rows):
            glyph_row = glyph.rows[row_idx] if row_idx < glyph.height else ''
            row.extend(glyph_row.ljust(width))
            if idx + 1 < len(text):
                row.extend(gap)
    return rows


def render_text(text: str, font: Font, kerning: int = 1, line_gap: int = 0) -> Grid:
    """
    Lay out (possibly multi-line) text into a Grid.

    Each line is ``font.height`` rows tall; ``line_gap`` blank rows
    separate lines. Narrower lines are padded on the right.
    """
    lines = figlet.split_lines(text)
    if not lines:
        return Grid(0, 0)

    rendered = [render_line(line, font, kerning) for line in lines]
    max_width = max((len(rows[0]) for rows in rendered if rows), default=0)

    char_rows: list[list[str]] = []
    for idx, rows in enumerate(rendered):
        char_rows.extend(rows)
        if idx + 1 < len(rendered):
            char_rows.extend([' '] * max_width for _ in range(max(0, line_gap)))

    return Grid.from_char_rows(char_rows)
