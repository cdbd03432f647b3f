"""FIGlet (.flf) font parsing and writing."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Iterator

from tui_banner.core.constants import FIGLET_FIRST_CODE, FIGLET_LAST_CODE, FIGLET_MAGIC

if TYPE_CHECKING:
    from tui_banner.font.font import Font

logger = logging.getLogger(__name__)


GLYPH_COUNT = FIGLET_LAST_CODE - FIGLET_FIRST_CODE + 1
DEFAULT_ENDMARK = '@'
HEADER_FIELDS = ("height", "baseline", "max_length", "old_layout", "comment_lines")

_UNSIGNED = re.compile(r'\+?[0-9]+')
_SIGNED = re.compile(r'[+-]?[0-9]+')


class FigletError(ValueError):
    """Base class for FIGlet font parse failures."""


class InvalidHeaderError(FigletError):
    """Magic tag missing or too few header fields."""


class MissingDataError(FigletError):
    """The font ended before all comment or glyph lines were read."""


class InvalidNumberError(FigletError):
    """A header field is not a valid integer."""


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` (dropping a trailing ``\\r``); a final newline adds no line."""
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def parse_header(line: str) -> tuple[str, dict[str, int]]:
    """
    Parse the ``flf2a`` header line.

    Returns the hardblank character and the numeric fields keyed by
    name (see ``HEADER_FIELDS``).
    """
    if not line.startswith(FIGLET_MAGIC) or len(line) < len(FIGLET_MAGIC) + 1:
        raise InvalidHeaderError(f"Not a FIGlet header: {line[:20]!r}")
    hardblank = line[len(FIGLET_MAGIC)]

    parts = line.split()[1:]
    fields: dict[str, int] = {}
    for i, name in enumerate(HEADER_FIELDS):
        if i >= len(parts):
            raise InvalidHeaderError(
                f"Header needs {len(HEADER_FIELDS)} numeric fields, got {len(parts)}"
            )
        part = parts[i]
        pattern = _SIGNED if name == "old_layout" else _UNSIGNED
        if not pattern.fullmatch(part):
            raise InvalidNumberError(f"Header field {name} is not a number: {part!r}")
        fields[name] = int(part)
    return hardblank, fields


def clean_line(line: str, endmark: str, hardblank: str) -> str:
    """Strip trailing end-marks and turn hardblanks into spaces."""
    return line.rstrip(endmark).replace(hardblank, ' ')


def parse(data: str) -> Font:
    """
    Parse FIGlet font text into a Font.

    Reads the 95 printable ASCII glyphs (32-126). Code-tagged glyphs that
    may follow them are ignored.

    Raises:
        InvalidHeaderError, InvalidNumberError, MissingDataError
    """
    from tui_banner.font.font import Font, Glyph

    lines: Iterator[str] = iter(split_lines(data))
    header = next(lines, None)
    if header is None:
        raise InvalidHeaderError("Empty font data")
    hardblank, fields = parse_header(header)
    height = fields["height"]

    for _ in range(fields["comment_lines"]):
        if next(lines, None) is None:
            raise MissingDataError("Font ended inside the comment block")

    glyphs: dict[str, Glyph] = {}
    endmark: str | None = None

    for code in range(FIGLET_FIRST_CODE, FIGLET_LAST_CODE + 1):
        rows: list[str] = []
        for _ in range(height):
            line = next(lines, None)
            if line is None:
                raise MissingDataError(
                    f"Font ended while reading glyph {code} ({chr(code)!r})"
                )
            if endmark is None:
                endmark = line[-1] if line else DEFAULT_ENDMARK
            rows.append(clean_line(line, endmark, hardblank))
        glyphs[chr(code)] = Glyph(tuple(rows))

    fallback = glyphs.get('?') or Glyph(tuple('?' for _ in range(height)))
    logger.debug("Parsed FIGlet font: height=%d glyphs=%d", height, len(glyphs))
    return Font(height=height, glyphs=glyphs, fallback=fallback)


def _pick_unused(candidates: str, used: set[str]) -> str:
    for ch in candidates:
        if ch not in used:
            return ch
    raise ValueError("Font uses every candidate marker character")


def to_figlet_str(font: Font, comments: list[str] | None = None) -> str:
    """
    Serialize a Font back to FIGlet text.

    Spaces are written as the hardblank. The hardblank and end-mark are
    chosen so that neither occurs in glyph data, which keeps
    ``parse(to_figlet_str(font))`` glyph-for-glyph identical.
    """
    glyphs = [font.glyph_exact(chr(code)) for code in range(FIGLET_FIRST_CODE, FIGLET_LAST_CODE + 1)]
    used = {ch for glyph in glyphs for row in glyph.rows for ch in row}
    hardblank = _pick_unused("$\x7f~^", used)
    endmark = _pick_unused("@#|&", used | {hardblank})
    comments = comments or []
    max_length = max((glyph.width for glyph in glyphs), default=0) + 2

    out = [f"{FIGLET_MAGIC}{hardblank} {font.height} {font.height} {max_length} 0 {len(comments)}"]
    out.extend(comments)
    for glyph in glyphs:
        for i, row in enumerate(glyph.rows):
            mark = endmark * 2 if i == len(glyph.rows) - 1 else endmark
            out.append(row.replace(' ', hardblank) + mark)
    return '\n'.join(out) + '\n'
