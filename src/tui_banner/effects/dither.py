"""Dot dithering over selected glyph characters."""

from __future__ import annotations

from typing import Iterable

from tui_banner.core.constants import DEFAULT_DITHER_TARGETS
from tui_banner.core.grid import Grid
from tui_banner.effects.fill import Dither


def apply_dot_dither(
    grid: Grid,
    dither: Dither,
    targets: Iterable[str] = DEFAULT_DITHER_TARGETS,
) -> Grid:
    """
    Return a copy of ``grid`` with targeted glyphs replaced by dots.

    Only visible cells whose character is in ``targets`` are candidates;
    the dither mode decides which of those are replaced.
    """
    target_set = frozenset(targets)
    out = grid.copy()
    for r, c, cell in out.visible_cells():
        if cell.char not in target_set:
            continue
        replacement = dither.char_for(r, c)
        if replacement is not None:
            cell.char = replacement
    return out
