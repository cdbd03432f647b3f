"""Drop shadow: a darkened copy of the ink at an offset."""

from __future__ import annotations

from dataclasses import dataclass

from tui_banner.core.grid import Grid


@dataclass(frozen=True)
class Shadow:
    """Offset as (dx, dy) in cells; ``alpha`` is the darken factor (0-1)."""
    offset: tuple[int, int] = (1, 1)
    alpha: float = 0.5


def apply_shadow(grid: Grid, shadow: Shadow) -> Grid:
    """
    Return a grid with the shadow painted behind existing ink.

    Positive offsets grow the grid so the shadow fits; negative offsets
    drop whatever would land outside. Existing ink is never overwritten.
    """
    dx, dy = shadow.offset
    if dx == 0 and dy == 0:
        return grid.copy()

    out = Grid(grid.height + max(dy, 0), grid.width + max(dx, 0))
    out.blit(grid, 0, 0)

    for r, c, cell in grid.visible_cells():
        target = out.cell(r + dy, c + dx)
        if target is None or target.visible:
            continue
        target.visible = True
        target.char = cell.char
        target.fg = cell.fg.darken(shadow.alpha) if cell.fg is not None else None
    return out
