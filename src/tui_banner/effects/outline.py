"""Edge shading: a one-cell halo around visible cells."""

from __future__ import annotations

from dataclasses import dataclass

from tui_banner.core.grid import Grid

# Visit order matters: the first source to claim a blank neighbor wins.
NEIGHBORS = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


@dataclass(frozen=True)
class EdgeShade:
    """Halo character plus how much to darken the source color (0-1)."""
    char: str = '░'
    darken: float = 0.5


def apply_edge_shade(grid: Grid, shade: EdgeShade) -> Grid:
    """
    Return a copy of ``grid`` with blank neighbors of ink shaded.

    Sources are read from ``grid`` and writes go to the copy, so new
    edge cells never spawn further edges.
    """
    out = grid.copy()
    for r, c, cell in grid.visible_cells():
        for dr, dc in NEIGHBORS:
            target = out.cell(r + dr, c + dc)
            if target is None or target.visible:
                continue
            target.visible = True
            target.char = shade.char
            target.fg = cell.fg.darken(shade.darken) if cell.fg is not None else None
    return out
