"""Padding, width resolution, alignment and clipping."""

from __future__ import annotations

from tui_banner.core.grid import Align, Grid, Padding


def apply_padding(grid: Grid, padding: Padding) -> Grid:
    """Return a copy surrounded by blank cells."""
    out = Grid(
        grid.height + padding.top + padding.bottom,
        grid.width + padding.left + padding.right,
    )
    out.blit(grid, padding.top, padding.left)
    return out


def resolve_width(natural: int, width: int | None, max_width: int | None) -> int | None:
    """
    Target width, or None to keep the natural width.

    An explicit width wins over the natural one; ``max_width`` caps
    whichever applies.
    """
    if max_width is None:
        return width
    if width is None:
        return min(natural, max_width)
    return min(width, max_width)


def align_offset(extra: int, align: Align) -> int:
    """Left share of ``extra`` columns (remainder goes right when centered)."""
    if align is Align.LEFT:
        return 0
    if align is Align.CENTER:
        return extra // 2
    return extra


def expand_width(grid: Grid, target: int, align: Align) -> Grid:
    out = Grid(grid.height, target)
    out.blit(grid, 0, align_offset(target - grid.width, align))
    return out


def clip_width(grid: Grid, target: int, align: Align) -> Grid:
    """Keep a ``target``-wide window chosen by ``align``."""
    if target <= 0:
        return Grid(grid.height, 0)

    start = align_offset(max(grid.width - target, 0), align)
    out = Grid(grid.height, target)
    for r in range(grid.height):
        for c in range(target):
            source = grid.cell(r, start + c)
            if source is not None:
                out.set(r, c, source.copy())
    return out


def apply_layout(
    grid: Grid,
    padding: Padding = Padding(),
    width: int | None = None,
    max_width: int | None = None,
    align: Align = Align.LEFT,
) -> Grid:
    """Pad, then expand or clip to the resolved target width."""
    grid = apply_padding(grid, padding)
    target = resolve_width(grid.width, width, max_width)
    if target is None or target == grid.width:
        return grid
    if target > grid.width:
        return expand_width(grid, target, align)
    return clip_width(grid, target, align)
