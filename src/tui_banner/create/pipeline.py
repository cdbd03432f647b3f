"""The fixed compositing pipeline from text to a finished Grid."""

from __future__ import annotations

import logging

from tui_banner.core.color import Color
from tui_banner.core.constants import DEFAULT_DITHER_TARGETS
from tui_banner.core.grid import Grid
from tui_banner.create.config import BannerConfig
from tui_banner.effects.dither import apply_dot_dither
from tui_banner.effects.fill import apply_fill
from tui_banner.effects.light_sweep import LightSweep, apply_light_sweep_tint
from tui_banner.effects.outline import apply_edge_shade
from tui_banner.effects.shadow import apply_shadow
from tui_banner.font.font import Font, render_text
from tui_banner.layout.frame import apply_frame
from tui_banner.layout.layout import apply_layout

logger = logging.getLogger(__name__)


def build_grid(
    text: str,
    font: Font,
    config: BannerConfig,
    sweep: LightSweep | None = None,
    highlight: Color | None = None,
) -> Grid:
    """
    Run every configured stage in order.

    text -> glyphs -> fill -> gradient -> sweep -> dot dither -> edge
    shade -> shadow -> trim -> layout -> frame. ``sweep`` overrides the
    configured light sweep (animation frames use this), and
    ``highlight`` replaces white as the sweep color.
    """
    logger.debug("Building banner grid for %d chars: %s", len(text), config)

    grid = render_text(text, font, config.kerning, config.line_gap)
    apply_fill(grid, config.fill)

    if config.gradient is not None:
        config.gradient.apply(grid)

    sweep = sweep or config.light_sweep
    if sweep is not None:
        apply_light_sweep_tint(grid, sweep, highlight or Color.WHITE)

    if config.dot_dither is not None:
        targets = config.dot_dither_targets
        if targets is None:
            targets = DEFAULT_DITHER_TARGETS
        grid = apply_dot_dither(grid, config.dot_dither, targets)

    if config.edge_shade is not None:
        grid = apply_edge_shade(grid, config.edge_shade)

    if config.shadow is not None:
        grid = apply_shadow(grid, config.shadow)

    if config.trim_vertical:
        grid = grid.trim_vertical()

    grid = apply_layout(grid, config.padding, config.width, config.max_width, config.align)

    if config.frame is not None:
        grid = apply_frame(grid, config.frame)
    return grid
