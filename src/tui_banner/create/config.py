"""Banner configuration record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from tui_banner.core.color import ColorMode
from tui_banner.core.grid import Align, Padding
from tui_banner.effects.fill import Blocks, Dither, FillMode
from tui_banner.effects.gradient import Gradient
from tui_banner.effects.light_sweep import LightSweep
from tui_banner.effects.outline import EdgeShade
from tui_banner.effects.shadow import Shadow
from tui_banner.layout.frame import Frame


@dataclass(frozen=True)
class BannerConfig:
    """
    Everything a render needs besides the text and font.

    Immutable: the fluent ``Banner`` builder swaps in modified copies
    with ``dataclasses.replace``. Optional effects are skipped when None.
    """

    # Glyph treatment
    fill: FillMode = field(default_factory=Blocks)
    gradient: Optional[Gradient] = None
    light_sweep: Optional[LightSweep] = None
    dot_dither: Optional[Dither] = None
    dot_dither_targets: Optional[tuple[str, ...]] = None  # None = shade glyphs

    # Extra ink
    edge_shade: Optional[EdgeShade] = None
    shadow: Optional[Shadow] = None

    # Layout
    align: Align = Align.LEFT
    padding: Padding = field(default_factory=Padding)
    frame: Optional[Frame] = None
    width: Optional[int] = None
    max_width: Optional[int] = None
    kerning: int = 1
    line_gap: int = 0
    trim_vertical: bool = False

    # Output
    color_mode: ColorMode = ColorMode.AUTO

    def to_dict(self) -> dict[str, Any]:
        """Summarize for logging."""
        return {
            "fill": type(self.fill).__name__,
            "gradient": self.gradient.direction.value if self.gradient else None,
            "gradient_stops": len(self.gradient.stops) if self.gradient else 0,
            "light_sweep": self.light_sweep.direction.value if self.light_sweep else None,
            "dot_dither": type(self.dot_dither.mode).__name__ if self.dot_dither else None,
            "dot_dither_targets": ''.join(self.dot_dither_targets) if self.dot_dither_targets is not None else None,
            "edge_shade": self.edge_shade is not None,
            "shadow": self.shadow.offset if self.shadow else None,
            "align": self.align.value,
            "padding": (self.padding.top, self.padding.right, self.padding.bottom, self.padding.left),
            "frame": self.frame is not None,
            "width": self.width,
            "max_width": self.max_width,
            "kerning": self.kerning,
            "line_gap": self.line_gap,
            "trim_vertical": self.trim_vertical,
            "color_mode": self.color_mode.value,
        }

    def __str__(self) -> str:
        """Human-readable summary."""
        enabled = [
            name for name in ("gradient", "light_sweep", "dot_dither", "edge_shade", "shadow", "frame")
            if getattr(self, name) is not None
        ]
        return (
            f"BannerConfig: fill={type(self.fill).__name__} align={self.align.value} "
            f"effects={','.join(enabled) or 'none'} mode={self.color_mode.value}"
        )
