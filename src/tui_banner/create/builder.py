"""Fluent builder API for rendering banners."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Iterable, Iterator

from tui_banner.core.color import Color, ColorMode
from tui_banner.core.grid import Align, Grid, Padding
from tui_banner.create.config import BannerConfig
from tui_banner.create.pipeline import build_grid
from tui_banner.create.styles import Style
from tui_banner.effects.animate import (
    DEFAULT_FRAMES,
    apply_roll,
    apply_wave_breathe,
    default_sweep,
    sweep_frames,
)
from tui_banner.effects.fill import Checker, Dither, FillMode, Keep, Noise, parse_dots
from tui_banner.effects.gradient import Gradient
from tui_banner.effects.light_sweep import LightSweep
from tui_banner.effects.outline import EdgeShade
from tui_banner.effects.shadow import Shadow
from tui_banner.font.figlet import FigletError
from tui_banner.font.font import Font, load_builtin_font
from tui_banner.layout.frame import Frame
from tui_banner.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


class BannerError(Exception):
    """Raised when a banner cannot be set up (e.g. its font fails to parse)."""


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


class Banner:
    """
    Fluent API for rendering banner text.

    Example:
        >>> print(Banner("HELLO")
        ...     .style(Style.NEON_CYBER)
        ...     .align(Align.CENTER)
        ...     .padding(1)
        ...     .render())
    """

    def __init__(self, text: str, font: Font | None = None):
        self._text = text
        if font is None:
            try:
                font = load_builtin_font()
            except FigletError as err:
                raise BannerError(f"font parse error: {err}") from err
        self._font = font
        self._config = BannerConfig()
        logger.debug("Banner created with font %r", font.name or "<custom>")

    @property
    def text(self) -> str:
        return self._text

    @property
    def config(self) -> BannerConfig:
        return self._config

    def _update(self, **changes) -> Banner:
        self._config = replace(self._config, **changes)
        return self

    def font(self, font: Font) -> Banner:
        """Set the font."""
        self._font = font
        return self

    def style(self, style: Style) -> Banner:
        """Apply a named style: true color, vertical preset gradient, kept glyphs."""
        return self._update(
            color_mode=ColorMode.TRUE_COLOR,
            gradient=Gradient.vertical(style.palette),
            fill=Keep(),
        )

    def gradient(self, gradient: Gradient) -> Banner:
        """Apply a gradient across the glyph grid."""
        return self._update(gradient=gradient)

    def fill(self, fill: FillMode) -> Banner:
        """Fill visible cells (or keep glyph characters)."""
        return self._update(fill=fill)

    def shadow(self, offset: tuple[int, int] = (1, 1), alpha: float = 0.5) -> Banner:
        """Add a drop shadow offset by (dx, dy)."""
        return self._update(shadow=Shadow(offset, _clamp01(alpha)))

    def light_sweep(self, sweep: LightSweep) -> Banner:
        """Add a highlight sweep."""
        return self._update(light_sweep=sweep)

    def edge_shade(self, darken: float = 0.5, char: str = '░') -> Banner:
        """Add a 1-cell edge using a darker color and a dedicated character."""
        return self._update(edge_shade=EdgeShade(char, _clamp01(darken)))

    def dot_dither(self, dither: Dither) -> Banner:
        """Enable dot dithering over the target glyphs."""
        return self._update(dot_dither=dither)

    def dot_dither_targets(self, targets: Iterable[str]) -> Banner:
        """Set the glyphs dot dithering may replace (e.g. "░▒▓")."""
        return self._update(dot_dither_targets=tuple(targets))

    def dither(self) -> DotDitherBuilder:
        """Configure dot dithering step by step."""
        return DotDitherBuilder(self)

    def align(self, align: Align) -> Banner:
        """Align within the target width."""
        return self._update(align=align)

    def padding(self, padding: Padding | int | tuple[int, int, int, int]) -> Banner:
        """Add padding: an int, a (top, right, bottom, left) tuple, or Padding."""
        return self._update(padding=Padding.coerce(padding))

    def frame(self, frame: Frame) -> Banner:
        """Add a frame around the banner."""
        return self._update(frame=frame)

    def width(self, width: int) -> Banner:
        """Force an output width (pads or clips)."""
        return self._update(width=max(0, width))

    def max_width(self, width: int) -> Banner:
        """Clamp output width."""
        return self._update(max_width=max(0, width))

    def kerning(self, kerning: int) -> Banner:
        """Blank columns between characters."""
        return self._update(kerning=max(0, kerning))

    def line_gap(self, line_gap: int) -> Banner:
        """Blank rows between text lines."""
        return self._update(line_gap=max(0, line_gap))

    def trim_vertical(self, enabled: bool = True) -> Banner:
        """Trim blank rows from the top and bottom of the rendered glyphs."""
        return self._update(trim_vertical=enabled)

    def color_mode(self, mode: ColorMode) -> Banner:
        """Override color mode."""
        return self._update(color_mode=mode)

    def render_grid(self, sweep: LightSweep | None = None, highlight: Color | None = None) -> Grid:
        """Run the pipeline and return the composited grid."""
        return build_grid(self._text, self._font, self._config, sweep, highlight)

    def render(self) -> str:
        """Render to a string (ANSI escapes included if enabled)."""
        return self._renderer().render(self.render_grid())

    def _renderer(self) -> TerminalRenderer:
        # Resolve AUTO once so every frame of an animation agrees
        mode = TerminalRenderer(self._config.color_mode).resolved_mode()
        return TerminalRenderer(mode)

    def sweep_frames(self, frames: int = DEFAULT_FRAMES, highlight: Color | None = None) -> Iterator[str]:
        """Rendered frames of a light sweep passing over the banner."""
        renderer = self._renderer()
        base = self._config.light_sweep or default_sweep()
        for sweep in sweep_frames(base, frames):
            yield renderer.render(self.render_grid(sweep, highlight or Color.WHITE))

    def wave_frames(
        self,
        frames: int = DEFAULT_FRAMES,
        dim_strength: float | None = None,
        bright_strength: float | None = None,
    ) -> Iterator[str]:
        """Rendered frames of a breathing wave; glyphs stay in place."""
        renderer = self._renderer()
        base = self.render_grid()
        dim = _clamp01(0.35 if dim_strength is None else dim_strength)
        bright = _clamp01(0.2 if bright_strength is None else bright_strength)
        for frame in range(frames):
            phase = frame / frames * math.tau
            yield renderer.render(apply_wave_breathe(base, phase, dim, bright))

    def roll_frames(self, frames: int = DEFAULT_FRAMES) -> Iterator[str]:
        """Rendered frames of a rolling crest moving left to right."""
        renderer = self._renderer()
        base = self.render_grid()
        for frame in range(frames):
            yield renderer.render(apply_roll(base, frame / frames))


class DotDitherBuilder:
    """
    Builder for dot dithering over selected glyph targets.

    Example:
        >>> banner = Banner("HI").dither().targets("#").dots(".:").checker(3)
    """

    def __init__(self, banner: Banner):
        self._banner = banner
        self._targets: tuple[str, ...] = ('░', '▒')
        self._dots: tuple[str, str] = ('░', '░')

    def targets(self, targets: Iterable[str]) -> DotDitherBuilder:
        """Set glyphs to be replaced by dots."""
        self._targets = tuple(targets)
        return self

    def dots(self, dots: str) -> DotDitherBuilder:
        """Set dot characters (1 or 2 chars, e.g. "·:")."""
        self._dots = parse_dots(dots)
        return self

    def checker(self, period: int) -> Banner:
        """Apply a checkerboard-style dither."""
        return self._finish(Checker(max(0, min(255, period))))

    def noise(self, seed: int, threshold: int) -> Banner:
        """Apply a hash-noise dither."""
        return self._finish(Noise(seed & 0xFFFFFFFF, max(0, min(255, threshold))))

    def _finish(self, mode: Checker | Noise) -> Banner:
        dot, alt = self._dots
        return (self._banner
            .dot_dither(Dither(mode, dot, alt))
            .dot_dither_targets(self._targets))
