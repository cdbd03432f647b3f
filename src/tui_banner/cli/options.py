"""Parsing of command-line option strings into banner settings.

Every parser raises ValueError with a readable message; the command
layer turns that into a red error and exit code 1.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from tui_banner.core.color import Color, Palette, Preset, parse_hex_color
from tui_banner.core.grid import Padding
from tui_banner.effects.fill import Checker, Dither, Noise, parse_dots
from tui_banner.effects.gradient import Gradient, GradientDirection


def resolve_text(text: Optional[str], flag_text: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """Positional text wins over ``--text``; piped stdin is the last resort."""
    if stdin is None:
        stdin = sys.stdin
    value = text if text is not None else flag_text
    if value is None and not stdin.isatty():
        value = stdin.read().rstrip('\n')
    if not value:
        raise ValueError("No text given (pass TEXT, --text, or pipe it on stdin)")
    return value.replace('\\n', '\n')


def parse_color(text: str) -> Color:
    color = parse_hex_color(text)
    if color is None:
        raise ValueError(f"Invalid color {text!r} (expected #RRGGBB)")
    return color


def parse_preset(name: str) -> Preset:
    key = name.strip().replace('-', '_').upper()
    try:
        return Preset[key]
    except KeyError:
        choices = ', '.join(p.name.lower().replace('_', '-') for p in Preset)
        raise ValueError(f"Unknown preset {name!r} (choose from: {choices})") from None


def parse_palette(text: str) -> Palette:
    palette = Palette.from_hex(part for part in text.split(',') if part.strip())
    if not palette:
        raise ValueError(f"Palette {text!r} has no valid #RRGGBB colors")
    return palette


def resolve_gradient(
    direction: GradientDirection,
    preset: Optional[str],
    palette: Optional[str],
) -> Gradient:
    """A custom palette beats a preset; with neither, the neon-cyber preset is used."""
    if palette:
        stops = parse_palette(palette)
    else:
        stops = Palette.preset(parse_preset(preset) if preset else Preset.NEON_CYBER)
    return Gradient(stops.colors, direction)


def _parse_ints(text: str, what: str) -> list[int]:
    try:
        return [int(part) for part in text.split(',')]
    except ValueError:
        raise ValueError(f"Invalid {what} {text!r}") from None


def parse_shadow(text: str) -> tuple[tuple[int, int], float]:
    """``DX,DY`` or ``DX,DY,ALPHA``."""
    parts = [p.strip() for p in text.split(',')]
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid shadow {text!r} (expected DX,DY[,ALPHA])")
    dx, dy = _parse_ints(','.join(parts[:2]), "shadow offset")
    alpha = 0.5
    if len(parts) == 3:
        try:
            alpha = float(parts[2])
        except ValueError:
            raise ValueError(f"Invalid shadow alpha {parts[2]!r}") from None
    return (dx, dy), alpha


def parse_edge_shade(text: str) -> tuple[float, str]:
    """``DARKEN`` or ``DARKEN,CHAR``."""
    darken_text, _, char = text.partition(',')
    try:
        darken = float(darken_text)
    except ValueError:
        raise ValueError(f"Invalid edge shade {text!r} (expected DARKEN[,CHAR])") from None
    return darken, char[:1] or '░'


def parse_padding(text: str) -> Padding:
    """``N`` for uniform padding or ``T,R,B,L``."""
    values = _parse_ints(text, "padding")
    if len(values) == 1:
        return Padding.uniform(values[0])
    if len(values) == 4:
        return Padding(*values)
    raise ValueError(f"Invalid padding {text!r} (expected N or T,R,B,L)")


def parse_dither(text: str, dots: str = "") -> Dither:
    """``checker:PERIOD`` or ``noise:SEED:THRESHOLD``."""
    kind, _, rest = text.partition(':')
    args = rest.split(':') if rest else []
    try:
        if kind == 'checker' and len(args) == 1:
            mode = Checker(max(0, min(255, int(args[0]))))
        elif kind == 'noise' and len(args) == 2:
            mode = Noise(int(args[0]) & 0xFFFFFFFF, max(0, min(255, int(args[1]))))
        else:
            raise ValueError
    except ValueError:
        raise ValueError(f"Invalid dither {text!r} (expected checker:N or noise:SEED:THR)") from None
    dot, alt = parse_dots(dots)
    return Dither(mode, dot, alt)
