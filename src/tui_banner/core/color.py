"""Color representation, palettes and interpolation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Iterator


class ColorMode(Enum):
    """Output color mode for the terminal emitter."""
    AUTO = "auto"            # Resolved from the environment at render time
    TRUE_COLOR = "truecolor"  # 24-bit (SGR 38;2;r;g;b)
    ANSI_256 = "256"         # Extended 256-color (SGR 38;5;n)
    NO_COLOR = "none"        # Plain characters only


def _round(value: float) -> int:
    # Channels are non-negative, so this is round-half-away-from-zero.
    return int(value + 0.5)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class Color:
    """
    A foreground/background color value.

    Either a 24-bit RGB triple or an index into the 256-color palette.
    Only RGB colors take part in interpolation; 256-color values pass
    through blending untouched.
    """
    value: int | tuple[int, int, int]

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls((r, g, b))

    @classmethod
    def from_256(cls, index: int) -> Color:
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(index)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#RRGGBB``, raising ValueError when malformed."""
        color = parse_hex_color(text)
        if color is None:
            raise ValueError(f"Invalid hex color: {text!r}")
        return color

    @property
    def is_rgb(self) -> bool:
        return isinstance(self.value, tuple)

    @property
    def rgb(self) -> tuple[int, int, int] | None:
        return self.value if isinstance(self.value, tuple) else None

    @property
    def hex(self) -> str:
        if not isinstance(self.value, tuple):
            raise ValueError("256-color values have no hex form")
        r, g, b = self.value
        return f"#{r:02X}{g:02X}{b:02X}"

    def lerp(self, other: Color, t: float) -> Color:
        """
        Linearly interpolate toward ``other``.

        ``t`` is clamped to [0, 1] and each channel is rounded to the
        nearest integer. If either side is not RGB, ``self`` is returned.
        """
        if not (isinstance(self.value, tuple) and isinstance(other.value, tuple)):
            return self
        t = _clamp01(t)
        return Color(tuple(
            _round(a + (b - a) * t) for a, b in zip(self.value, other.value)
        ))

    def darken(self, amount: float) -> Color:
        """Scale toward black by ``amount`` (clamped to [0, 1])."""
        if not isinstance(self.value, tuple):
            return self
        factor = 1.0 - _clamp01(amount)
        return Color(tuple(_round(c * factor) for c in self.value))

    def brighten(self, amount: float) -> Color:
        """Blend toward white by ``amount``."""
        return self.lerp(Color.WHITE, amount)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this foreground color."""
        if isinstance(self.value, tuple):
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"
        return f"38;5;{self.value}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this background color."""
        if isinstance(self.value, tuple):
            r, g, b = self.value
            return f"48;2;{r};{g};{b}"
        return f"48;5;{self.value}"


Color.BLACK = Color((0, 0, 0))
Color.WHITE = Color((255, 255, 255))


HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_hex_color(text: str) -> Color | None:
    """Parse ``#RRGGBB`` (leading ``#`` optional). Returns None if malformed."""
    hex_digits = text.strip().lstrip('#')
    if len(hex_digits) != 6 or not all(ch in HEX_DIGITS for ch in hex_digits):
        return None
    r, g, b = (int(hex_digits[i:i + 2], 16) for i in (0, 2, 4))
    return Color((r, g, b))


class Preset(Enum):
    """Built-in palette presets."""
    NEON_CYBER = ("#00E5FF", "#7B5CFF", "#FF5AD9")
    ARCTIC_TECH = ("#00E5FF", "#3A7BFF", "#E6F6FF")
    SUNSET_NEON = ("#FFE29A", "#FF8C42", "#FF3D7F", "#7B5CFF")
    FOREST_SKY = ("#00FF6A", "#00B7FF", "#3B5BFF")
    CHROME = ("#F5F5F5", "#BDBDBD", "#6B7280", "#E5E7EB")
    CRT_AMBER = ("#FFB000", "#FF8C00", "#7A3E00")
    OCEAN_FLOW = ("#00C2FF", "#00FFA3")
    DEEP_SPACE = ("#1E3A8A", "#5B21B6", "#312E81")
    FIRE_WARNING = ("#FACC15", "#FB923C", "#EF4444")
    WARM_LUXURY = ("#FF9A9E", "#FF7F50", "#FFD700")
    EARTH_TONE = ("#E6CCB2", "#B08968", "#6B705C")
    ROYAL_PURPLE = ("#E9D5FF", "#A855F7", "#581C87")
    MATRIX = ("#00FF9C", "#00C46A", "#003B24")
    AURORA_FLUX = ("#00F5D4", "#00BBF9", "#9B5DE5", "#7B2CBF")


class Palette:
    """Ordered sequence of color stops."""

    def __init__(self, colors: Iterable[Color] = ()):
        self._colors: tuple[Color, ...] = tuple(colors)

    @classmethod
    def from_hex(cls, hexes: Iterable[str]) -> Palette:
        """Build from hex strings, silently dropping malformed entries."""
        colors = (parse_hex_color(h) for h in hexes)
        return cls(c for c in colors if c is not None)

    @classmethod
    def preset(cls, preset: Preset) -> Palette:
        return cls.from_hex(preset.value)

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"Palette({[c.hex if c.is_rgb else c.value for c in self._colors]})"
