"""Named banner styles."""

from enum import Enum

from tui_banner.core.color import Palette, Preset


class Style(Enum):
    """A named look: a vertical gradient over one of the palette presets."""
    NEON_CYBER = "neon-cyber"
    ARCTIC_TECH = "arctic-tech"
    SUNSET_NEON = "sunset-neon"
    FOREST_SKY = "forest-sky"
    CHROME = "chrome"
    CRT_AMBER = "crt-amber"
    OCEAN_FLOW = "ocean-flow"
    DEEP_SPACE = "deep-space"
    FIRE_WARNING = "fire-warning"
    WARM_LUXURY = "warm-luxury"
    EARTH_TONE = "earth-tone"
    ROYAL_PURPLE = "royal-purple"
    MATRIX = "matrix"
    AURORA_FLUX = "aurora-flux"

    @property
    def preset(self) -> Preset:
        return Preset[self.name]

    @property
    def palette(self) -> Palette:
        return Palette.preset(self.preset)

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self]


DESCRIPTIONS: dict[Style, str] = {
    Style.NEON_CYBER: "cyan -> purple -> pink",
    Style.ARCTIC_TECH: "cyan -> blue -> white",
    Style.SUNSET_NEON: "orange -> pink -> purple",
    Style.FOREST_SKY: "green -> teal -> blue",
    Style.CHROME: "silver metallic",
    Style.CRT_AMBER: "retro amber",
    Style.OCEAN_FLOW: "blue -> teal -> aqua",
    Style.DEEP_SPACE: "blue -> purple -> indigo",
    Style.FIRE_WARNING: "yellow -> orange -> red",
    Style.WARM_LUXURY: "pink -> coral -> gold",
    Style.EARTH_TONE: "sand -> earth -> olive",
    Style.ROYAL_PURPLE: "lavender -> purple -> deep purple",
    Style.MATRIX: "neon green -> deep green",
    Style.AURORA_FLUX: "teal -> sky blue -> violet -> aurora purple",
}
