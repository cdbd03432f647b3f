"""Layout: padding, alignment, width clamping and frames."""

from tui_banner.layout.frame import (
    Frame,
    FrameChars,
    FramePaint,
    FrameStyle,
    GradientPaint,
    SolidPaint,
    apply_frame,
)
from tui_banner.layout.layout import apply_layout, apply_padding, clip_width, expand_width, resolve_width

__all__ = [
    "Frame",
    "FrameChars",
    "FramePaint",
    "FrameStyle",
    "GradientPaint",
    "SolidPaint",
    "apply_frame",
    "apply_layout",
    "apply_padding",
    "clip_width",
    "expand_width",
    "resolve_width",
]
