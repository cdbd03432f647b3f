"""Tools for configuring and rendering banners."""

from tui_banner.create.builder import Banner, BannerError, DotDitherBuilder
from tui_banner.create.config import BannerConfig
from tui_banner.create.pipeline import build_grid
from tui_banner.create.styles import Style

__all__ = ["Banner", "BannerError", "DotDitherBuilder", "BannerConfig", "build_grid", "Style"]
