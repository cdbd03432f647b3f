"""Command-line interface for tui-banner."""

from tui_banner.cli.app import create_app

__all__ = ["create_app"]
