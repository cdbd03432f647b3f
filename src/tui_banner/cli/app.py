"""Typer CLI application."""

import itertools
import logging
import sys
import time
from pathlib import Path
from typing import Annotated, Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from tui_banner.core.color import ColorMode
from tui_banner.core.grid import Align
from tui_banner.create.builder import Banner, BannerError
from tui_banner.create.styles import Style
from tui_banner.effects.animate import DEFAULT_FRAMES
from tui_banner.effects.fill import Fill
from tui_banner.effects.gradient import Gradient, GradientDirection
from tui_banner.effects.light_sweep import LightSweep, SweepDirection
from tui_banner.font.figlet import FigletError
from tui_banner.font.font import Font
from tui_banner.layout.frame import Frame, FrameChars, FrameStyle
from tui_banner.cli import options
from tui_banner.cli.terminal import Terminal

logger = logging.getLogger(__name__)

FILLS = ("keep", "blocks", "solid", "pixel")
ANIMATIONS = ("sweep", "wave", "roll")


def setup_logging(verbose: bool) -> None:
    """Send library debug records to stderr through rich."""
    if not verbose:
        return
    package_logger = logging.getLogger("tui_banner")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _choice(value: str, choices: tuple[str, ...], what: str) -> str:
    value = value.strip().lower()
    if value not in choices:
        raise ValueError(f"Unknown {what} {value!r} (choose from: {', '.join(choices)})")
    return value


def _frame_style(name: str) -> FrameStyle:
    try:
        return FrameStyle[name.strip().upper()]
    except KeyError:
        choices = ', '.join(s.name.lower() for s in FrameStyle)
        raise ValueError(f"Unknown frame style {name!r} (choose from: {choices})") from None


def _play(frames: Iterator[str], speed: int, cycles: int) -> None:
    """Draw frames in place; ``cycles`` 0 repeats until interrupted."""
    frame_list = list(frames)
    loop = itertools.cycle(frame_list) if cycles == 0 else itertools.chain.from_iterable(
        itertools.repeat(frame_list, cycles))
    delay = max(0, speed) / 1000
    with Terminal.animation():
        try:
            for frame in loop:
                Terminal.draw_frame(frame)
                time.sleep(delay)
        except KeyboardInterrupt:
            pass


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="tui-banner",
        help="Render big gradient text banners for the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def fail(message: str) -> typer.Exit:
        err_console.print(f"[red]{message}[/]")
        return typer.Exit(1)

    @app.command()
    def render(
        text: Annotated[Optional[str], typer.Argument(help="Banner text (use \\n for line breaks)")] = None,
        text_option: Annotated[Optional[str], typer.Option("--text", "-t", help="Banner text")] = None,
        font: Annotated[Optional[Path], typer.Option("--font", help="FIGlet .flf font file")] = None,
        style: Annotated[Optional[Style], typer.Option("--style", "-s", help="Named style")] = None,
        preset: Annotated[Optional[str], typer.Option("--preset", help="Palette preset for the gradient")] = None,
        gradient: Annotated[Optional[GradientDirection], typer.Option("--gradient", "-g", help="Gradient direction")] = None,
        palette: Annotated[Optional[str], typer.Option("--palette", help="Comma-separated #RRGGBB stops")] = None,
        fill: Annotated[str, typer.Option("--fill", help="keep, blocks, solid or pixel")] = "keep",
        fill_char: Annotated[str, typer.Option("--fill-char", help="Character for solid/pixel fill")] = "█",
        pixel_dither: Annotated[Optional[str], typer.Option("--pixel-dither", help="checker:N or noise:SEED:THR")] = None,
        pixel_dither_dots: Annotated[str, typer.Option("--pixel-dither-dots", help="Dot characters for pixel dither")] = "",
        dither: Annotated[Optional[str], typer.Option("--dither", help="Dot dither: checker:N or noise:SEED:THR")] = None,
        dither_targets: Annotated[Optional[str], typer.Option("--dither-targets", help="Glyphs dot dither may replace")] = None,
        dither_dots: Annotated[str, typer.Option("--dither-dots", help="Dot characters for dot dither")] = "",
        shadow: Annotated[Optional[str], typer.Option("--shadow", help="DX,DY[,ALPHA]")] = None,
        edge_shade: Annotated[Optional[str], typer.Option("--edge-shade", help="DARKEN[,CHAR]")] = None,
        align: Annotated[Align, typer.Option("--align", "-a", help="Horizontal alignment")] = Align.LEFT,
        padding: Annotated[str, typer.Option("--padding", "-p", help="N or T,R,B,L")] = "0",
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Force output width")] = None,
        max_width: Annotated[Optional[int], typer.Option("--max-width", help="Clamp output width")] = None,
        kerning: Annotated[int, typer.Option("--kerning", "-k", help="Blank columns between glyphs")] = 1,
        line_gap: Annotated[int, typer.Option("--line-gap", help="Blank rows between lines")] = 0,
        no_trim: Annotated[bool, typer.Option("--no-trim", help="Keep blank glyph rows")] = False,
        color_mode: Annotated[Optional[ColorMode], typer.Option("--color-mode", "-c", help="Color output mode")] = None,
        frame: Annotated[Optional[str], typer.Option("--frame", help="single, double, rounded, heavy or ascii")] = None,
        frame_chars: Annotated[Optional[str], typer.Option("--frame-chars", help="Six chars: tl tr bl br h v")] = None,
        frame_color: Annotated[Optional[str], typer.Option("--frame-color", help="#RRGGBB, or 'gradient'")] = None,
        light_sweep: Annotated[bool, typer.Option("--light-sweep", help="Add a highlight band")] = False,
        sweep_direction: Annotated[SweepDirection, typer.Option("--sweep-direction")] = SweepDirection.DIAGONAL_DOWN,
        sweep_center: Annotated[float, typer.Option("--sweep-center")] = 0.5,
        sweep_width: Annotated[float, typer.Option("--sweep-width")] = 0.25,
        sweep_intensity: Annotated[float, typer.Option("--sweep-intensity")] = 0.8,
        sweep_softness: Annotated[float, typer.Option("--sweep-softness")] = 2.0,
        highlight: Annotated[Optional[str], typer.Option("--highlight", help="Sweep color (#RRGGBB)")] = None,
        animate: Annotated[Optional[str], typer.Option("--animate", help="sweep, wave or roll")] = None,
        speed: Annotated[int, typer.Option("--speed", help="Milliseconds per animation frame")] = 30,
        frames: Annotated[int, typer.Option("--frames", help="Frames per animation cycle")] = DEFAULT_FRAMES,
        cycles: Annotated[int, typer.Option("--cycles", help="Animation repeats, 0 = until Ctrl-C")] = 0,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging to stderr")] = False,
    ) -> None:
        """Render TEXT as a banner."""
        setup_logging(verbose)
        try:
            value = options.resolve_text(text, text_option)
            banner = Banner(value, Font.from_file(font) if font else None)

            if style is not None:
                banner.style(style)
            if gradient is not None or preset or palette:
                banner.gradient(options.resolve_gradient(
                    gradient or GradientDirection.DIAGONAL, preset, palette))

            fill_name = _choice(fill, FILLS, "fill")
            if fill_name == "keep":
                banner.fill(Fill.keep())
            elif fill_name == "blocks":
                banner.fill(Fill.blocks())
            elif fill_name == "solid":
                banner.fill(Fill.solid(fill_char[:1] or "█"))
            else:
                pixel = options.parse_dither(pixel_dither, pixel_dither_dots) if pixel_dither else None
                banner.fill(Fill.pixel(fill_char[:1] or "█", pixel))

            if dither:
                banner.dot_dither(options.parse_dither(dither, dither_dots))
            if dither_targets is not None:
                banner.dot_dither_targets(dither_targets)
            if shadow:
                offset, alpha = options.parse_shadow(shadow)
                banner.shadow(offset, alpha)
            if edge_shade:
                darken, char = options.parse_edge_shade(edge_shade)
                banner.edge_shade(darken, char)
            if light_sweep:
                banner.light_sweep(LightSweep(
                    sweep_direction, sweep_center, max(0.0, sweep_width),
                    max(0.0, min(1.0, sweep_intensity)), max(1.0, sweep_softness)))

            banner.align(align).padding(options.parse_padding(padding))
            banner.kerning(kerning).line_gap(line_gap).trim_vertical(not no_trim)
            if width is not None:
                banner.width(width)
            if max_width is not None:
                banner.max_width(max_width)
            if color_mode is not None:
                banner.color_mode(color_mode)

            if frame or frame_chars:
                chars = FrameChars.from_string(frame_chars) if frame_chars else _frame_style(frame).chars
                banner_frame = Frame.custom(chars)
                if frame_color == "gradient":
                    banner_frame = banner_frame.gradient(
                        banner.config.gradient or Gradient.horizontal(Style.NEON_CYBER.palette))
                elif frame_color:
                    banner_frame = banner_frame.color(options.parse_color(frame_color))
                banner.frame(banner_frame)

            highlight_color = options.parse_color(highlight) if highlight else None
            frames = max(1, frames)
            if animate:
                kind = _choice(animate, ANIMATIONS, "animation")
                logger.debug("Animating %s: %d frames at %d ms", kind, frames, speed)
                if kind == "sweep":
                    played = banner.sweep_frames(frames, highlight_color)
                elif kind == "wave":
                    played = banner.wave_frames(frames)
                else:
                    played = banner.roll_frames(frames)
                _play(played, speed, max(0, cycles))
                return

            sys.stdout.write(banner.render() + "\n")
        except (FigletError, BannerError, OSError, ValueError) as e:
            raise fail(f"Error: {e}") from e

    @app.command()
    def fonts(
        path: Annotated[Path, typer.Argument(help="FIGlet .flf font to validate")],
        sample: Annotated[Optional[str], typer.Option("--sample", help="Render this text with the font")] = None,
    ) -> None:
        """Validate a FIGlet font file."""
        try:
            font = Font.from_file(path)
        except (FigletError, OSError, ValueError) as e:
            raise fail(f"Invalid font {path}: {e}") from e

        console.print(f"[bold cyan]{path.name}[/]")
        console.print(f"  [bold]Height:[/] {font.height}")
        console.print(f"  [bold]Glyphs:[/] {len(font.glyphs)}")
        if sample:
            sys.stdout.write(
                Banner(sample, font).fill(Fill.keep()).color_mode(ColorMode.NO_COLOR).render() + "\n")

    @app.command()
    def styles() -> None:
        """List the named styles with a swatch of each palette."""
        table = Table(title="Styles")
        table.add_column("Name", style="bold")
        table.add_column("Palette")
        table.add_column("Colors")
        for item in Style:
            swatch = Text()
            for color in item.palette:
                swatch.append("██", style=color.hex)
            table.add_row(item.value, swatch, item.description)
        console.print(table)

    return app
