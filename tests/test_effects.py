"""Tests for fills, gradients, dithering, edge shading, shadows and sweeps."""

import math

import pytest

from tui_banner.core.cell import Cell
from tui_banner.core.color import Color, Palette
from tui_banner.core.grid import Grid
from tui_banner.effects import (
    Checker,
    Dither,
    EdgeShade,
    Fill,
    Gradient,
    GradientDirection,
    LightSweep,
    Noise,
    Shadow,
    SweepDirection,
    apply_dot_dither,
    apply_edge_shade,
    apply_fill,
    apply_light_sweep,
    apply_light_sweep_tint,
    apply_shadow,
)
from tui_banner.effects.animate import apply_roll, apply_wave_breathe, sweep_frames
from tui_banner.effects.fill import mix, parse_dots, should_dither
from tui_banner.effects.gradient import axis_position, color_at
from tui_banner.effects.light_sweep import axis_t

RED = Color.from_rgb(255, 0, 0)
BLUE = Color.from_rgb(0, 0, 255)


def ink_grid(*rows: str, fg: Color | None = None) -> Grid:
    grid = Grid.from_char_rows(rows)
    for _, _, cell in grid.visible_cells():
        cell.fg = fg
    return grid


class TestGradient:
    """Tests for gradient mapping."""

    def test_single_cell_gets_first_stop(self) -> None:
        grid = ink_grid("#")
        Gradient((RED, BLUE), GradientDirection.DIAGONAL).apply(grid)
        assert grid[0, 0].fg == RED

    def test_vertical_black_to_white(self) -> None:
        grid = ink_grid("#", "#", "#")
        Gradient((Color.BLACK, Color.WHITE), GradientDirection.VERTICAL).apply(grid)
        assert [grid[r, 0].fg.rgb for r in range(3)] == [
            (0, 0, 0),
            (128, 128, 128),
            (255, 255, 255),
        ]

    def test_horizontal(self) -> None:
        grid = ink_grid("###")
        Gradient.horizontal(Palette((RED, BLUE))).apply(grid)
        assert grid[0, 0].fg == RED
        assert grid[0, 2].fg == BLUE

    def test_skips_invisible_cells(self) -> None:
        grid = ink_grid("# #")
        Gradient((RED,)).apply(grid)
        assert grid[0, 1].fg is None
        assert grid[0, 2].fg == RED

    def test_empty_stops(self) -> None:
        grid = ink_grid("#")
        Gradient(()).apply(grid)
        assert grid[0, 0].fg is None

    def test_color_at_ends(self) -> None:
        stops = (RED, Color.WHITE, BLUE)
        assert color_at(stops, 0.0) == RED
        assert color_at(stops, 0.5) == Color.WHITE
        assert color_at(stops, 1.0) == BLUE
        assert color_at(stops, 7.0) == BLUE

    def test_axis_position(self) -> None:
        assert axis_position(GradientDirection.DIAGONAL, 1, 2, 2, 3) == 1.0
        assert axis_position(GradientDirection.DIAGONAL, 0, 0, 1, 1) == 0.0
        assert axis_position(GradientDirection.VERTICAL, 0, 5, 1, 10) == 0.0

    def test_stops_coerced_to_tuple(self) -> None:
        assert Gradient([RED, BLUE]).stops == (RED, BLUE)


class TestFill:
    """Tests for fill variants and dither patterns."""

    def test_keep(self) -> None:
        grid = ink_grid("ab")
        apply_fill(grid, Fill.keep())
        assert grid.text_rows() == ["ab"]

    def test_blocks(self) -> None:
        grid = ink_grid("a b")
        apply_fill(grid, Fill.blocks())
        assert grid.text_rows() == ["# #"]

    def test_solid(self) -> None:
        grid = ink_grid("ab")
        apply_fill(grid, Fill.solid('@'))
        assert grid.text_rows() == ["@@"]

    def test_pixel_checker_period_three(self) -> None:
        grid = ink_grid("######")
        apply_fill(grid, Fill.pixel('█', Dither.checker(3, '.')))
        assert grid.text_rows() == [".██.██"]

    def test_checker_period_zero_never(self) -> None:
        assert not any(should_dither(r, c, Checker(0)) for r in range(4) for c in range(4))

    def test_dither_alternates_dots(self) -> None:
        dither = Dither(Checker(1), '.', ':')
        assert dither.char_for(0, 0) == '.'
        assert dither.char_for(0, 1) == ':'

    def test_parse_dots(self) -> None:
        assert parse_dots("") == ('·', '·')
        assert parse_dots(".") == ('.', '.')
        assert parse_dots(".:x") == ('.', ':')

    def test_noise_deterministic(self) -> None:
        first = [should_dither(r, c, Noise(7, 128)) for r in range(8) for c in range(8)]
        second = [should_dither(r, c, Noise(7, 128)) for r in range(8) for c in range(8)]
        assert first == second
        assert any(first)
        assert not all(first)

    def test_noise_threshold_zero_never(self) -> None:
        assert not any(should_dither(r, c, Noise(1, 0)) for r in range(8) for c in range(8))

    @pytest.mark.parametrize("seed,x,y,expected", [
        (0, 0, 0, 0),
        (1, 2, 3, 0x237C1242),
        (0xDEADBEEF, 7, 11, 0x6ACB7B0D),
    ])
    def test_mix_known_values(self, seed: int, x: int, y: int, expected: int) -> None:
        assert mix(seed, x, y) == expected

    def test_mix_is_32_bit(self) -> None:
        assert mix(1, 2, 3) != mix(2, 2, 3)
        assert 0 <= mix(0xFFFFFFFF, 1000, 1000) <= 0xFFFFFFFF

    @pytest.mark.parametrize("seed,row,col,low_byte", [
        (0, 0, 0, 0x00),
        (1, 2, 3, 0x42),
        (0xDEADBEEF, 7, 11, 0x0D),
    ])
    def test_noise_inclusion_at_threshold(self, seed: int, row: int, col: int, low_byte: int) -> None:
        assert should_dither(row, col, Noise(seed, low_byte + 1))
        assert not should_dither(row, col, Noise(seed, low_byte))

    def test_constructors_clamp(self) -> None:
        assert Dither.checker(999).mode == Checker(255)
        assert Dither.noise(-1, 300).mode == Noise(0xFFFFFFFF, 255)


class TestDotDither:
    """Tests for dot dithering over target glyphs."""

    def test_only_targets_replaced(self) -> None:
        grid = ink_grid("░█░█")
        out = apply_dot_dither(grid, Dither(Checker(1), '.', '.'))
        assert out.text_rows() == [".█.█"]
        assert grid.text_rows() == ["░█░█"]

    def test_custom_targets(self) -> None:
        grid = ink_grid("ab")
        out = apply_dot_dither(grid, Dither(Checker(1), '.', '.'), targets="b")
        assert out.text_rows() == ["a."]


class TestEdgeShade:
    """Tests for edge shading."""

    def test_surrounds_single_cell(self) -> None:
        grid = Grid(3, 3)
        grid[1, 1] = Cell.ink('#', RED)
        out = apply_edge_shade(grid, EdgeShade('░', 0.5))
        assert out.text_rows() == ["░░░", "░#░", "░░░"]
        assert out[0, 0].fg.rgb == (128, 0, 0)
        assert out[1, 1].fg == RED

    def test_first_writer_wins(self) -> None:
        grid = Grid(1, 3)
        grid[0, 0] = Cell.ink('#', RED)
        grid[0, 2] = Cell.ink('#', BLUE)
        out = apply_edge_shade(grid, EdgeShade('░', 0.0))
        assert out[0, 1].fg == RED

    def test_edges_do_not_spread(self) -> None:
        grid = Grid(1, 5)
        grid[0, 2] = Cell.ink('#')
        out = apply_edge_shade(grid, EdgeShade())
        assert out.text_rows() == [" ░#░ "]
        assert out[0, 1].fg is None


class TestShadow:
    """Tests for drop shadows."""

    def test_zero_offset_is_identity(self) -> None:
        grid = ink_grid("ab", fg=RED)
        out = apply_shadow(grid, Shadow((0, 0), 0.5))
        assert out == grid
        assert out is not grid

    def test_positive_offset_grows(self) -> None:
        grid = ink_grid("#", fg=Color.WHITE)
        out = apply_shadow(grid, Shadow((2, 1), 0.5))
        assert out.height == 2
        assert out.width == 3
        assert out.text_rows() == ["#  ", "  #"]
        assert out[1, 2].fg.rgb == (128, 128, 128)

    def test_never_overwrites_ink(self) -> None:
        grid = ink_grid("##", fg=RED)
        out = apply_shadow(grid, Shadow((1, 0), 1.0))
        assert out[0, 1].fg == RED
        assert out[0, 2].fg == Color.BLACK

    def test_negative_offset_drops(self) -> None:
        grid = ink_grid(" #", fg=RED)
        out = apply_shadow(grid, Shadow((-1, -1), 0.5))
        assert out.height == 1
        assert out.width == 2
        assert out.text_rows() == [" #"]


class TestLightSweep:
    """Tests for the highlight band."""

    def test_blends_inside_band(self) -> None:
        grid = ink_grid("###", fg=Color.BLACK)
        sweep = LightSweep(SweepDirection.HORIZONTAL, center=0.0, width=0.5, intensity=1.0, softness=1.0)
        apply_light_sweep(grid, sweep)
        assert grid[0, 0].fg == Color.WHITE
        assert grid[0, 1].fg == Color.BLACK
        assert grid[0, 2].fg == Color.BLACK

    def test_zero_intensity_noop(self) -> None:
        grid = ink_grid("###", fg=RED)
        apply_light_sweep(grid, LightSweep(intensity=0.0))
        assert all(cell.fg == RED for _, _, cell in grid.visible_cells())

    def test_custom_highlight(self) -> None:
        grid = ink_grid("#", fg=Color.BLACK)
        sweep = LightSweep(SweepDirection.VERTICAL, center=0.0, width=1.0, intensity=1.0)
        apply_light_sweep_tint(grid, sweep, RED)
        assert grid[0, 0].fg == RED

    @pytest.mark.parametrize("row,col,expected", [
        (0, 3, 0.0),
        (2, 0, 1.0),
        (0, 0, 0.6),
        (1, 2, 0.4),
    ])
    def test_diagonal_up_axis(self, row: int, col: int, expected: float) -> None:
        assert axis_t(SweepDirection.DIAGONAL_UP, row, col, 4, 3) == pytest.approx(expected)

    def test_uncolored_cells_skipped(self) -> None:
        grid = ink_grid("#")
        apply_light_sweep(grid, LightSweep(center=0.0, intensity=1.0))
        assert grid[0, 0].fg is None


class TestAnimate:
    """Tests for per-frame animation transforms."""

    def test_sweep_frames_travel(self) -> None:
        centers = [s.center for s in sweep_frames(LightSweep(center=0.5), 4)]
        assert centers[0] == pytest.approx(-0.25)
        assert len(centers) == 4
        assert centers == sorted(centers)

    def test_wave_keeps_glyphs(self) -> None:
        grid = ink_grid("ab c", "d ef", fg=RED)
        out = apply_wave_breathe(grid, math.pi / 3)
        assert out.text_rows() == grid.text_rows()
        assert out is not grid
        assert grid[0, 0].fg == RED

    def test_roll_keeps_size(self) -> None:
        grid = ink_grid("abcd", "efgh", "ijkl", fg=BLUE)
        for t in (0.0, 0.5, 1.0):
            out = apply_roll(grid, t)
            assert out.height == grid.height
            assert out.width == grid.width

    def test_roll_empty(self) -> None:
        assert apply_roll(Grid(), 0.5) == Grid()
