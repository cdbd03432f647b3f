"""Tests for core data structures (no external files needed)."""

import pytest

from tui_banner.core.cell import Cell
from tui_banner.core.color import Color, ColorMode, Palette, Preset, parse_hex_color
from tui_banner.core.grid import Grid, Padding


class TestCell:
    """Tests for Cell dataclass."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.fg is None
        assert cell.bg is None
        assert cell.visible is False
        assert cell.is_blank() is True

    def test_ink(self) -> None:
        red = Color.from_rgb(255, 0, 0)
        cell = Cell.ink('#', red)
        assert cell.visible is True
        assert cell.fg == red
        assert cell.is_blank() is False

    def test_cell_copy(self) -> None:
        cell = Cell.ink('X', Color.WHITE)
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell
        copy.char = 'Y'
        assert cell.char == 'X'


class TestGrid:
    """Tests for Grid."""

    def test_dimensions(self) -> None:
        grid = Grid(3, 4)
        assert grid.height == 3
        assert grid.width == 4
        assert all(cell.is_blank() for _, _, cell in grid.cells())

    def test_zero_height_has_zero_width(self) -> None:
        assert Grid(0, 10).width == 0

    def test_out_of_bounds_read(self) -> None:
        grid = Grid(2, 2)
        assert grid.cell(-1, 0) is None
        assert grid.cell(0, -1) is None
        assert grid.cell(2, 0) is None
        assert grid[0, 2] is None
        assert grid[1, 1] is not None

    def test_out_of_bounds_write_ignored(self) -> None:
        grid = Grid(1, 1)
        grid.set(5, 5, Cell.ink('X'))
        grid[-1, 0] = Cell.ink('X')
        assert grid.text_rows() == [' ']

    def test_from_char_rows_pads(self) -> None:
        grid = Grid.from_char_rows(["ab", "c"])
        assert grid.width == 2
        assert grid.text_rows() == ["ab", "c "]
        assert grid[1, 1].visible is False

    def test_spaces_are_invisible(self) -> None:
        grid = Grid.from_char_rows(["a b"])
        assert [cell.visible for cell in next(grid.rows())] == [True, False, True]

    def test_put_char(self) -> None:
        grid = Grid(1, 2)
        grid.put_char(0, 1, 'Z')
        grid.put_char(0, 9, 'Z')
        assert grid.text_rows() == [" Z"]

    def test_copy_is_deep(self) -> None:
        grid = Grid.from_char_rows(["ab"])
        copy = grid.copy()
        assert copy == grid
        copy[0, 0].char = 'z'
        assert grid.text_rows() == ["ab"]

    def test_blit_only_visible(self) -> None:
        base = Grid.from_char_rows(["xxx"])
        base.blit(Grid.from_char_rows(["a b"]), 0, 0)
        assert base.text_rows() == ["axb"]

    def test_blit_clips(self) -> None:
        base = Grid(1, 2)
        base.blit(Grid.from_char_rows(["abc"]), 0, 1)
        assert base.text_rows() == [" a"]

    def test_trim_vertical(self) -> None:
        grid = Grid.from_char_rows(["   ", " a ", "   ", " b ", "   "])
        trimmed = grid.trim_vertical()
        assert trimmed.text_rows() == [" a ", "   ", " b "]
        assert trimmed.width == 3

    def test_trim_vertical_all_blank(self) -> None:
        trimmed = Grid(3, 3).trim_vertical()
        assert trimmed.height == 0
        assert trimmed.width == 0


class TestPadding:
    """Tests for Padding."""

    def test_coerce_int(self) -> None:
        assert Padding.coerce(2) == Padding(2, 2, 2, 2)

    def test_coerce_tuple_clamps(self) -> None:
        assert Padding.coerce((1, -2, 3, 4)) == Padding(1, 0, 3, 4)

    def test_coerce_passthrough(self) -> None:
        padding = Padding(1, 2, 3, 4)
        assert Padding.coerce(padding) is padding

    def test_negative_sides_clamp(self) -> None:
        assert Padding(-1, 2, -3, 4) == Padding(0, 2, 0, 4)
        assert Padding.uniform(-2) == Padding()


class TestColor:
    """Tests for Color."""

    def test_rgb(self) -> None:
        c = Color.from_rgb(255, 128, 0)
        assert c.is_rgb
        assert c.rgb == (255, 128, 0)
        assert c.hex == "#FF8000"

    def test_invalid_rgb(self) -> None:
        with pytest.raises(ValueError):
            Color.from_rgb(256, 0, 0)

    def test_invalid_256(self) -> None:
        with pytest.raises(ValueError):
            Color.from_256(300)

    def test_from_hex(self) -> None:
        assert Color.from_hex("#00E5FF") == Color.from_rgb(0, 229, 255)
        assert Color.from_hex("00e5ff") == Color.from_rgb(0, 229, 255)
        with pytest.raises(ValueError):
            Color.from_hex("#12345")

    @pytest.mark.parametrize("text", ["", "#12", "#GG0000", "#1234567", "red"])
    def test_parse_hex_rejects(self, text: str) -> None:
        assert parse_hex_color(text) is None

    def test_lerp_identities(self) -> None:
        a = Color.from_rgb(10, 20, 30)
        b = Color.from_rgb(200, 100, 0)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b
        assert a.lerp(b, 5.0) == b
        assert a.lerp(b, -1.0) == a

    def test_lerp_rounds_half_up(self) -> None:
        mid = Color.BLACK.lerp(Color.WHITE, 0.5)
        assert mid.rgb == (128, 128, 128)

    def test_lerp_indexed_passthrough(self) -> None:
        indexed = Color.from_256(42)
        assert indexed.lerp(Color.WHITE, 0.5) == indexed
        assert Color.WHITE.lerp(indexed, 0.5) == Color.WHITE

    def test_darken(self) -> None:
        assert Color.from_rgb(255, 0, 100).darken(0.5).rgb == (128, 0, 50)
        assert Color.WHITE.darken(1.0) == Color.BLACK
        assert Color.WHITE.darken(0.0) == Color.WHITE

    def test_brighten(self) -> None:
        assert Color.BLACK.brighten(1.0) == Color.WHITE
        assert Color.from_rgb(0, 0, 254).brighten(0.5).rgb == (128, 128, 255)

    def test_sgr(self) -> None:
        assert Color.from_rgb(1, 2, 3).to_sgr_fg() == "38;2;1;2;3"
        assert Color.from_256(196).to_sgr_fg() == "38;5;196"
        assert Color.from_256(196).to_sgr_bg() == "48;5;196"

    def test_color_mode_values(self) -> None:
        assert ColorMode("truecolor") is ColorMode.TRUE_COLOR
        assert ColorMode("none") is ColorMode.NO_COLOR


class TestPalette:
    """Tests for Palette."""

    def test_from_hex_drops_invalid(self) -> None:
        palette = Palette.from_hex(["#FF0000", "nope", "#0000FF"])
        assert len(palette) == 2
        assert list(palette) == [Color.from_rgb(255, 0, 0), Color.from_rgb(0, 0, 255)]

    def test_empty(self) -> None:
        assert not Palette.from_hex(["bad"])

    @pytest.mark.parametrize("preset", list(Preset))
    def test_presets_are_valid(self, preset: Preset) -> None:
        palette = Palette.preset(preset)
        assert len(palette) == len(preset.value)
        assert len(palette) >= 2

    def test_equality(self) -> None:
        assert Palette.preset(Preset.MATRIX) == Palette.preset(Preset.MATRIX)
        assert Palette.preset(Preset.MATRIX) != Palette.preset(Preset.CHROME)
