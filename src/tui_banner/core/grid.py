"""Grid - rectangular 2D buffer of cells, plus layout primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from tui_banner.core.cell import Cell


class Align(Enum):
    """Horizontal alignment within a target width."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Padding:
    """Blank cells added around a grid. Negative sides clamp to 0."""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        for side in ("top", "right", "bottom", "left"):
            object.__setattr__(self, side, max(0, getattr(self, side)))

    @classmethod
    def uniform(cls, value: int) -> Padding:
        return cls(value, value, value, value)

    @classmethod
    def coerce(cls, value: Padding | int | tuple[int, int, int, int]) -> Padding:
        """Accept an int (uniform), a (top, right, bottom, left) tuple, or Padding."""
        if isinstance(value, Padding):
            return value
        if isinstance(value, int):
            return cls.uniform(value)
        top, right, bottom, left = value
        return cls(top, right, bottom, left)


class Grid:
    """
    A rectangular, row-major matrix of Cells.

    Every row has the same width. Out-of-range reads return None and
    out-of-range writes are ignored, so effects can probe neighbors
    without bounds checks of their own.
    """

    def __init__(self, height: int = 0, width: int = 0):
        height = max(0, height)
        width = max(0, width) if height else 0
        self._buffer: list[list[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]
        self._width = width

    @classmethod
    def from_char_rows(cls, rows: Iterable[Iterable[str]]) -> Grid:
        """
        Build a grid from raw character rows.

        Non-space characters become visible ink. Short rows are padded
        with invisible spaces up to the widest row.
        """
        char_rows = [list(row) for row in rows]
        width = max((len(row) for row in char_rows), default=0)
        grid = cls()
        grid._width = width if char_rows else 0
        grid._buffer = [
            [Cell(char=ch, visible=ch != ' ') for ch in row]
            + [Cell() for _ in range(width - len(row))]
            for row in char_rows
        ]
        return grid

    @property
    def height(self) -> int:
        return len(self._buffer)

    @property
    def width(self) -> int:
        return self._width

    def cell(self, row: int, col: int) -> Cell | None:
        """Get the cell at (row, col), or None when out of bounds."""
        if 0 <= row < self.height and 0 <= col < self._width:
            return self._buffer[row][col]
        return None

    def set(self, row: int, col: int, cell: Cell) -> None:
        """Set the cell at (row, col); out-of-bounds writes are dropped."""
        if 0 <= row < self.height and 0 <= col < self._width:
            self._buffer[row][col] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell | None:
        """Get cell using indexing: grid[row, col]."""
        row, col = pos
        return self.cell(row, col)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        row, col = pos
        self.set(row, col, cell)

    def put_char(self, row: int, col: int, char: str) -> None:
        """Write a character, marking the cell visible unless it is a space."""
        cell = self.cell(row, col)
        if cell is not None:
            cell.char = char
            cell.visible = char != ' '

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (row, col, cell) tuples."""
        for r, row in enumerate(self._buffer):
            for c, cell in enumerate(row):
                yield r, c, cell

    def visible_cells(self) -> Iterator[tuple[int, int, Cell]]:
        for r, c, cell in self.cells():
            if cell.visible:
                yield r, c, cell

    def copy(self) -> Grid:
        """Deep copy; the result shares no cells with this grid."""
        out = Grid()
        out._width = self._width
        out._buffer = [[cell.copy() for cell in row] for row in self._buffer]
        return out

    def blit(self, other: Grid, top: int, left: int) -> None:
        """Copy the visible cells of ``other`` onto this grid at an offset."""
        for r, c, cell in other.visible_cells():
            self.set(top + r, left + c, cell.copy())

    def text_rows(self) -> list[str]:
        """Rows as plain strings (invisible cells as spaces)."""
        return [
            ''.join(cell.char if cell.visible else ' ' for cell in row)
            for row in self._buffer
        ]

    def trim_vertical(self) -> Grid:
        """Return a new grid with fully blank rows removed from top and bottom."""
        top = 0
        bottom = self.height
        while top < bottom and not _row_has_visible(self._buffer[top]):
            top += 1
        while bottom > top and not _row_has_visible(self._buffer[bottom - 1]):
            bottom -= 1

        out = Grid()
        out._buffer = [[cell.copy() for cell in row] for row in self._buffer[top:bottom]]
        out._width = self._width if out._buffer else 0
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._width == other._width and self._buffer == other._buffer

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"


def _row_has_visible(row: list[Cell]) -> bool:
    return any(cell.visible for cell in row)
