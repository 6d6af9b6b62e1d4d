"""Grid store: one Cell per (row, col), sized to the viewport."""

from typing import Iterator
import math
import logging

from glyphfield.animation.color import Color
from glyphfield.animation.glyphs import GlyphSource
from glyphfield.grid.cell import Cell, CellState
from glyphfield.grid.dirty import GridCoord

logger = logging.getLogger(__name__)


def grid_dimensions(width: float, height: float, cell_size: int) -> tuple[int, int]:
    """Rows and columns needed to cover a viewport.

    One extra row and column of margin keeps the right and bottom edges
    covered when the viewport is not a multiple of the cell size.

    Returns:
        Tuple of (rows, cols)
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    cols = math.ceil(width / cell_size) + 1
    rows = math.ceil(height / cell_size) + 1
    return max(rows, 0), max(cols, 0)


class GridStore:
    """2D array of cells.

    The store is never resized in place. A viewport change builds a new
    store with fresh idle cells.
    """

    def __init__(self, rows: int, cols: int, glyphs: GlyphSource, base_color: Color) -> None:
        self._rows = rows
        self._cols = cols
        self._cells: list[list[Cell]] = [
            [Cell(symbol=glyphs.next(), color=base_color) for _ in range(cols)]
            for _ in range(rows)
        ]
        logger.debug(f"GridStore built: {rows}x{cols}")

    @classmethod
    def for_viewport(
        cls,
        width: float,
        height: float,
        cell_size: int,
        glyphs: GlyphSource,
        base_color: Color,
    ) -> "GridStore":
        """Build a store covering a ``width`` x ``height`` viewport."""
        rows, cols = grid_dimensions(width, height, cell_size)
        return cls(rows, cols, glyphs, base_color)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        return self._rows * self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col).

        Raises:
            IndexError: If the coordinate is outside the grid
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self._rows}x{self._cols} grid")
        return self._cells[row][col]

    def __getitem__(self, coord: tuple[int, int]) -> Cell:
        row, col = coord
        return self.cell(row, col)

    def neighborhood(self, center: GridCoord, radius: int = 1) -> Iterator[GridCoord]:
        """Yield in-bounds coordinates of the square block around ``center``.

        Rows are visited top to bottom, columns left to right. Offsets that
        fall outside the grid are skipped.
        """
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                row = center.row + dr
                col = center.col + dc
                if self.in_bounds(row, col):
                    yield GridCoord(row, col)

    def count(self, state: CellState) -> int:
        """Number of cells currently in ``state``."""
        return sum(1 for _, cell in self if cell.state is state)

    def __iter__(self) -> Iterator[tuple[GridCoord, Cell]]:
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield GridCoord(r, c), cell
