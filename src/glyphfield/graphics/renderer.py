"""Grid renderer: draws cells onto a drawing surface."""

from glyphfield.grid.dirty import GridCoord
from glyphfield.grid.store import GridStore
from glyphfield.surface.base import Surface


class GridRenderer:
    """Draws single cells or the whole grid.

    Per-frame work goes through :meth:`draw_cell` only. :meth:`full_draw`
    repaints everything and is reserved for grid (re)builds.
    """

    def __init__(self, surface: Surface, cell_size: int, font_size: int) -> None:
        self.surface = surface
        self.cell_size = cell_size
        self.font_size = font_size
        self.cells_drawn = 0
        self.full_draws = 0

    def cell_rect(self, coord: GridCoord) -> tuple[int, int, int, int]:
        """Client-space rectangle (x, y, w, h) of a cell."""
        return (
            coord.col * self.cell_size,
            coord.row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def draw_cell(self, store: GridStore, coord: GridCoord) -> None:
        """Clear the cell's rectangle, then draw its glyph centred in it."""
        cell = store[coord]
        x, y, w, h = self.cell_rect(coord)
        self.surface.clear_rect(x, y, w, h)
        self.surface.fill_text(
            cell.symbol,
            x + w / 2,
            y + h / 2,
            cell.color,
            self.font_size,
        )
        self.cells_drawn += 1

    def full_draw(self, store: GridStore) -> None:
        """Clear the surface and draw every cell."""
        self.surface.clear()
        for coord, _ in store:
            self.draw_cell(store, coord)
        self.full_draws += 1
