"""Grid data structures for GLYPHFIELD."""

from .cell import Cell, CellState, VALID_TRANSITIONS
from .dirty import DirtySet, GridCoord
from .store import GridStore, grid_dimensions
from .tracker import PointerTracker, OUTSIDE

__all__ = [
    "Cell",
    "CellState",
    "VALID_TRANSITIONS",
    "DirtySet",
    "GridCoord",
    "GridStore",
    "grid_dimensions",
    "PointerTracker",
    "OUTSIDE",
]
