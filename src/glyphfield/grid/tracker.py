"""Pointer tracking: maps pointer positions to grid cells."""

import math
import logging
from typing import Optional

from glyphfield.grid.dirty import GridCoord

logger = logging.getLogger(__name__)

# Tracked cell while the pointer is outside the surface
OUTSIDE = GridCoord(-1, -1)


class PointerTracker:
    """
    Follows the pointer at cell granularity.

    Pointer moves that stay inside the tracked cell are coalesced, so
    sub-cell jitter never re-activates a neighbourhood.
    """

    def __init__(self, cell_size: int) -> None:
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self._cell_size = cell_size
        self._current = OUTSIDE

    @property
    def current(self) -> GridCoord:
        """The tracked cell, or ``OUTSIDE``."""
        return self._current

    @property
    def is_outside(self) -> bool:
        return self._current == OUTSIDE

    def locate(self, x: float, y: float) -> GridCoord:
        """Convert surface-relative pointer coordinates to a grid cell."""
        return GridCoord(
            math.floor(y / self._cell_size),
            math.floor(x / self._cell_size),
        )

    def move(self, x: float, y: float) -> Optional[GridCoord]:
        """
        Record a pointer move.

        Returns:
            The newly entered cell, or None if the pointer is still in the
            tracked cell
        """
        coord = self.locate(x, y)
        if coord == self._current:
            return None
        self._current = coord
        return coord

    def leave(self) -> None:
        """Pointer left the surface; in-flight animations are unaffected."""
        self._current = OUTSIDE
        logger.debug("Pointer left surface")

    def reset(self) -> None:
        self._current = OUTSIDE
