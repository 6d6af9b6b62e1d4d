"""Dirty set of grid coordinates with an active animation."""

from typing import Iterable, Iterator, NamedTuple


class GridCoord(NamedTuple):
    """A (row, col) grid position."""

    row: int
    col: int


class DirtySet:
    """Coordinates visited every frame.

    A coordinate is present exactly while its cell is not idle. Callers
    iterate a :meth:`snapshot` and remove entries with :meth:`discard_all`
    after the pass, never during it.
    """

    def __init__(self) -> None:
        self._coords: set[GridCoord] = set()

    def add(self, coord: GridCoord) -> bool:
        """Mark a coordinate dirty.

        Returns:
            True if the coordinate was not already present
        """
        if coord in self._coords:
            return False
        self._coords.add(coord)
        return True

    def discard(self, coord: GridCoord) -> None:
        self._coords.discard(coord)

    def discard_all(self, coords: Iterable[GridCoord]) -> int:
        """Remove many coordinates; returns how many were present."""
        removed = 0
        for coord in coords:
            if coord in self._coords:
                self._coords.remove(coord)
                removed += 1
        return removed

    def snapshot(self) -> tuple[GridCoord, ...]:
        """Copy of the current contents, safe to iterate while mutating."""
        return tuple(self._coords)

    def clear(self) -> None:
        self._coords.clear()

    def __contains__(self, coord: object) -> bool:
        return coord in self._coords

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[GridCoord]:
        return iter(self.snapshot())
