"""
Grid model for maze search.

Holds the decoded cell rows together with the origin and target recorded
at load time, and answers bounds and traversability lookups.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .cell import CellType
from .coordinate import Coordinate


@dataclass(frozen=True)
class Grid:
    """
    Immutable 2D cell array.

    Bounds come from the row count and the first row's length. Later rows
    are not required to match that length unless the loader is asked to
    enforce it.
    """
    rows: Tuple[Tuple[CellType, ...], ...]
    origin: Coordinate
    target: Coordinate

    @property
    def bounds(self) -> Coordinate:
        if not self.rows:
            return Coordinate(0, 0)
        return Coordinate(len(self.rows), len(self.rows[0]))

    @property
    def cell_count(self) -> int:
        """Number of cells actually stored"""
        return sum(len(row) for row in self.rows)

    def cell_at(self, c: Coordinate) -> Optional[CellType]:
        """Return the stored cell, or None outside the bounds (or past a short row)"""
        if not c.is_contained_in(self.bounds):
            return None
        row = self.rows[c.row]
        if c.col >= len(row):
            return None
        return row[c.col]

    @staticmethod
    def is_traversable(cell: Optional[CellType]) -> bool:
        return cell is not None and cell.can_traverse()

    def traversable_neighbors(self, c: Coordinate) -> List[Coordinate]:
        """In-bounds, traversable axis neighbours of c"""
        return [n for n in c.neighbors() if self.is_traversable(self.cell_at(n))]

    def is_rectangular(self) -> bool:
        width = self.bounds.col
        return all(len(row) == width for row in self.rows)
