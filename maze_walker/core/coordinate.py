"""
Grid coordinates, unit directions and distance heuristics
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple


@dataclass(frozen=True)
class Coordinate:
    """A (row, col) position on the grid. Both axes are non-negative."""
    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Coordinate axes must be non-negative, got ({self.row}, {self.col})")

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def to_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def is_contained_in(self, bounds: 'Coordinate') -> bool:
        """
        Check containment against a bounding coordinate.

        Strict less-than on both axes; the lower bound is implicit.
        """
        return self.row < bounds.row and self.col < bounds.col

    def displace(self, direction: 'Direction') -> Optional['Coordinate']:
        """Move one unit in a direction, or None if that leaves the non-negative quadrant"""
        d_row, d_col = direction.value
        row = self.row + d_row
        col = self.col + d_col
        if row < 0 or col < 0:
            return None
        return Coordinate(row, col)

    def neighbors(self) -> List['Coordinate']:
        """Axis-aligned neighbours in Direction order (up, down, left, right)"""
        around = [self.displace(direction) for direction in Direction]
        return [c for c in around if c is not None]

    def squared_distance(self, other: 'Coordinate') -> int:
        d_row = self.row - other.row
        d_col = self.col - other.col
        return d_row * d_row + d_col * d_col

    def manhattan_distance(self, other: 'Coordinate') -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)


class Direction(Enum):
    """Unit vectors for 4-connected movement"""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Heuristic(Enum):
    """Distance estimates from a coordinate to the target"""
    SQUARED_EUCLIDEAN = 'squared_euclidean'
    MANHATTAN = 'manhattan'

    @classmethod
    def from_string(cls, name: str) -> 'Heuristic':
        """Convert string to Heuristic enum"""
        name_map = {e.value: e for e in cls}
        if name not in name_map:
            raise ValueError(f"Invalid heuristic: {name}. Must be one of: {', '.join(name_map.keys())}")
        return name_map[name]

    def bind(self, target: Coordinate) -> Callable[[Coordinate], int]:
        """Return a one-argument estimate function towards a fixed target"""
        if self is Heuristic.MANHATTAN:
            return target.manhattan_distance
        return target.squared_distance
