"""
Frontier containers holding coordinates pending expansion
"""

import heapq
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Tuple

from .coordinate import Coordinate
from .cost_cache import SearchNode


class FrontierMode(Enum):
    """Expansion order of the frontier"""
    STACK = 'stack'        # last in, first out
    PRIORITY = 'priority'  # lowest g + h first

    @classmethod
    def from_string(cls, name: str) -> 'FrontierMode':
        """Convert string to FrontierMode enum"""
        name_map = {e.value: e for e in cls}
        if name not in name_map:
            raise ValueError(f"Invalid frontier mode: {name}. Must be one of: {', '.join(name_map.keys())}")
        return name_map[name]

    def create(self) -> 'Frontier':
        if self is FrontierMode.PRIORITY:
            return PriorityFrontier()
        return StackFrontier()


class Frontier(ABC):
    """Interface shared by both frontier kinds"""

    requeue_on_update = False

    @abstractmethod
    def push(self, coordinate: Coordinate, node: SearchNode) -> None:
        """Add a coordinate whose node was created or improved"""
        pass

    @abstractmethod
    def pop(self) -> Coordinate:
        """Remove and return the next coordinate to expand"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __bool__(self) -> bool:
        return len(self) > 0


class StackFrontier(Frontier):
    """
    LIFO frontier.

    Nodes carry g + h but it plays no part in the order; the most recently
    discovered coordinate is expanded next.
    """

    def __init__(self):
        self._items: List[Coordinate] = []

    def push(self, coordinate: Coordinate, node: SearchNode) -> None:
        self._items.append(coordinate)

    def pop(self) -> Coordinate:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class PriorityFrontier(Frontier):
    """
    Min-heap on (g + h, insertion order).

    A coordinate may be pushed again after its node improves; the engine
    skips entries whose node is already closed.
    """

    requeue_on_update = True

    def __init__(self):
        self._heap: List[Tuple[int, int, Coordinate]] = []
        self._seq = 0

    def push(self, coordinate: Coordinate, node: SearchNode) -> None:
        self._seq += 1
        heapq.heappush(self._heap, (node.cost, self._seq, coordinate))

    def pop(self) -> Coordinate:
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)
