"""
Path reconstruction from the cost cache's parent links
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Set, Tuple

from .coordinate import Coordinate
from .cost_cache import CostCache
from .exceptions import PathNotFoundError


@dataclass
class Path:
    """Route from target back to origin"""
    coordinates: List[Coordinate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __getitem__(self, index):
        return self.coordinates[index]

    def __str__(self) -> str:
        return "".join(f"{c}\n" for c in self.coordinates)

    def to_coordinate_set(self) -> Set[Coordinate]:
        return set(self.coordinates)

    def to_list(self) -> List[Tuple[int, int]]:
        return [c.to_tuple() for c in self.coordinates]


def reconstruct_path(cache: CostCache, target: Coordinate) -> Path:
    """
    Walk parent links from the target until the origin's self-loop.

    Args:
        cache: Cost cache of a finished search
        target: Coordinate the walk starts from

    Returns:
        Path in target-to-origin order; the origin appears once at the end

    Raises:
        PathNotFoundError: If a node on the walk is missing, or the walk is
            longer than the number of cached nodes
    """
    path = Path([target])
    current = target
    while True:
        node = cache.get(current)
        if node is None:
            raise PathNotFoundError()
        if node.is_root():
            break
        if len(path) >= len(cache):
            raise PathNotFoundError()
        current = node.parent
        path.coordinates.append(current)
    return path
