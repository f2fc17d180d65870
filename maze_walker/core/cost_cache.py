"""
Cost cache: the per-coordinate store of search nodes and the relaxation rule
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional

from .coordinate import Coordinate


@dataclass
class SearchNode:
    """Best-known search state for one coordinate

    Attributes:
        coordinate: Grid position this node describes
        g: Distance from the origin along the parent chain
        h: Heuristic estimate to the target
        parent: Previous coordinate on the route (the origin points to itself)
        open: True while the node may still be relaxed, False once settled
    """
    coordinate: Coordinate
    g: int
    h: int
    parent: Coordinate
    open: bool = True

    @property
    def cost(self) -> int:
        return self.g + self.h

    def is_root(self) -> bool:
        return self.parent == self.coordinate


class RelaxationPolicy(Enum):
    """When an open node adopts a newly found distance"""
    REFERENCE = 'reference'  # existing g < candidate g
    SHORTEST = 'shortest'    # existing g > candidate g

    @classmethod
    def from_string(cls, name: str) -> 'RelaxationPolicy':
        """Convert string to RelaxationPolicy enum"""
        name_map = {e.value: e for e in cls}
        if name not in name_map:
            raise ValueError(f"Invalid relaxation policy: {name}. Must be one of: {', '.join(name_map.keys())}")
        return name_map[name]

    def should_update(self, existing_g: int, next_g: int) -> bool:
        if self is RelaxationPolicy.SHORTEST:
            return existing_g > next_g
        return existing_g < next_g


class RelaxOutcome(Enum):
    CREATED = 'created'
    UPDATED = 'updated'
    UNCHANGED = 'unchanged'


class CostCache:
    """Keyed store mapping each discovered coordinate to its single SearchNode"""

    def __init__(self):
        self._nodes: Dict[Coordinate, SearchNode] = {}

    def __contains__(self, c: Coordinate) -> bool:
        return c in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes.values())

    def get(self, c: Coordinate) -> Optional[SearchNode]:
        return self._nodes.get(c)

    def upsert(self, node: SearchNode) -> None:
        """Insert or replace the node for node.coordinate"""
        self._nodes[node.coordinate] = node

    def settle(self, c: Coordinate) -> SearchNode:
        """Close the node at c; raises KeyError if c was never discovered"""
        node = self._nodes[c]
        node.open = False
        return node

    def relax(
        self,
        candidate: Coordinate,
        next_g: int,
        parent: Coordinate,
        h: int,
        policy: RelaxationPolicy = RelaxationPolicy.REFERENCE
    ) -> RelaxOutcome:
        """
        Offer a tentative distance for candidate, reached from parent.

        Unknown coordinates get a fresh open node. Open nodes adopt next_g and
        the new parent when the policy says so. Closed nodes are final.

        Returns:
            What happened to the cached node
        """
        node = self._nodes.get(candidate)
        if node is None:
            self._nodes[candidate] = SearchNode(
                coordinate=candidate,
                g=next_g,
                h=h,
                parent=parent,
                open=True
            )
            return RelaxOutcome.CREATED

        if node.open and policy.should_update(node.g, next_g):
            node.g = next_g
            node.parent = parent
            return RelaxOutcome.UPDATED

        return RelaxOutcome.UNCHANGED

    def settle_target(self, target: Coordinate, next_g: int, parent: Coordinate) -> SearchNode:
        """Create or overwrite the target's node as closed with h=0"""
        node = SearchNode(
            coordinate=target,
            g=next_g,
            h=0,
            parent=parent,
            open=False
        )
        self._nodes[target] = node
        return node
