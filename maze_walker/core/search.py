"""
Frontier-driven search from the grid's origin to its target.

The engine seeds the cost cache with the origin, then repeatedly pops a
coordinate from the frontier, settles it, and offers each traversable
neighbour one more step of distance. The search stops as soon as the
target shows up as a neighbour, or when the frontier runs dry.

Defaults:
- Frontier: LIFO stack. g + h is computed but not used for ordering.
- Relaxation: an open node adopts the candidate when its cached g is
  smaller than the candidate's.
- Heuristic: squared Euclidean distance to the target.

Each of these can be switched through SearchSettings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .coordinate import Heuristic
from .cost_cache import CostCache, RelaxationPolicy, RelaxOutcome, SearchNode
from .exceptions import PathNotFoundError
from .frontier import FrontierMode
from .grid import Grid
from .path import Path, reconstruct_path


class SearchState(Enum):
    RUNNING = 'running'
    FOUND = 'found'
    EXHAUSTED = 'exhausted'


@dataclass(frozen=True)
class SearchSettings:
    """Knobs for one search run"""
    frontier: FrontierMode = FrontierMode.STACK
    relaxation: RelaxationPolicy = RelaxationPolicy.REFERENCE
    heuristic: Heuristic = Heuristic.SQUARED_EUCLIDEAN

    def to_dict(self) -> dict:
        return {
            'frontier': self.frontier.value,
            'relaxation': self.relaxation.value,
            'heuristic': self.heuristic.value,
        }


@dataclass
class SearchResult:
    """Outcome of a finished search"""
    state: SearchState
    cache: CostCache
    expansions: int = 0
    path: Optional[Path] = field(default=None)

    @property
    def found(self) -> bool:
        return self.state is SearchState.FOUND


class SearchEngine:
    """Runs a single search over a grid"""

    def __init__(self, grid: Grid, settings: Optional[SearchSettings] = None):
        self.grid = grid
        self.settings = settings or SearchSettings()

    def run(self) -> SearchResult:
        """
        Drive expansion until the target is settled or the frontier is empty.

        Every coordinate is settled at most once, so the number of expansions
        never exceeds the number of grid cells.

        Returns:
            SearchResult in state FOUND (with path) or EXHAUSTED (without)
        """
        grid = self.grid
        policy = self.settings.relaxation
        estimate = self.settings.heuristic.bind(grid.target)

        cache = CostCache()
        frontier = self.settings.frontier.create()

        origin_node = SearchNode(
            coordinate=grid.origin,
            g=0,
            h=estimate(grid.origin),
            parent=grid.origin,
            open=True
        )
        cache.upsert(origin_node)
        frontier.push(grid.origin, origin_node)

        state = SearchState.RUNNING
        expansions = 0

        while state is SearchState.RUNNING:
            if not frontier:
                state = SearchState.EXHAUSTED
                break

            p = frontier.pop()
            current = cache.get(p)
            if not current.open:
                # Stale heap entry for a coordinate settled earlier
                continue

            cache.settle(p)
            expansions += 1
            next_g = current.g + 1

            for neighbor in grid.traversable_neighbors(p):
                if grid.cell_at(neighbor).is_target():
                    cache.settle_target(neighbor, next_g, p)
                    state = SearchState.FOUND
                    break

                outcome = cache.relax(neighbor, next_g, p, estimate(neighbor), policy)
                if outcome is RelaxOutcome.CREATED or (
                    outcome is RelaxOutcome.UPDATED and frontier.requeue_on_update
                ):
                    frontier.push(neighbor, cache.get(neighbor))

        result = SearchResult(state=state, cache=cache, expansions=expansions)
        if result.found:
            result.path = reconstruct_path(cache, grid.target)
        return result


def search(grid: Grid, settings: Optional[SearchSettings] = None) -> Path:
    """
    Find a route from origin to target.

    Raises:
        PathNotFoundError: If the frontier is exhausted before the target is reached
    """
    result = SearchEngine(grid, settings).run()
    if not result.found:
        raise PathNotFoundError()
    return result.path
