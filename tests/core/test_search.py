"""
Tests for the search engine and path reconstruction, including
property-based tests using Hypothesis
"""

import pytest
from hypothesis import given, settings, strategies as st

from maze_walker.core.coordinate import Coordinate, Heuristic
from maze_walker.core.cost_cache import CostCache, RelaxationPolicy, SearchNode
from maze_walker.core.exceptions import PathNotFoundError
from maze_walker.core.frontier import FrontierMode
from maze_walker.core.map_loader import load_grid_from_text
from maze_walker.core.path import Path, reconstruct_path
from maze_walker.core.search import SearchEngine, SearchSettings, SearchState, search
from tests.conftest import assert_valid_path, coords, is_reachable


ALL_SETTINGS = [
    SearchSettings(frontier=frontier, relaxation=relaxation, heuristic=heuristic)
    for frontier in FrontierMode
    for relaxation in RelaxationPolicy
    for heuristic in Heuristic
]


class TestSearchEngine:
    """Test suite for the default (stack, reference, squared Euclidean) search"""

    def test_simple_map(self, simple_grid):
        result = SearchEngine(simple_grid).run()

        assert result.state is SearchState.FOUND
        assert len(result.path) == 3
        # Stack frontier expands the right-hand floor cell first
        assert list(result.path) == coords((1, 2), (2, 2), (2, 1))
        assert result.expansions == 2

    def test_medium_map_route(self, medium_grid):
        result = SearchEngine(medium_grid).run()

        assert result.found
        assert list(result.path) == coords(
            (2, 5), (3, 5), (3, 4), (3, 3), (2, 3), (1, 3), (1, 2), (1, 1)
        )
        assert result.expansions == 7

    def test_target_node_is_settled_with_zero_heuristic(self, medium_grid):
        result = SearchEngine(medium_grid).run()
        target_node = result.cache.get(medium_grid.target)

        assert target_node.h == 0
        assert target_node.open is False
        assert target_node.g == 7

    def test_origin_node_is_self_rooted(self, simple_grid):
        result = SearchEngine(simple_grid).run()
        origin_node = result.cache.get(simple_grid.origin)

        assert origin_node.is_root()
        assert origin_node.g == 0
        assert origin_node.h == simple_grid.origin.squared_distance(simple_grid.target)
        assert origin_node.open is False

    def test_unexpanded_branch_stays_open(self, medium_grid):
        """The dead-end below the origin is discovered but never expanded"""
        result = SearchEngine(medium_grid).run()
        branch = result.cache.get(Coordinate(2, 1))

        assert branch is not None
        assert branch.open is True

    def test_enclosed_target(self, enclosed_grid):
        result = SearchEngine(enclosed_grid).run()

        assert result.state is SearchState.EXHAUSTED
        assert result.path is None
        assert enclosed_grid.target not in result.cache

    def test_search_raises_when_unreachable(self, enclosed_grid):
        with pytest.raises(PathNotFoundError):
            search(enclosed_grid)

    def test_search_returns_path(self, simple_grid):
        path = search(simple_grid)
        assert path[0] == simple_grid.target
        assert path[-1] == simple_grid.origin

    def test_each_run_uses_a_fresh_cache(self, simple_grid):
        engine = SearchEngine(simple_grid)
        first = engine.run()
        second = engine.run()
        assert first.cache is not second.cache
        assert list(first.path) == list(second.path)


class TestAlternateModes:
    """Test suite for the priority frontier and shortest-path relaxation"""

    def test_priority_frontier_on_simple_map(self, simple_grid):
        """Equal g + h ties break by insertion order, so the upper cell goes first"""
        settings_ = SearchSettings(frontier=FrontierMode.PRIORITY)
        result = SearchEngine(simple_grid, settings_).run()
        assert list(result.path) == coords((1, 2), (1, 1), (2, 1))

    def test_astar_finds_shortest_route_in_open_room(self, open_grid):
        settings_ = SearchSettings(
            frontier=FrontierMode.PRIORITY,
            relaxation=RelaxationPolicy.SHORTEST,
            heuristic=Heuristic.MANHATTAN,
        )
        path = search(open_grid, settings_)

        assert_valid_path(open_grid, path)
        assert len(path) == open_grid.origin.manhattan_distance(open_grid.target) + 1

    @pytest.mark.parametrize('settings_', ALL_SETTINGS, ids=lambda s: '-'.join(s.to_dict().values()))
    def test_every_mode_solves_medium_map(self, medium_grid, settings_):
        path = search(medium_grid, settings_)
        assert_valid_path(medium_grid, path)

    @pytest.mark.parametrize('settings_', ALL_SETTINGS, ids=lambda s: '-'.join(s.to_dict().values()))
    def test_every_mode_reports_enclosed_target(self, enclosed_grid, settings_):
        with pytest.raises(PathNotFoundError):
            search(enclosed_grid, settings_)


class TestReconstructPath:
    """Test suite for parent-link walking"""

    def test_walks_to_self_loop(self):
        cache = CostCache()
        o, m, t = coords((0, 0), (0, 1), (0, 2))
        cache.upsert(SearchNode(coordinate=o, g=0, h=4, parent=o, open=False))
        cache.upsert(SearchNode(coordinate=m, g=1, h=1, parent=o, open=False))
        cache.upsert(SearchNode(coordinate=t, g=2, h=0, parent=m, open=False))

        path = reconstruct_path(cache, t)
        assert list(path) == [t, m, o]
        assert str(path) == "(0, 2)\n(0, 1)\n(0, 0)\n"
        assert path.to_list() == [(0, 2), (0, 1), (0, 0)]

    def test_missing_target_node(self):
        cache = CostCache()
        with pytest.raises(PathNotFoundError):
            reconstruct_path(cache, Coordinate(0, 0))

    def test_broken_parent_chain(self):
        cache = CostCache()
        t = Coordinate(0, 2)
        cache.upsert(SearchNode(coordinate=t, g=2, h=0, parent=Coordinate(0, 1), open=False))
        with pytest.raises(PathNotFoundError):
            reconstruct_path(cache, t)

    def test_parent_cycle_is_rejected(self):
        cache = CostCache()
        a, b = coords((0, 0), (0, 1))
        cache.upsert(SearchNode(coordinate=a, g=1, h=0, parent=b, open=False))
        cache.upsert(SearchNode(coordinate=b, g=1, h=0, parent=a, open=False))
        with pytest.raises(PathNotFoundError):
            reconstruct_path(cache, a)

    def test_coordinate_set(self):
        path = Path(coords((0, 1), (0, 0)))
        assert path.to_coordinate_set() == {Coordinate(0, 1), Coordinate(0, 0)}


# ============================================================================
# Property-based tests
# ============================================================================

@st.composite
def maze_texts(draw):
    """Random maze text with exactly one origin and one target"""
    rows = draw(st.integers(min_value=1, max_value=7))
    cols = draw(st.integers(min_value=2, max_value=7))
    walls = draw(st.lists(st.booleans(), min_size=rows * cols, max_size=rows * cols))
    cells = ['#' if wall else '.' for wall in walls]

    positions = draw(
        st.lists(st.integers(min_value=0, max_value=rows * cols - 1), min_size=2, max_size=2, unique=True)
    )
    cells[positions[0]] = 'o'
    cells[positions[1]] = 'x'

    return "".join(
        "".join(cells[r * cols:(r + 1) * cols]) + "\n" for r in range(rows)
    )


class TestSearchProperties:
    """Property-based tests over random mazes"""

    @given(text=maze_texts(), settings_=st.sampled_from(ALL_SETTINGS))
    @settings(max_examples=200, deadline=None)
    def test_found_exactly_when_reachable(self, text, settings_):
        grid = load_grid_from_text(text)
        result = SearchEngine(grid, settings_).run()

        assert result.found == is_reachable(grid)
        if result.found:
            assert_valid_path(grid, result.path)

    @given(text=maze_texts(), settings_=st.sampled_from(ALL_SETTINGS))
    @settings(max_examples=200, deadline=None)
    def test_expansions_bounded_by_cell_count(self, text, settings_):
        grid = load_grid_from_text(text)
        result = SearchEngine(grid, settings_).run()

        assert result.expansions <= grid.cell_count

    @given(text=maze_texts())
    @settings(max_examples=100, deadline=None)
    def test_every_node_walks_back_to_origin(self, text):
        """Every cached node walks back to the origin through its parents"""
        grid = load_grid_from_text(text)
        result = SearchEngine(grid).run()

        for node in result.cache:
            path = reconstruct_path(result.cache, node.coordinate)
            assert path[-1] == grid.origin
