"""
Shared pytest fixtures and utilities for testing
"""

from collections import deque
from pathlib import Path

import pytest

from maze_walker.core.cell import CellType
from maze_walker.core.coordinate import Coordinate
from maze_walker.core.map_loader import load_grid_from_text


RESOURCES_DIR = Path(__file__).parent / 'resources'


@pytest.fixture
def resources_dir():
    """Directory holding the sample .map files"""
    return RESOURCES_DIR


@pytest.fixture
def simple_map_text():
    """4x4 map: origin at (2, 1), target at (1, 2)"""
    return (
        "####\n"
        "#.x#\n"
        "#o.#\n"
        "####\n"
    )


@pytest.fixture
def medium_map_text():
    """Winding corridor with a dead-end branch below the origin"""
    return (RESOURCES_DIR / 'medium.map').read_text()


@pytest.fixture
def enclosed_map_text():
    """Target walled off from the origin's region"""
    return (RESOURCES_DIR / 'enclosed.map').read_text()


@pytest.fixture
def open_map_text():
    """Wall-free 5x6 room"""
    return (
        "o.....\n"
        "......\n"
        "......\n"
        "......\n"
        ".....x\n"
    )


@pytest.fixture
def simple_grid(simple_map_text):
    return load_grid_from_text(simple_map_text)


@pytest.fixture
def medium_grid(medium_map_text):
    return load_grid_from_text(medium_map_text)


@pytest.fixture
def enclosed_grid(enclosed_map_text):
    return load_grid_from_text(enclosed_map_text)


@pytest.fixture
def open_grid(open_map_text):
    return load_grid_from_text(open_map_text)


# Helper functions for tests

def is_reachable(grid) -> bool:
    """Breadth-first check that the target can be reached from the origin"""
    seen = {grid.origin}
    queue = deque([grid.origin])
    while queue:
        current = queue.popleft()
        for neighbor in grid.traversable_neighbors(current):
            if neighbor == grid.target:
                return True
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return False


def assert_valid_path(grid, path):
    """
    Assert that a path runs target -> origin through adjacent floor cells

    Args:
        grid: Grid the path was computed on
        path: Path returned by the search
    """
    coordinates = list(path)
    assert coordinates[0] == grid.target, f"Path starts at {coordinates[0]}, expected target {grid.target}"
    assert coordinates[-1] == grid.origin, f"Path ends at {coordinates[-1]}, expected origin {grid.origin}"
    assert len(set(coordinates)) == len(coordinates), f"Path revisits a coordinate: {coordinates}"

    for a, b in zip(coordinates, coordinates[1:]):
        assert a.manhattan_distance(b) == 1, f"{a} and {b} are not adjacent"

    for c in coordinates[1:-1]:
        assert grid.cell_at(c) is CellType.FLOOR, f"{c} is not a floor cell"


def coords(*pairs):
    """Build a list of Coordinates from (row, col) pairs"""
    return [Coordinate(row, col) for row, col in pairs]
