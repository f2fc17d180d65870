"""
Maze: a loaded grid plus its solve status and stored path
"""

from enum import Enum
from typing import Optional

from .exceptions import AlreadySolvedError, PathNotFoundError
from .grid import Grid
from .path import Path
from .search import SearchEngine, SearchResult, SearchSettings


class MazeStatus(Enum):
    UNSOLVED = 'unsolved'
    SOLVED = 'solved'


class Maze:
    """
    Wraps a Grid and remembers the outcome of its single successful search.

    A maze moves from UNSOLVED to SOLVED once; later solve() calls fail
    without touching the stored path.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.status = MazeStatus.UNSOLVED
        self.path: Optional[Path] = None
        self.last_result: Optional[SearchResult] = None
        self.settings: Optional[SearchSettings] = None

    @property
    def is_solved(self) -> bool:
        return self.status is MazeStatus.SOLVED

    def solve(self, settings: Optional[SearchSettings] = None) -> Path:
        """
        Search for a path and store it

        Args:
            settings: Search settings (defaults to the reference behaviour)

        Returns:
            The stored Path, target first

        Raises:
            AlreadySolvedError: If this maze already holds a path
            PathNotFoundError: If the target is unreachable; status stays UNSOLVED
        """
        if self.is_solved:
            raise AlreadySolvedError()

        self.settings = settings or SearchSettings()
        result = SearchEngine(self.grid, self.settings).run()
        self.last_result = result
        if not result.found:
            raise PathNotFoundError()

        self.path = result.path
        self.status = MazeStatus.SOLVED
        return self.path
