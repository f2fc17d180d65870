"""
Core grid model and search engine
"""

from .cell import CellType
from .coordinate import Coordinate, Direction, Heuristic
from .cost_cache import CostCache, RelaxationPolicy, RelaxOutcome, SearchNode
from .frontier import FrontierMode, PriorityFrontier, StackFrontier
from .grid import Grid
from .map_loader import load_grid, load_grid_from_text, read_grid
from .maze import Maze, MazeStatus
from .path import Path, reconstruct_path
from .search import SearchEngine, SearchResult, SearchSettings, SearchState, search

__all__ = [
    'CellType',
    'Coordinate',
    'Direction',
    'Heuristic',
    'CostCache',
    'RelaxationPolicy',
    'RelaxOutcome',
    'SearchNode',
    'FrontierMode',
    'PriorityFrontier',
    'StackFrontier',
    'Grid',
    'load_grid',
    'load_grid_from_text',
    'read_grid',
    'Maze',
    'MazeStatus',
    'Path',
    'reconstruct_path',
    'SearchEngine',
    'SearchResult',
    'SearchSettings',
    'SearchState',
    'search',
]
