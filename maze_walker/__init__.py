"""
Maze Walker - grid maze search with path overlay rendering
"""

from importlib.metadata import version, PackageNotFoundError

from .core.config import WalkerConfig
from .core.maze import Maze
from .core.map_loader import read_grid

try:
    __version__ = version("maze-walker")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = ["Maze", "WalkerConfig", "read_grid"]
