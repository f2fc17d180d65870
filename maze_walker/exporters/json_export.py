"""
Export a maze solution to JSON format
"""

import json
import logging
from typing import Any, Dict, Optional

from ..core.exceptions import FileExportError
from ..core.maze import Maze
from ..core.search import SearchSettings
from .utils import write_export

logger = logging.getLogger(__name__)


def build_solution_dict(maze: Maze, settings: Optional[SearchSettings] = None) -> Dict[str, Any]:
    """
    Describe a maze and its solve outcome as plain data

    Args:
        maze: Maze, solved or not
        settings: Settings to report; defaults to the ones the maze was solved with

    Returns:
        Dictionary with status, endpoints, bounds, path and search statistics
    """
    grid = maze.grid
    settings = settings or maze.settings or SearchSettings()
    result = maze.last_result

    return {
        'status': maze.status.value,
        'origin': list(grid.origin.to_tuple()),
        'target': list(grid.target.to_tuple()),
        'bounds': list(grid.bounds.to_tuple()),
        'path': [list(c) for c in maze.path.to_list()] if maze.path is not None else None,
        'path_length': len(maze.path) if maze.path is not None else 0,
        'expansions': result.expansions if result is not None else 0,
        'settings': settings.to_dict(),
    }


def export_to_json(
    maze: Maze,
    settings: Optional[SearchSettings] = None,
    file_path: Optional[str] = None,
    indent: int = 2
) -> str:
    """
    Export a maze solution to JSON and optionally save it to a file

    Args:
        maze: Maze to describe
        settings: Settings to report (see build_solution_dict)
        file_path: Optional path to save JSON file. If None, only returns JSON string
        indent: Number of spaces for indentation (default: 2)

    Returns:
        JSON string representation of the solution

    Raises:
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If serialization or the file write fails

    Examples:
        >>> export_to_json(maze)  # doctest: +SKIP
        '{"status": "solved", ...}'
    """
    solution = build_solution_dict(maze, settings)

    try:
        json_str = json.dumps(solution, indent=indent)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON serialization failed: {e}")
        raise FileExportError(f"Failed to serialize solution to JSON: {e}") from e

    if file_path:
        write_export(json_str + "\n", file_path)

    return json_str
