"""
Render a grid as map text, optionally with a path overlay
"""

from typing import Optional

from ..core.cell import CellType
from ..core.coordinate import Coordinate
from ..core.grid import Grid
from ..core.maze import Maze
from ..core.path import Path
from .utils import write_export


def render_grid(grid: Grid, path: Optional[Path] = None, preserve_endpoints: bool = False) -> str:
    """
    Render grid rows as text, one newline-terminated line per row

    Coordinates on the path are drawn as '*'; everything else keeps its
    original glyph. Each row is written at its stored length, so without a
    path the output reproduces the map text even when rows are ragged.

    Args:
        grid: Grid to render
        path: Optional path to overlay
        preserve_endpoints: Keep the origin and target glyphs under the overlay

    Returns:
        Rendered map text
    """
    on_path = path.to_coordinate_set() if path is not None else set()
    if preserve_endpoints:
        on_path -= {grid.origin, grid.target}

    path_char = CellType.PATH.to_char()
    lines = []
    for row, cells in enumerate(grid.rows):
        chars = [
            path_char if Coordinate(row, col) in on_path else cell.to_char()
            for col, cell in enumerate(cells)
        ]
        lines.append("".join(chars) + "\n")
    return "".join(lines)


def export_to_text(
    maze: Maze,
    file_path: Optional[str] = None,
    preserve_endpoints: bool = False,
    show_path: bool = False
) -> str:
    """
    Render a maze (with its path when solved) and optionally save it

    Args:
        maze: Maze to render
        file_path: Optional path to save the text to
        preserve_endpoints: Keep origin/target glyphs under the overlay
        show_path: Append the path coordinates, one per line, after the map

    Returns:
        Rendered text

    Raises:
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If file write operation fails
    """
    text = render_grid(maze.grid, maze.path, preserve_endpoints=preserve_endpoints)
    if show_path and maze.path is not None:
        text += "\n" + str(maze.path)

    if file_path:
        write_export(text, file_path)

    return text
