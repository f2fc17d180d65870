"""
Export functionality for maze solutions

- Text: the map with the path drawn over it
- JSON: machine-readable solution with search statistics
"""

from .text_export import render_grid, export_to_text
from .json_export import build_solution_dict, export_to_json

__all__ = [
    "render_grid",
    "export_to_text",
    "build_solution_dict",
    "export_to_json",
]
