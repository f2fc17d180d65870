"""
Tests for text rendering and JSON export
"""

import json

import pytest
from hypothesis import given, settings, strategies as st

from maze_walker.core.exceptions import PathValidationError, ExportError
from maze_walker.core.map_loader import load_grid_from_text
from maze_walker.core.maze import Maze
from maze_walker.core.search import SearchSettings
from maze_walker.core.frontier import FrontierMode
from maze_walker.exporters import render_grid, export_to_text, build_solution_dict, export_to_json
from maze_walker.exporters.utils import validate_file_path


class TestRenderGrid:
    """Test suite for the text renderer"""

    def test_unsolved_round_trip(self, simple_map_text, simple_grid):
        assert render_grid(simple_grid) == simple_map_text

    def test_path_overlay(self, simple_grid):
        maze = Maze(simple_grid)
        maze.solve()

        expected_text = (
            "####\n"
            "#.*#\n"
            "#**#\n"
            "####\n"
        )
        assert render_grid(simple_grid, maze.path) == expected_text

    def test_preserve_endpoints(self, simple_grid):
        maze = Maze(simple_grid)
        maze.solve()

        expected_text = (
            "####\n"
            "#.x#\n"
            "#o*#\n"
            "####\n"
        )
        assert render_grid(simple_grid, maze.path, preserve_endpoints=True) == expected_text

    def test_medium_overlay(self, medium_grid):
        maze = Maze(medium_grid)
        maze.solve()

        expected_text = (
            "#######\n"
            "#***#.#\n"
            "#.#*#*#\n"
            "#.#***#\n"
            "#######\n"
        )
        assert render_grid(medium_grid, maze.path) == expected_text

    def test_ragged_rows_render_as_stored(self):
        text = "#####\n#ox\n#####\n"
        assert render_grid(load_grid_from_text(text)) == text

    def test_longer_row_keeps_extra_cells(self):
        text = "###\n#ox.#\n###\n"
        assert render_grid(load_grid_from_text(text)) == text

    @given(
        rows=st.integers(min_value=3, max_value=8).flatmap(
            lambda width: st.lists(
                st.text(alphabet='#.', min_size=width, max_size=width),
                min_size=1,
                max_size=6
            )
        )
    )
    @settings(max_examples=100, deadline=None)
    def test_round_trip_property(self, rows):
        """Rendering an unsolved grid reproduces the input text"""
        first = rows[0]
        rows = ["ox" + first[2:]] + rows[1:]
        text = "".join(row + "\n" for row in rows)

        assert render_grid(load_grid_from_text(text)) == text


class TestTextExport:
    """Test suite for export_to_text"""

    def test_show_path(self, simple_grid):
        maze = Maze(simple_grid)
        maze.solve()
        text = export_to_text(maze, show_path=True)

        assert text.endswith("\n(1, 2)\n(2, 2)\n(2, 1)\n")

    def test_unsolved_ignores_show_path(self, simple_map_text, simple_grid):
        assert export_to_text(Maze(simple_grid), show_path=True) == simple_map_text

    def test_writes_file(self, simple_grid, tmp_path):
        maze = Maze(simple_grid)
        maze.solve()
        output_file = tmp_path / 'solution.txt'

        text = export_to_text(maze, file_path=str(output_file))
        assert output_file.read_text(encoding='utf-8') == text

    def test_missing_directory(self, simple_grid, tmp_path):
        with pytest.raises(PathValidationError):
            export_to_text(Maze(simple_grid), file_path=str(tmp_path / 'nope' / 'solution.txt'))


class TestJsonExport:
    """Test suite for JSON export"""

    def test_solution_dict(self, simple_grid):
        maze = Maze(simple_grid)
        maze.solve()
        solution = build_solution_dict(maze)

        assert solution['status'] == 'solved'
        assert solution['origin'] == [2, 1]
        assert solution['target'] == [1, 2]
        assert solution['bounds'] == [4, 4]
        assert solution['path'] == [[1, 2], [2, 2], [2, 1]]
        assert solution['path_length'] == 3
        assert solution['expansions'] == 2
        assert solution['settings'] == {
            'frontier': 'stack',
            'relaxation': 'reference',
            'heuristic': 'squared_euclidean',
        }

    def test_unsolved_dict(self, simple_grid):
        solution = build_solution_dict(Maze(simple_grid))
        assert solution['status'] == 'unsolved'
        assert solution['path'] is None
        assert solution['path_length'] == 0
        assert solution['expansions'] == 0

    def test_reports_settings_used(self, simple_grid):
        maze = Maze(simple_grid)
        maze.solve(SearchSettings(frontier=FrontierMode.PRIORITY))
        assert build_solution_dict(maze)['settings']['frontier'] == 'priority'

    def test_export_to_json_file(self, simple_grid, tmp_path):
        maze = Maze(simple_grid)
        maze.solve()
        output_file = tmp_path / 'solution.json'

        json_str = export_to_json(maze, file_path=str(output_file), indent=4)

        assert json.loads(json_str) == json.loads(output_file.read_text(encoding='utf-8'))
        assert json.loads(json_str)['path_length'] == 3


class TestValidateFilePath:
    """Test suite for export path validation"""

    def test_empty_path(self):
        with pytest.raises(PathValidationError):
            validate_file_path("")

    def test_reserved_name(self):
        with pytest.raises(PathValidationError, match="Reserved filename"):
            validate_file_path("CON.txt")

    def test_too_long(self):
        with pytest.raises(PathValidationError, match="too long"):
            validate_file_path("a" * 300 + ".json")

    def test_is_export_error(self):
        assert issubclass(PathValidationError, ExportError)
