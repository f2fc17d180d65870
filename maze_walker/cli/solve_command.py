"""
CLI command to solve a maze file and emit the result
"""

import sys
import logging
from datetime import datetime

from ..core.config import WalkerConfig
from ..core.exceptions import (
    ConfigError,
    DecodeError,
    ExportError,
    MapLoadError,
    SearchError,
)
from ..core.map_loader import read_grid
from ..core.maze import Maze
from ..exporters import export_to_json, export_to_text
from .config_discovery import discover_config
from .output import print_error, format_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SEARCH_FAILED = 1
EXIT_BAD_MAP = 2
EXIT_BAD_CONFIG = 3
EXIT_EXPORT_FAILED = 4


def load_config(config_file: str = None, **overrides) -> WalkerConfig:
    """
    Resolve, load and override the run configuration

    Args:
        config_file: Optional explicit config path
        **overrides: Flat config values from CLI flags (None = keep)

    Returns:
        Final WalkerConfig

    Raises:
        ConfigError: If the config cannot be read or validated
    """
    try:
        config_path = discover_config(config_file)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e

    if config_path is None:
        logger.info("No config file found, using defaults")
        config = WalkerConfig.default()
    else:
        logger.info(f"Loading config from: {config_path}")
        try:
            config = WalkerConfig.from_yaml(config_path)
        except FileNotFoundError as e:
            raise ConfigError(str(e)) from e

    return config.with_overrides(**overrides)


def run_solve_command(
    map_file: str,
    config_file: str = None,
    output_file: str = None,
    **overrides
) -> int:
    """
    Load a map, solve it and print or save the rendered result

    Args:
        map_file: Path to the map file
        config_file: Optional explicit config path
        output_file: Optional file to write the result to instead of stdout
        **overrides: Flat config values from CLI flags

    Returns:
        Exit code (see EXIT_* constants)
    """
    try:
        config = load_config(config_file, **overrides)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        print_error("Invalid configuration", str(e))
        return EXIT_BAD_CONFIG

    settings = config.search_settings()
    logger.info(f"Search settings: {format_settings(settings)}")

    try:
        grid = read_grid(map_file, strict_rows=config.strict_rows)
    except FileNotFoundError:
        print_error(f"Map file not found: {map_file}")
        return EXIT_BAD_MAP
    except OSError as e:
        logger.error(f"Cannot read map {map_file}: {e}")
        print_error(f"Cannot read map file: {map_file}", str(e))
        return EXIT_BAD_MAP
    except (DecodeError, MapLoadError) as e:
        logger.error(f"Failed to load map {map_file}: {e}")
        print_error(f"Failed to load map: {map_file}", str(e))
        return EXIT_BAD_MAP

    maze = Maze(grid)
    start_time = datetime.now()
    try:
        maze.solve(settings)
    except SearchError as e:
        duration = (datetime.now() - start_time).total_seconds()
        expansions = maze.last_result.expansions if maze.last_result else 0
        logger.error(f"Search failed after {expansions} expansions ({duration:.3f}s): {e}")
        print_error(str(e), f"Map: {map_file}")
        return EXIT_SEARCH_FAILED

    duration = (datetime.now() - start_time).total_seconds()
    logger.info(
        f"Path found: length {len(maze.path)}, {maze.last_result.expansions} expansions, {duration:.3f}s"
    )

    try:
        if config.output_format == 'json':
            text = export_to_json(maze, settings, file_path=output_file, indent=config.json_indent) + "\n"
        else:
            text = export_to_text(
                maze,
                file_path=output_file,
                preserve_endpoints=config.preserve_endpoints,
                show_path=config.show_path
            )
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        print_error("Failed to export result", str(e))
        return EXIT_EXPORT_FAILED

    if output_file:
        print(f"📄 Result saved to: {output_file}", file=sys.stderr)
    else:
        sys.stdout.write(text)

    return EXIT_OK
