"""
Command-line argument parser configuration with subcommands
"""

import argparse
from typing import Dict, Any


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (init, solve)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='maze_walker',
        description='Find a path through a character-grid maze and draw it',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Initialize configuration
  maze_walker init                              # Create ./walker_config.yaml
  maze_walker init --force                      # Overwrite existing config
  maze_walker init --path ./my_config.yaml      # Create in custom location

  # Solve mazes
  maze_walker solve maps/simple.map             # Auto-discover config and solve
  maze_walker solve maps/simple.map --config my_config.yaml
  maze_walker solve maps/simple.map --frontier priority --relaxation shortest
  maze_walker solve maps/simple.map --format json --output solution.json
  maze_walker solve maps/simple.map --log-level DEBUG
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # INIT SUBCOMMAND
    # ========================================================================
    init_parser = subparsers.add_parser(
        'init',
        help='Create a new configuration file',
        description='Initialize maze_walker by creating a configuration file'
    )

    init_parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing configuration file'
    )

    init_parser.add_argument(
        '--path', '-p',
        type=str,
        help='Custom path for config file (default: ./walker_config.yaml)'
    )

    # ========================================================================
    # SOLVE SUBCOMMAND
    # ========================================================================
    solve_parser = subparsers.add_parser(
        'solve',
        help='Solve a maze file',
        description='Load a map file, search for a path and render the result'
    )

    solve_parser.add_argument(
        'map_file',
        help='Path to the map file'
    )

    solve_parser.add_argument(
        '--config',
        dest='config_file',
        help='Path to YAML configuration file (optional, will auto-discover)'
    )

    search_group = solve_parser.add_argument_group('search options (override config)')
    search_group.add_argument(
        '--frontier',
        choices=['stack', 'priority'],
        help='Expansion order: LIFO stack or lowest g+h first'
    )
    search_group.add_argument(
        '--relaxation',
        choices=['reference', 'shortest'],
        help='Relaxation rule for open nodes'
    )
    search_group.add_argument(
        '--heuristic',
        choices=['squared_euclidean', 'manhattan'],
        help='Distance estimate to the target'
    )
    search_group.add_argument(
        '--strict-rows',
        action='store_true',
        default=None,
        help='Reject maps whose rows differ in length'
    )

    output_group = solve_parser.add_argument_group('output options (override config)')
    output_group.add_argument(
        '--format',
        dest='output_format',
        choices=['text', 'json'],
        help='Output format'
    )
    output_group.add_argument(
        '--output', '-o',
        dest='output_file',
        help='Write the result to this file instead of stdout'
    )
    output_group.add_argument(
        '--show-path',
        action='store_true',
        default=None,
        help='Also print path coordinates (text format)'
    )
    output_group.add_argument(
        '--preserve-endpoints',
        action='store_true',
        default=None,
        help='Keep origin and target glyphs under the path overlay'
    )

    solve_parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Set logging level (default: WARNING). Logs go to stderr.'
    )
    solve_parser.add_argument(
        '--log-file',
        help='Also write DEBUG logs to this file'
    )

    return parser


def collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Extract config overrides from parsed solve arguments

    Args:
        args: Parsed command-line arguments

    Returns:
        Mapping of flat config keys to values; unset flags map to None
    """
    return {
        'frontier': args.frontier,
        'relaxation': args.relaxation,
        'heuristic': args.heuristic,
        'strict_rows': args.strict_rows,
        'output_format': args.output_format,
        'show_path': args.show_path,
        'preserve_endpoints': args.preserve_endpoints,
    }
