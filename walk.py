#!/usr/bin/env python
"""
Simple CLI for solving maze files
Usage: python walk.py solve MAP_FILE [options] | python walk.py init [--force]
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional

from maze_walker.cli import (
    setup_argument_parser,
    collect_overrides,
    run_init_command,
    run_solve_command,
)


def setup_logging(log_level: str = 'WARNING', log_file: Optional[Path] = None) -> None:
    """
    Configure logging to output to stderr and, optionally, a file

    Stdout is reserved for the rendered map or JSON.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to a log file (always DEBUG)
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('maze_walker').setLevel(logging.DEBUG)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for maze_walker CLI"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return run_init_command(force=args.force, path=args.path)

    log_file = Path(args.log_file) if args.log_file else None
    setup_logging(args.log_level, log_file)

    return run_solve_command(
        args.map_file,
        config_file=args.config_file,
        output_file=args.output_file,
        **collect_overrides(args)
    )


if __name__ == '__main__':
    sys.exit(main())
