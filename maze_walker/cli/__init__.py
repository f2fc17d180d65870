"""
CLI utilities for walk.py
"""

from .argument_parser import setup_argument_parser, collect_overrides
from .output import print_error, format_settings
from .init_command import run_init_command
from .config_discovery import discover_config
from .solve_command import run_solve_command, load_config

__all__ = [
    'setup_argument_parser',
    'collect_overrides',
    'print_error',
    'format_settings',
    'run_init_command',
    'discover_config',
    'run_solve_command',
    'load_config',
]
