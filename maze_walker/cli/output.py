"""
Output formatting and printing utilities for CLI
"""

import sys

from ..core.search import SearchSettings


def print_error(message: str, detail: str = None) -> None:
    """
    Print an error message to stderr

    Args:
        message: Main error line
        detail: Optional second line with more context
    """
    print(f"❌ {message}", file=sys.stderr)
    if detail:
        print(f"   {detail}", file=sys.stderr)


def format_settings(settings: SearchSettings) -> str:
    """
    Format search settings as a single line

    Args:
        settings: Settings used for the run

    Returns:
        Formatted string (e.g., "frontier=stack relaxation=reference heuristic=manhattan")
    """
    return " ".join(f"{key}={value}" for key, value in settings.to_dict().items())
