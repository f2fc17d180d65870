"""
Utility functions for exporters
"""

import os
import logging
from pathlib import Path

from ..core.exceptions import PathValidationError, FileExportError

logger = logging.getLogger(__name__)

# Constants
MAX_FILENAME_LENGTH = 255


def validate_file_path(file_path: str, must_exist: bool = False) -> Path:
    """
    Validate and sanitize file path for export operations

    Args:
        file_path: Path to validate
        must_exist: Whether parent directory must exist

    Returns:
        Validated Path object

    Raises:
        PathValidationError: If path is invalid or unsafe

    Examples:
        >>> validate_file_path("solution.json")  # doctest: +SKIP
        PosixPath('/current/dir/solution.json')
    """
    if not file_path or not isinstance(file_path, str):
        raise PathValidationError(f"File path must be a non-empty string, got: {type(file_path)}")

    filename = os.path.basename(file_path)
    if len(filename) > MAX_FILENAME_LENGTH:
        raise PathValidationError(
            f"Filename too long ({len(filename)} chars). Maximum is {MAX_FILENAME_LENGTH}"
        )

    try:
        path = Path(file_path).resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid file path: {e}")

    try:
        if must_exist:
            parent = path.parent
            if not parent.exists():
                raise PathValidationError(f"Parent directory does not exist: {parent}")
            if not parent.is_dir():
                raise PathValidationError(f"Parent path is not a directory: {parent}")
    except (PermissionError, OSError) as e:
        raise PathValidationError(f"Cannot access path: {e}")

    # Check for reserved names on Windows
    reserved_names = {'CON', 'PRN', 'AUX', 'NUL', 'COM1', 'COM2', 'COM3', 'COM4',
                     'COM5', 'COM6', 'COM7', 'COM8', 'COM9', 'LPT1', 'LPT2',
                     'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'}
    name_without_ext = path.stem.upper()
    if name_without_ext in reserved_names:
        raise PathValidationError(f"Reserved filename: {filename}")

    return path


def write_export(text: str, file_path: str) -> Path:
    """
    Write export text to a validated path with UTF-8 encoding

    Raises:
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If the write fails
    """
    validated_path = validate_file_path(file_path, must_exist=True)
    try:
        validated_path.write_text(text, encoding='utf-8')
    except OSError as e:
        logger.error(f"Failed to write export file: {e}")
        raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    logger.info(f"Export written to: {validated_path}")
    return validated_path
