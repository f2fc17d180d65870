"""
Map file loading: decodes text rows into a Grid
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .cell import CellType
from .coordinate import Coordinate
from .exceptions import (
    EmptyMapError,
    MapEncodingError,
    MissingOriginError,
    MissingTargetError,
    MoreThanOneOriginError,
    MoreThanOneTargetError,
    RaggedGridError,
)
from .grid import Grid

# Setup module logger
logger = logging.getLogger(__name__)


def decode_row(line: str, row: int) -> Tuple[CellType, ...]:
    """Decode one text line into cells; raises InvalidCellError on a bad char"""
    return tuple(CellType.from_char(char, row, col) for col, char in enumerate(line))


def load_grid(lines: Iterable[str], strict_rows: bool = False) -> Grid:
    """
    Build a Grid from map lines

    Rows are decoded in order. A duplicate origin or target fails at the row
    where it appears; a missing target is reported before a missing origin.

    Args:
        lines: Map rows, with or without trailing newlines
        strict_rows: If True, every row must match the first row's length

    Returns:
        Loaded Grid

    Raises:
        InvalidCellError: On an unknown character
        MoreThanOneOriginError, MoreThanOneTargetError: On duplicates
        MissingTargetError, MissingOriginError: When one is absent
        EmptyMapError: When there are no rows
        RaggedGridError: In strict mode, on a row of different length
    """
    rows: List[Tuple[CellType, ...]] = []
    origin: Optional[Coordinate] = None
    target: Optional[Coordinate] = None

    for row_index, line in enumerate(lines):
        cells = decode_row(line.rstrip('\r\n'), row_index)

        for col, cell in enumerate(cells):
            if cell is CellType.TARGET:
                if target is not None:
                    raise MoreThanOneTargetError()
                target = Coordinate(row_index, col)
            elif cell is CellType.ORIGIN:
                if origin is not None:
                    raise MoreThanOneOriginError()
                origin = Coordinate(row_index, col)

        if strict_rows and rows and len(cells) != len(rows[0]):
            raise RaggedGridError(row_index, len(cells), len(rows[0]))

        rows.append(cells)

    if not rows:
        raise EmptyMapError()
    if target is None:
        raise MissingTargetError()
    if origin is None:
        raise MissingOriginError()

    grid = Grid(rows=tuple(rows), origin=origin, target=target)
    logger.debug(
        f"Loaded grid {grid.bounds.row}x{grid.bounds.col}, origin {origin}, target {target}"
    )
    if not strict_rows and not grid.is_rectangular():
        logger.warning("Map rows have uneven lengths; bounds use the first row")
    return grid


def load_grid_from_text(text: str, strict_rows: bool = False) -> Grid:
    """Build a Grid from a whole map string"""
    return load_grid(text.splitlines(), strict_rows=strict_rows)


def read_grid(map_path: Union[str, Path], strict_rows: bool = False) -> Grid:
    """
    Load a Grid from a map file

    Raises:
        FileNotFoundError: If the map file does not exist
        OSError: If the map path cannot be read (e.g. it is a directory)
        MapEncodingError: If the file is not valid UTF-8
    """
    map_path = Path(map_path)
    logger.info(f"Reading map from: {map_path}")
    try:
        with open(map_path, 'r', encoding='utf-8') as f:
            return load_grid(f, strict_rows=strict_rows)
    except UnicodeDecodeError as e:
        raise MapEncodingError(str(e)) from e
