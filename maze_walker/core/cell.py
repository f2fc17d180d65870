"""
Cell types and their single-character map encoding
"""

from enum import Enum

from .exceptions import InvalidCellError


class CellType(Enum):
    """Closed set of grid cell kinds, valued by their map glyph"""
    WALL = '#'
    FLOOR = '.'
    TARGET = 'x'
    ORIGIN = 'o'
    PATH = '*'  # render-only overlay, never loaded

    @classmethod
    def from_char(cls, char: str, row: int = None, col: int = None) -> 'CellType':
        """
        Decode a map character into a cell type

        Args:
            char: Single map character
            row: Optional row index, reported in the error
            col: Optional column index, reported in the error

        Returns:
            The decoded CellType

        Raises:
            InvalidCellError: If the character is not a loadable cell glyph
        """
        cell = _LOADABLE.get(char)
        if cell is None:
            raise InvalidCellError(char, row, col)
        return cell

    def to_char(self) -> str:
        return self.value

    def is_target(self) -> bool:
        return self is CellType.TARGET

    def can_traverse(self) -> bool:
        """Floor and target only; walls block and the origin is never re-entered"""
        return self is CellType.FLOOR or self is CellType.TARGET


_LOADABLE = {
    cell.value: cell
    for cell in (CellType.WALL, CellType.FLOOR, CellType.TARGET, CellType.ORIGIN)
}
