"""
Custom exceptions for maze_walker
"""


class MazeWalkerError(Exception):
    """Base exception for all maze_walker errors"""
    pass


# ============================================================================
# Decoding
# ============================================================================

class DecodeError(MazeWalkerError):
    """Raised when map text cannot be decoded into cells"""
    pass


class InvalidCellError(DecodeError):
    """Raised when a character does not map to a cell type"""

    def __init__(self, char: str, row: int = None, col: int = None):
        self.char = char
        self.row = row
        self.col = col
        message = f"Could not convert char '{char}' into CellType"
        if row is not None and col is not None:
            message += f" at row {row}, column {col}"
        super().__init__(message)


class MapEncodingError(DecodeError):
    """Raised when a map file is not valid UTF-8 text"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Map file is not valid UTF-8: {reason}")


# ============================================================================
# Map loading
# ============================================================================

class MapLoadError(MazeWalkerError):
    """Raised when a decoded map violates the origin/target or shape rules"""
    pass


class MoreThanOneOriginError(MapLoadError):
    def __init__(self):
        super().__init__("Found more than one origin")


class MissingOriginError(MapLoadError):
    def __init__(self):
        super().__init__("Missing origin")


class MoreThanOneTargetError(MapLoadError):
    def __init__(self):
        super().__init__("Found more than one target")


class MissingTargetError(MapLoadError):
    def __init__(self):
        super().__init__("Missing target")


class EmptyMapError(MapLoadError):
    def __init__(self):
        super().__init__("Map contains no rows")


class RaggedGridError(MapLoadError):
    """Raised in strict mode when a row length differs from the first row"""

    def __init__(self, row: int, length: int, expected: int):
        self.row = row
        self.length = length
        self.expected = expected
        super().__init__(f"Row {row} has {length} cells, expected {expected}")


# ============================================================================
# Search
# ============================================================================

class SearchError(MazeWalkerError):
    """Raised when a search cannot produce a path"""
    pass


class PathNotFoundError(SearchError):
    def __init__(self):
        super().__init__("Could not find a path")


class AlreadySolvedError(SearchError):
    def __init__(self):
        super().__init__("Already solved")


# ============================================================================
# Configuration and export
# ============================================================================

class ConfigError(MazeWalkerError):
    """Raised when configuration is unreadable or fails validation"""
    pass


class ExportError(MazeWalkerError):
    """Base exception for all exporter errors"""
    pass


class FileExportError(ExportError):
    """Raised when file export operations fail"""
    pass


class PathValidationError(ExportError):
    """Raised when file path is invalid or unsafe"""
    pass
