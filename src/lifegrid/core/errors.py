"""Exceptions raised by the grid engine."""


class LifeGridError(Exception):
    """Base class for all lifegrid errors."""


class InvalidDimensions(LifeGridError, ValueError):
    """Raised when a board is built with negative or non-integer dimensions."""


class IndexOutOfRange(LifeGridError, IndexError):
    """Raised when a cell outside the board is written."""


class PatternNotFound(LifeGridError, LookupError):
    """Raised when a pattern name is not in the library."""
