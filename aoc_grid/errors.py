"""Error types raised by the grid core.

Each error also subclasses the builtin exception a caller would naturally
catch for the same mistake, so ``except IndexError`` keeps working around
grid reads.
"""

from __future__ import annotations


class GridError(Exception):
    """Base class for all grid errors."""


class InvalidDimensionError(GridError, ValueError):
    """Raised when a grid is requested with a negative row or column count."""

    def __init__(self, row_count: int, column_count: int):
        super().__init__(
            f"Grid dimensions must be non-negative, found: {row_count}x{column_count}"
        )
        self.row_count = row_count
        self.column_count = column_count


class MalformedInputError(GridError, ValueError):
    """Raised when text or nested rows cannot form a rectangular grid."""


class OutOfBoundsError(GridError, IndexError):
    """Raised when a coordinate lies outside ``[0, rows) x [0, columns)``."""

    def __init__(self, row: int, column: int, row_count: int, column_count: int):
        super().__init__(
            f"Coordinates out of bounds: ({row}, {column}) for grid {row_count}x{column_count}"
        )
        self.row = row
        self.column = column
        self.row_count = row_count
        self.column_count = column_count


__all__ = ["GridError", "InvalidDimensionError", "MalformedInputError", "OutOfBoundsError"]
