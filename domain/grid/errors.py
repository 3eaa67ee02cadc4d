"""Grid Bounded Context - Error Hierarchy.

Custom exceptions for grid loading. Expected outcomes such as a duplicate
insert or removing an empty cell are reported by return value, not here.
"""

from __future__ import annotations


class GridError(Exception):
    """Base error for grid operations."""


class InvalidGridFileError(GridError):
    """File is not a readable text grid (wrong suffix, symlink, bad encoding)."""


class EmptyGridError(GridError):
    """Grid file has no rows."""


class GridTooLargeError(GridError):
    """Grid file exceeds the configured byte budget."""


class MalformedGridError(GridError):
    """A row's width differs from the width of the first row.

    Attributes:
        row: Zero-based index of the offending row
        width: Width found on that row
        expected: Width of the first row
    """

    def __init__(self, row: int, width: int, expected: int) -> None:
        self.row = row
        self.width = width
        self.expected = expected
        super().__init__(
            f"Row {row} has {width} columns, expected {expected} "
            "(grid must be rectangular)"
        )
