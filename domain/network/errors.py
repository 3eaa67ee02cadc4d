"""Network Bounded Context - Error Hierarchy.

Custom exceptions for graph operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.grid.value_objects import Coordinate


class NetworkError(Exception):
    """Base error for antenna network operations."""


class VertexNotFoundError(NetworkError):
    """No vertex exists at the requested coordinate.

    Attributes:
        coordinate: The position that was looked up
    """

    def __init__(self, coordinate: "Coordinate") -> None:
        self.coordinate = coordinate
        super().__init__(f"No antenna at ({coordinate.x}, {coordinate.y})")
