"""Grid Bounded Context - Coordinate Set.

Deduplicated collection of grid positions, used as visited markers during
traversals and as the result container handed back to callers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Set

from domain.grid.value_objects import Coordinate


class CoordinateSet(Set):
    """Mutable set of unique Coordinates.

    Members iterate in insertion order. Only uniqueness is guaranteed to
    callers; order is kept stable for presentation.

    Comparison operators and ``&``/``|``/``-`` come from ``collections.abc.Set``,
    so a CoordinateSet compares equal to any set with the same members.
    """

    def __init__(self, coordinates: Iterable[Coordinate] = ()) -> None:
        # dict keeps insertion order and gives O(1) membership
        self._members: dict[Coordinate, None] = {}
        for coordinate in coordinates:
            self._members.setdefault(coordinate, None)

    @classmethod
    def of(cls, *pairs: tuple[int, int]) -> "CoordinateSet":
        """Build a set from (x, y) tuples."""
        return cls(Coordinate(x=x, y=y) for x, y in pairs)

    # -- Set protocol -------------------------------------------------------
    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        inner = ", ".join(str(c) for c in self._members)
        return f"CoordinateSet({{{inner}}})"

    # -- Operations ---------------------------------------------------------
    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) is a member."""
        return Coordinate(x=x, y=y) in self._members

    def add(self, x: int, y: int) -> bool:
        """Add (x, y) if absent.

        Returns:
            True if the coordinate was added, False if it was already present
        """
        return self.add_coordinate(Coordinate(x=x, y=y))

    def add_coordinate(self, coordinate: Coordinate) -> bool:
        if coordinate in self._members:
            return False
        self._members[coordinate] = None
        return True

    def discard(self, x: int, y: int) -> None:
        """Remove (x, y) if present. Used for backtracking."""
        self._members.pop(Coordinate(x=x, y=y), None)

    def clear(self) -> None:
        """Release every member."""
        self._members.clear()

    def copy(self) -> "CoordinateSet":
        return CoordinateSet(self._members)

    def as_tuples(self) -> list[tuple[int, int]]:
        """Return members as (x, y) tuples, in iteration order."""
        return [c.as_tuple() for c in self._members]
