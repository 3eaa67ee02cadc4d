"""Grid Bounded Context - Antenna Registry.

Ordered collection of antennas, strictly increasing by (x, y). A position
holds at most one antenna regardless of frequency.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator

from domain.grid.value_objects import Antenna, Coordinate


class AntennaRegistry:
    """Ordered, deduplicated antenna collection.

    Invariants:
        AR-1: No two antennas share (x, y)
        AR-2: Antennas strictly ordered by (x, y), x primary

    Rejected inserts and removals of empty positions are expected outcomes
    and are reported as False, never raised.
    """

    def __init__(self) -> None:
        self._antennas: list[Antenna] = []
        self._by_position: dict[Coordinate, Antenna] = {}

    @classmethod
    def from_antennas(cls, antennas: Iterable[Antenna]) -> "AntennaRegistry":
        """Build a registry by inserting each antenna in turn.

        Antennas on an already occupied position are skipped.
        """
        registry = cls()
        for antenna in antennas:
            registry.insert(antenna.frequency, antenna.x, antenna.y)
        return registry

    # -- Queries ------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._antennas)

    def __iter__(self) -> Iterator[Antenna]:
        return iter(self._antennas)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Antenna):
            return self._by_position.get(item.coordinate) == item
        return item in self._by_position

    def __repr__(self) -> str:
        return f"AntennaRegistry({len(self._antennas)} antennas)"

    @property
    def antennas(self) -> tuple[Antenna, ...]:
        """Snapshot of the antennas in (x, y) order."""
        return tuple(self._antennas)

    def get(self, x: int, y: int) -> Antenna | None:
        """Return the antenna at (x, y), or None if the position is free."""
        return self._by_position.get(Coordinate(x=x, y=y))

    def frequencies(self) -> tuple[str, ...]:
        """Return the distinct frequency labels, sorted."""
        return tuple(sorted({a.frequency for a in self._antennas}))

    def by_frequency(self, frequency: str) -> list[Antenna]:
        """Return antennas with the given label, in (x, y) order."""
        return [a for a in self._antennas if a.frequency == frequency]

    # -- Mutations ----------------------------------------------------------
    def insert(self, frequency: str, x: int, y: int) -> bool:
        """Insert an antenna keeping (x, y) order.

        The antenna lands before the first entry whose key is >= (x, y).

        Args:
            frequency: Single-character frequency label
            x: Row
            y: Column

        Returns:
            True if inserted, False if (x, y) was already occupied

        Raises:
            ValidationError: If frequency is not a single character
        """
        position = Coordinate(x=x, y=y)
        if position in self._by_position:
            return False

        # Build the node first so a failure leaves the registry untouched
        antenna = Antenna(frequency=frequency, x=x, y=y)
        index = bisect_left(self._antennas, (x, y), key=Antenna.key)
        self._antennas.insert(index, antenna)
        self._by_position[position] = antenna
        return True

    def remove(self, x: int, y: int) -> bool:
        """Remove the antenna at (x, y).

        Returns:
            True if an antenna was removed, False if the position was free
        """
        antenna = self._by_position.pop(Coordinate(x=x, y=y), None)
        if antenna is None:
            return False
        index = bisect_left(self._antennas, (x, y), key=Antenna.key)
        del self._antennas[index]
        return True

    def clear(self) -> None:
        """Release every antenna."""
        self._antennas.clear()
        self._by_position.clear()
