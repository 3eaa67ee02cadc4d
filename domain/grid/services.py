"""Grid Bounded Context - Domain Services.

Pure domain logic over the antenna registry.
NO I/O operations - grid loading is implemented by infrastructure adapters
under `src/infrastructure/grid/text_grid_adapter.py` via domain ports.
"""

from __future__ import annotations

from itertools import combinations

from domain.grid.coordinates import CoordinateSet
from domain.grid.registry import AntennaRegistry
from domain.grid.value_objects import Antenna, Coordinate


# ---------------------------------------------------------------------------
# Helper: Pair Midpoint
# ---------------------------------------------------------------------------
def antinode_between(first: Antenna, second: Antenna) -> Coordinate | None:
    """Return the nefasto cell implied by two antennas, if any.

    The cell is the midpoint of the pair and only exists when the
    displacement is even on both axes. Frequencies are not checked here.

    Args:
        first: Antenna earlier in (x, y) order
        second: Antenna later in (x, y) order

    Returns:
        Midpoint Coordinate, or None if either displacement is odd
    """
    dx = second.x - first.x
    dy = second.y - first.y
    if dx % 2 or dy % 2:
        return None
    return Coordinate(x=first.x + dx // 2, y=first.y + dy // 2)


# ---------------------------------------------------------------------------
# Main Service: detect_antinodes
# ---------------------------------------------------------------------------
def detect_antinodes(registry: AntennaRegistry) -> CoordinateSet:
    """Find every cell with a nefasto effect.

    Scans each unordered pair of distinct same-frequency antennas in registry
    order. Pairs with an even displacement on both axes contribute their
    midpoint. The registry is not modified.

    Args:
        registry: Antennas to scan

    Returns:
        CoordinateSet of nefasto cells (empty if none)

    Example:
        >>> registry = AntennaRegistry()
        >>> registry.insert("A", 0, 0)
        True
        >>> registry.insert("A", 2, 4)
        True
        >>> detect_antinodes(registry).as_tuples()
        [(1, 2)]
    """
    result = CoordinateSet()
    for first, second in combinations(registry, 2):
        if first.frequency != second.frequency:
            continue
        cell = antinode_between(first, second)
        if cell is not None:
            result.add_coordinate(cell)
    return result


def antinodes_by_frequency(registry: AntennaRegistry) -> dict[str, CoordinateSet]:
    """Group nefasto cells by the frequency of the pair producing them.

    Frequencies with no detection map to an empty set.
    """
    grouped: dict[str, CoordinateSet] = {}
    for frequency in registry.frequencies():
        cells = CoordinateSet()
        for first, second in combinations(registry.by_frequency(frequency), 2):
            cell = antinode_between(first, second)
            if cell is not None:
                cells.add_coordinate(cell)
        grouped[frequency] = cells
    return grouped
