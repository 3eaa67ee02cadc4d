"""Network Bounded Context - Antenna Graph.

Vertices are antennas ordered by (x, y), with the same uniqueness contract as
the AntennaRegistry. Edges only join vertices of equal frequency and always
come in symmetric pairs. Each vertex owns its outgoing edge list; the graph
keeps no references into the registry.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import combinations

from domain.grid.value_objects import Antenna, Coordinate
from domain.network.value_objects import Edge

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


@dataclass
class Vertex:
    """Antenna node in the graph (Entity).

    Mutable: its edge list grows as links are made. Fields are validated
    through Antenna before a vertex is built, so a Vertex is only ever
    created by AntennaGraph.insert_vertex.

    Edges are kept most recently connected first, which is the order
    traversals visit neighbors in.
    """

    frequency: str
    x: int
    y: int
    edges: list[Edge] = field(default_factory=list)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(x=self.x, y=self.y)

    def key(self) -> tuple[int, int]:
        return (self.x, self.y)

    def neighbors(self) -> list[Coordinate]:
        """Return edge targets in edge-list order."""
        return [edge.target for edge in self.edges]


class AntennaGraph:
    """Ordered vertex sequence with symmetric same-frequency adjacency.

    Invariants:
        AG-1: No two vertices share (x, y)
        AG-2: Vertices strictly ordered by (x, y)
        AG-3: Edge u->v exists iff edge v->u exists
        AG-4: Edges only join vertices of equal frequency
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._by_position: dict[Coordinate, Vertex] = {}

    @classmethod
    def from_antennas(cls, antennas: Iterable[Antenna]) -> "AntennaGraph":
        """Build an unlinked graph with one vertex per antenna."""
        graph = cls()
        for antenna in antennas:
            graph.insert_vertex(antenna.frequency, antenna.x, antenna.y)
        return graph

    # -- Queries ------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __contains__(self, item: object) -> bool:
        return item in self._by_position

    def __repr__(self) -> str:
        return f"AntennaGraph({len(self._vertices)} vertices, {self.edge_count()} edges)"

    def vertex(self, x: int, y: int) -> Vertex | None:
        """Return the vertex at (x, y), or None if absent."""
        return self._by_position.get(Coordinate(x=x, y=y))

    def vertex_at(self, coordinate: Coordinate) -> Vertex | None:
        return self._by_position.get(coordinate)

    def neighbors(self, x: int, y: int) -> list[Coordinate]:
        """Return neighbors of (x, y) most recently connected first.

        Empty list if the vertex is absent or isolated.
        """
        vertex = self.vertex(x, y)
        if vertex is None:
            return []
        return vertex.neighbors()

    def has_edge(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Return True if the directed edge (x1, y1) -> (x2, y2) exists."""
        target = Coordinate(x=x2, y=y2)
        return any(edge.target == target for edge in self.edges_from(x1, y1))

    def edges_from(self, x: int, y: int) -> list[Edge]:
        vertex = self.vertex(x, y)
        if vertex is None:
            return []
        return list(vertex.edges)

    def edge_count(self) -> int:
        """Return number of directed edges (twice the number of links)."""
        return sum(len(v.edges) for v in self._vertices)

    # -- Mutations ----------------------------------------------------------
    def insert_vertex(self, frequency: str, x: int, y: int) -> bool:
        """Insert a vertex keeping (x, y) order.

        Returns:
            True if inserted, False if (x, y) was already occupied

        Raises:
            ValidationError: If frequency is not a single character
        """
        position = Coordinate(x=x, y=y)
        if position in self._by_position:
            return False

        antenna = Antenna(frequency=frequency, x=x, y=y)
        vertex = Vertex(frequency=antenna.frequency, x=antenna.x, y=antenna.y)
        index = bisect_left(self._vertices, (x, y), key=Vertex.key)
        self._vertices.insert(index, vertex)
        self._by_position[position] = vertex
        return True

    def connect(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Link two vertices of equal frequency in both directions.

        Each new edge is prepended to its source vertex's edge list.

        Returns:
            True if linked; False if either vertex is missing or the
            frequencies differ. Linking a vertex to itself succeeds and
            adds two self edges
        """
        first = self.vertex(x1, y1)
        second = self.vertex(x2, y2)
        if first is None or second is None:
            logger.debug(
                "connect (%d, %d)-(%d, %d): vertex missing", x1, y1, x2, y2
            )
            return False
        if first.frequency != second.frequency:
            logger.debug(
                "connect (%d, %d)-(%d, %d): frequency %r != %r",
                x1,
                y1,
                x2,
                y2,
                first.frequency,
                second.frequency,
            )
            return False

        # Build both edges before linking either
        forward = Edge(source=first.coordinate, target=second.coordinate)
        backward = forward.reversed()
        first.edges.insert(0, forward)
        second.edges.insert(0, backward)
        return True

    def clear(self) -> None:
        """Release every vertex's edges, then the vertices."""
        for vertex in self._vertices:
            vertex.edges.clear()
        self._vertices.clear()
        self._by_position.clear()


def connect_same_frequency(graph: AntennaGraph) -> int:
    """Attempt a link between every vertex pair, in graph order.

    Cross-frequency pairs are filtered out by connect itself. Pairs that are
    already linked are skipped, so calling this twice adds nothing.

    Returns:
        Number of links created
    """
    links = 0
    for first, second in combinations(list(graph), 2):
        if graph.has_edge(first.x, first.y, second.x, second.y):
            continue
        if graph.connect(first.x, first.y, second.x, second.y):
            links += 1
    logger.debug("Linked %d same-frequency pairs over %d vertices", links, len(graph))
    return links
