"""Network Bounded Context - Traversal Services.

Stateless queries over an AntennaGraph. Every call builds its own scratch
visited set and discards it before returning; only the result outlives the
call.

Neighbors are always visited in edge-list order (most recently connected
first).
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from domain.grid.coordinates import CoordinateSet
from domain.grid.value_objects import Coordinate
from domain.network.errors import VertexNotFoundError
from domain.network.graph import AntennaGraph, Vertex
from domain.network.value_objects import AntennaPath


# ---------------------------------------------------------------------------
# Helper: Start Lookup
# ---------------------------------------------------------------------------
def _require_vertex(graph: AntennaGraph, x: int, y: int) -> Vertex:
    vertex = graph.vertex(x, y)
    if vertex is None:
        raise VertexNotFoundError(Coordinate(x=x, y=y))
    return vertex


# ---------------------------------------------------------------------------
# Depth-First Reachability
# ---------------------------------------------------------------------------
def depth_first(graph: AntennaGraph, x: int, y: int) -> CoordinateSet:
    """Return every vertex reachable from (x, y), in depth-first pre-order.

    Uses an explicit stack. Neighbors are pushed in reverse and the visited
    check happens on pop, which yields the same order as the recursive visit.

    Args:
        graph: Graph to traverse
        x: Start row
        y: Start column

    Returns:
        CoordinateSet starting with (x, y)

    Raises:
        VertexNotFoundError: If no vertex exists at (x, y)
    """
    start = _require_vertex(graph, x, y)

    visited = CoordinateSet()
    result = CoordinateSet()
    stack: list[Coordinate] = [start.coordinate]

    while stack:
        current = stack.pop()
        if not visited.add_coordinate(current):
            continue
        result.add_coordinate(current)
        vertex = graph.vertex_at(current)
        # Edge targets always exist; edges die with their vertex in clear()
        stack.extend(reversed(vertex.neighbors()))

    visited.clear()
    return result


# ---------------------------------------------------------------------------
# Breadth-First Reachability
# ---------------------------------------------------------------------------
def breadth_first(graph: AntennaGraph, x: int, y: int) -> CoordinateSet:
    """Return every vertex reachable from (x, y), in breadth-first order.

    Neighbors are marked visited when enqueued, so each vertex is queued at
    most once. Membership always equals depth_first from the same start.

    Raises:
        VertexNotFoundError: If no vertex exists at (x, y)
    """
    start = _require_vertex(graph, x, y)

    visited = CoordinateSet([start.coordinate])
    result = CoordinateSet([start.coordinate])
    queue: deque[Vertex] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in current.neighbors():
            if visited.add_coordinate(neighbor):
                result.add_coordinate(neighbor)
                queue.append(graph.vertex_at(neighbor))

    visited.clear()
    return result


# ---------------------------------------------------------------------------
# Simple-Path Enumeration
# ---------------------------------------------------------------------------
def all_paths(
    graph: AntennaGraph, x1: int, y1: int, x2: int, y2: int
) -> list[AntennaPath]:
    """Enumerate every simple path from (x1, y1) to (x2, y2).

    Backtracking over an explicit stack of (vertex, pending neighbors)
    frames, with one visited set and one path accumulator. A coordinate is
    added when its frame opens and removed when the frame's neighbors are
    exhausted, so sibling branches never see each other's extensions. A path
    stops as soon as it reaches the destination. Paths come out in the same
    order as a recursive search, with no limit on path length.

    A missing start or destination is not an error; it simply yields no
    paths. When start equals destination the single one-coordinate path is
    returned.

    Args:
        graph: Graph to search
        x1: Start row
        y1: Start column
        x2: Destination row
        y2: Destination column

    Returns:
        Paths in discovery order, each running start -> destination
    """
    start = graph.vertex(x1, y1)
    if start is None:
        return []

    destination = Coordinate(x=x2, y=y2)
    visited = CoordinateSet()
    path: list[Coordinate] = []
    found: list[AntennaPath] = []
    frames: list[tuple[Vertex, Iterator[Coordinate]]] = []

    def open_frame(vertex: Vertex) -> None:
        coordinate = vertex.coordinate
        if coordinate == destination:
            found.append(AntennaPath(coordinates=(*path, coordinate)))
            return
        visited.add_coordinate(coordinate)
        path.append(coordinate)
        frames.append((vertex, iter(vertex.neighbors())))

    open_frame(start)
    while frames:
        vertex, pending = frames[-1]
        neighbor = next(pending, None)
        if neighbor is None:
            frames.pop()
            path.pop()
            visited.discard(vertex.x, vertex.y)
        elif neighbor not in visited:
            open_frame(graph.vertex_at(neighbor))

    return found


# ---------------------------------------------------------------------------
# Frequency-Pair Cross Enumeration
# ---------------------------------------------------------------------------
def cross_pairs(
    graph: AntennaGraph, freq_a: str, freq_b: str
) -> list[tuple[Coordinate, Coordinate]]:
    """Pair every freq_a vertex with every freq_b vertex.

    Full cross product in graph order; edges are ignored. When the labels
    are equal a vertex also pairs with itself.

    Example:
        Vertices A(0,0) and A(1,1) give (0,0)-(0,0), (0,0)-(1,1),
        (1,1)-(0,0), (1,1)-(1,1).
    """
    firsts = [v.coordinate for v in graph if v.frequency == freq_a]
    seconds = [v.coordinate for v in graph if v.frequency == freq_b]
    return [(a, b) for a in firsts for b in seconds]
