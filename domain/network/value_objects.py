"""Network Bounded Context - Value Objects.

Immutable results of graph traversals.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from domain.grid.value_objects import Coordinate


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge(BaseModel):
    """Directed link between two same-frequency vertices (Value Object).

    Edges are only created in symmetric pairs by AntennaGraph.connect.
    """

    source: Coordinate
    target: Coordinate

    model_config = ConfigDict(frozen=True)

    def reversed(self) -> "Edge":
        return Edge(source=self.target, target=self.source)


# ---------------------------------------------------------------------------
# AntennaPath
# ---------------------------------------------------------------------------
class AntennaPath(BaseModel):
    """Simple path between two antennas (Value Object).

    Invariants:
        AP-1: len(coordinates) >= 1
        AP-2: No coordinate appears twice
    """

    coordinates: tuple[Coordinate, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_path(self) -> "AntennaPath":
        # AP-1: Non-empty
        if not self.coordinates:
            raise ValueError("Path must contain at least one coordinate")

        # AP-2: Simple path
        if len(set(self.coordinates)) != len(self.coordinates):
            raise ValueError("Path must not revisit a coordinate")

        return self

    @property
    def start(self) -> Coordinate:
        return self.coordinates[0]

    @property
    def end(self) -> Coordinate:
        return self.coordinates[-1]

    def hops(self) -> int:
        """Return number of links traversed."""
        return len(self.coordinates) - 1

    def as_tuples(self) -> list[tuple[int, int]]:
        return [c.as_tuple() for c in self.coordinates]

    def __str__(self) -> str:
        return " -> ".join(str(c) for c in self.coordinates)
