"""Grid Bounded Context - Value Objects.

Immutable data structures representing positions and antennas on the grid.
All validation occurs at construction time via Pydantic.

Axis convention: x is the row index, y is the column index. Ordering across
the context is lexicographic on (x, y), x primary.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------
class Coordinate(BaseModel):
    """Integer grid position (Value Object).

    Note on __eq__ and __hash__: Pydantic frozen models compare by value and
    are hashable, so a Coordinate can key dicts and live in sets.
    """

    x: int  # Row
    y: int  # Column

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[int, int]:
        """Return (x, y), the ordering key."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


# ---------------------------------------------------------------------------
# Antenna
# ---------------------------------------------------------------------------
class Antenna(BaseModel):
    """Antenna with a frequency label at a grid position (Value Object).

    Invariants:
        AN-1: frequency is exactly one character
    """

    frequency: str = Field(min_length=1, max_length=1)
    x: int
    y: int

    model_config = ConfigDict(frozen=True)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(x=self.x, y=self.y)

    def key(self) -> tuple[int, int]:
        return (self.x, self.y)


# ---------------------------------------------------------------------------
# AntennaGrid
# ---------------------------------------------------------------------------
class AntennaGrid(BaseModel):
    """Loaded rectangular grid with its antennas (Value Object).

    Produced by grid loaders. Antennas appear in row-major, left-to-right scan
    order, which is also the (x, y) order.

    Invariants:
        AG-1: rows > 0 and columns > 0
        AG-2: every antenna lies inside [0, rows) x [0, columns)
        AG-3: antennas strictly ordered by (x, y) (implies unique positions)
    """

    rows: int = Field(gt=0)
    columns: int = Field(gt=0)
    antennas: tuple[Antenna, ...] = ()
    source: str | None = None  # Filename the grid was read from, if any

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_antennas(self) -> "AntennaGrid":
        # AG-2: Inside bounds
        for antenna in self.antennas:
            if not (0 <= antenna.x < self.rows and 0 <= antenna.y < self.columns):
                raise ValueError(
                    f"Antenna at ({antenna.x}, {antenna.y}) outside "
                    f"{self.rows}x{self.columns} grid"
                )

        # AG-3: Strict row-major order
        for i in range(1, len(self.antennas)):
            if self.antennas[i].key() <= self.antennas[i - 1].key():
                raise ValueError("Antennas must be strictly ordered by (x, y)")

        return self

    def triples(self) -> list[tuple[str, int, int]]:
        """Return (frequency, row, col) for every antenna, in scan order."""
        return [(a.frequency, a.x, a.y) for a in self.antennas]

    def frequencies(self) -> tuple[str, ...]:
        """Return the distinct frequency labels, sorted."""
        return tuple(sorted({a.frequency for a in self.antennas}))

    def occupancy(self) -> float:
        """Return fraction of cells holding an antenna (0.0 to 1.0)."""
        return len(self.antennas) / (self.rows * self.columns)
