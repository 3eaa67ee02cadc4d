"""Domain Port(s) for Grid I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import AntennaGrid


class GridRepository(Protocol):
    """Port for obtaining antenna grids from external sources.

    Implementations live in infrastructure (e.g., text grid adapter).
    """

    def load_grid(self, file_path: Path | str) -> AntennaGrid:
        """Load a grid and return its antennas in row-major order."""
        ...
