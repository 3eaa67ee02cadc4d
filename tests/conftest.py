"""Root pytest configuration for all tests.

Provides fixture paths and small prebuilt graphs shared by the grid,
network and infrastructure test modules. Domain tests build structures
directly; only infrastructure tests read files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.network.graph import AntennaGraph
from tests.conftest_utils import get_fixtures_dir


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return get_fixtures_dir()


@pytest.fixture
def mixed_graph() -> AntennaGraph:
    """Graph of antennas_mixed.grid with every same-frequency pair linked.

    'A' at (0,0), (2,4), (4,0) form a triangle; 'b' at (1,1), (3,3) form a
    single link. Links are made in graph order, so (0,0) lists (4,0) before
    (2,4).
    """
    graph = AntennaGraph()
    for frequency, x, y in [
        ("A", 0, 0),
        ("b", 1, 1),
        ("A", 2, 4),
        ("b", 3, 3),
        ("A", 4, 0),
    ]:
        graph.insert_vertex(frequency, x, y)
    graph.connect(0, 0, 2, 4)
    graph.connect(0, 0, 4, 0)
    graph.connect(1, 1, 3, 3)
    graph.connect(2, 4, 4, 0)
    return graph


@pytest.fixture
def chain_graph() -> AntennaGraph:
    """Four 'A' vertices linked as a line: (0,0)-(0,1)-(0,2)-(0,3)."""
    graph = AntennaGraph()
    for y in range(4):
        graph.insert_vertex("A", 0, y)
    for y in range(3):
        graph.connect(0, y, 0, y + 1)
    return graph
