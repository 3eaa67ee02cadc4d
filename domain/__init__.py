"""Antenna Grid Domain Layer.

This package contains the core logic organized by bounded contexts:
- grid: Antenna positions, registry, nefasto (antinode) detection
- network: Same-frequency links, reachability, path enumeration
"""

# Imports alphabetized per project style (isort)
from domain import grid, network

__all__ = ["grid", "network"]
