"""Infrastructure adapters for the grid bounded context.

This module provides the infrastructure layer implementations for grid
operations, including loading antenna grids from text files.
"""

from .text_grid_adapter import TextGridAdapter, parse_grid

__all__ = ["TextGridAdapter", "parse_grid"]
