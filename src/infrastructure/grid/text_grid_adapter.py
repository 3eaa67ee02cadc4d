"""Text grid adapter for GridRepository.

Implements loading of antenna grids from plain-text files. Each line is a
grid row; the empty-cell marker ('.') is a free cell and any other character
is an antenna whose frequency is that character.

Lifecycle:
1) Validate the path (exists, allowed suffix, not a symlink, non-empty,
   within the byte budget)
2) Decode as UTF-8
3) Parse rows and reject ragged grids before any antenna is built
4) Locate antennas with numpy in row-major order
5) Return an AntennaGrid Value Object
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from domain.grid.errors import (
    EmptyGridError,
    GridTooLargeError,
    InvalidGridFileError,
    MalformedGridError,
)
from domain.grid.value_objects import Antenna, AntennaGrid

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

EMPTY_CELL = "."
ALLOWED_SUFFIXES = (".txt", ".grid")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def split_rows(text: str) -> list[str]:
    """Split grid text into rows, dropping trailing blank lines.

    Handles both '\\n' and '\\r\\n' line endings.
    """
    rows = text.splitlines()
    while rows and rows[-1] == "":
        rows.pop()
    return rows


def to_cell_array(rows: list[str]) -> NDArray[np.str_]:
    """Convert validated rows to a (rows x columns) array of 1-char cells.

    Raises:
        EmptyGridError: If there are no rows or the rows are zero-width
        MalformedGridError: If any row's width differs from the first row's
        InvalidGridFileError: If a cell holds a control or other
            non-printable character
    """
    if not rows or not rows[0]:
        raise EmptyGridError("Grid has no cells")

    expected = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != expected:
            raise MalformedGridError(index, len(row), expected)
        for column, cell in enumerate(row):
            # NUL and friends would collapse to '' in a "<U1" array
            if not cell.isprintable():
                raise InvalidGridFileError(
                    f"Non-printable character {cell!r} at row {index}, column {column}"
                )

    return np.array([list(row) for row in rows], dtype="<U1")


def parse_grid(
    text: str, empty_cell: str = EMPTY_CELL, source: str | None = None
) -> AntennaGrid:
    """Parse grid text into an AntennaGrid.

    Args:
        text: Grid contents, one row per line
        empty_cell: Character marking a free cell
        source: Optional filename recorded on the result

    Returns:
        AntennaGrid with antennas in row-major order

    Raises:
        EmptyGridError: If the text holds no cells
        MalformedGridError: If the grid is not rectangular
        InvalidGridFileError: If a cell holds a non-printable character
    """
    cells = to_cell_array(split_rows(text))
    n_rows, n_cols = cells.shape

    # argwhere yields indices in C (row-major) order
    positions = np.argwhere(cells != empty_cell)
    antennas = tuple(
        Antenna(frequency=str(cells[r, c]), x=int(r), y=int(c)) for r, c in positions
    )

    return AntennaGrid(rows=n_rows, columns=n_cols, antennas=antennas, source=source)


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------
class TextGridAdapter:
    """Infrastructure adapter for loading antenna grids from text files.

    Parameters
    ----------
    max_bytes: int | None
        Optional size budget for the grid file. Files larger than this raise
        GridTooLargeError before they are read.
    empty_cell: str
        Character marking a free cell.
    """

    def __init__(self, max_bytes: int | None = None, empty_cell: str = EMPTY_CELL) -> None:
        if len(empty_cell) != 1:
            raise ValueError(f"empty_cell must be one character, got {empty_cell!r}")
        self.max_bytes = max_bytes
        self.empty_cell = empty_cell

    def load_grid(self, file_path: Path | str) -> AntennaGrid:
        """Load a text grid and return its antennas.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidGridFileError: Wrong suffix, symlink, or not UTF-8 text
            EmptyGridError: Zero-byte file or no cells
            GridTooLargeError: File exceeds max_bytes
            MalformedGridError: Rows of differing width
        """
        path = Path(file_path)

        # Check existence first to ensure missing files surface as FileNotFoundError
        if not path.exists():
            raise FileNotFoundError(str(path))

        if path.suffix.lower() not in ALLOWED_SUFFIXES:
            raise InvalidGridFileError(f"Unsupported file extension: {path.suffix}")

        try:
            if path.is_symlink():
                raise InvalidGridFileError("Symlinks are not permitted")
            size = path.stat().st_size
            if size == 0:
                raise EmptyGridError("Empty file")
            if self.max_bytes is not None and size > self.max_bytes:
                raise GridTooLargeError(
                    f"File size {size}B exceeds budget {self.max_bytes}B"
                )
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidGridFileError(f"Grid is not UTF-8 text: {e.reason}") from e
        except OSError as e:
            # Log only filename, errno, and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        grid = parse_grid(text, empty_cell=self.empty_cell, source=path.name)

        if not grid.antennas:
            logger.warning("Grid %s: no antennas found", path.name)
        logger.debug(
            "Grid %s: Loaded %dx%d grid with %d antennas",
            path.name,
            grid.rows,
            grid.columns,
            len(grid.antennas),
        )
        return grid
