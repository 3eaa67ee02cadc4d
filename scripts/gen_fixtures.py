#!/usr/bin/env python3
"""Generate text grid fixtures for loader and domain tests.

This script creates all test fixtures listed in shared/fixtures_expected.py.
Fixtures are small synthetic grids written from numpy character arrays.

Usage:
    python scripts/gen_fixtures.py

Requirements:
    pip install numpy

Output:
    tests/fixtures/*.txt (and .grid, .csv)

Dependencies:
    This script imports from shared/fixtures_expected.py (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"

EMPTY_CELL = "."


def ensure_dir() -> None:
    """Ensure fixtures directory exists."""
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {FIXTURES_DIR}")


# =============================================================================
# Helper: write_grid
# =============================================================================
def blank_grid(rows: int, columns: int) -> NDArray[np.str_]:
    """Return a rows x columns array of free cells."""
    return np.full((rows, columns), EMPTY_CELL, dtype="<U1")


def place(cells: NDArray[np.str_], antennas: list[tuple[str, int, int]]) -> None:
    """Write (frequency, row, col) antennas into the cell array in place."""
    for frequency, row, col in antennas:
        cells[row, col] = frequency


def write_grid(path: Path, cells: NDArray[np.str_], newline: str = "\n") -> None:
    """Write a cell array as text, one row per line, trailing newline included."""
    lines = ["".join(row) for row in cells]
    # newline="" disables translation so CRLF fixtures stay byte-exact
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(newline.join(lines) + newline)
    print(f"  Created: {path.name} ({cells.shape[0]}x{cells.shape[1]})")


# =============================================================================
# Fixture Generators
# =============================================================================
def gen_antennas_sample() -> None:
    """Reference grid: 'A' at (1,3), (2,8), (3,5), (5,6)."""
    cells = blank_grid(6, 10)
    place(cells, [("A", 1, 3), ("A", 2, 8), ("A", 3, 5), ("A", 5, 6)])
    write_grid(FIXTURES_DIR / "antennas_sample.txt", cells)


def gen_antennas_mixed() -> None:
    """Two frequencies. Nefasto cells: (1,2), (2,0), (3,2) from 'A'; (2,2) from 'b'."""
    cells = blank_grid(5, 6)
    place(
        cells,
        [("A", 0, 0), ("b", 1, 1), ("A", 2, 4), ("b", 3, 3), ("A", 4, 0)],
    )
    write_grid(FIXTURES_DIR / "antennas_mixed.grid", cells)


def gen_antennas_blank() -> None:
    """3x4 grid with no antennas."""
    write_grid(FIXTURES_DIR / "antennas_blank.txt", blank_grid(3, 4))


def gen_antennas_crlf() -> None:
    """3x3 grid with Windows line endings."""
    cells = blank_grid(3, 3)
    place(cells, [("A", 0, 0), ("A", 2, 2)])
    write_grid(FIXTURES_DIR / "antennas_crlf.txt", cells, newline="\r\n")


def gen_antennas_ragged() -> None:
    """Second row is one cell short."""
    path = FIXTURES_DIR / "antennas_ragged.txt"
    path.write_text("..A.\n.A.\n....\n", encoding="utf-8")
    print(f"  Created: {path.name} (ragged)")


def gen_antennas_table() -> None:
    """Antenna list in CSV form: wrong suffix for the loader."""
    path = FIXTURES_DIR / "antennas_table.csv"
    path.write_text("A,0,0\nA,2,4\n", encoding="utf-8")
    print(f"  Created: {path.name}")


def gen_empty() -> None:
    """Zero-byte grid file."""
    path = FIXTURES_DIR / "empty.txt"
    path.write_bytes(b"")
    print(f"  Created: {path.name} (0 bytes)")


# =============================================================================
# Main
# =============================================================================
def main() -> int:
    print("=" * 60)
    print("Generating grid fixtures")
    print("=" * 60)

    ensure_dir()

    gen_antennas_sample()
    gen_antennas_mixed()
    gen_antennas_blank()
    gen_antennas_crlf()
    gen_antennas_ragged()
    gen_antennas_table()
    gen_empty()

    # Verify generated fixtures match expected list exactly
    found_set = {f.name for f in FIXTURES_DIR.iterdir() if f.is_file()}
    expected_set = set(EXPECTED_FIXTURES)

    missing = expected_set - found_set
    extra = found_set - expected_set

    if found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/fixtures_expected.py to match generated fixtures.")
        return 1

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
