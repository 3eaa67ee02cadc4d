"""Single source of truth for expected grid test fixtures.

This module defines the list of expected fixture filenames used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/adapters/test_fixtures_sanity.py (existence verification)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing fixtures, update ONLY this list.
"""

from __future__ import annotations

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "antennas_blank.txt",  # All free cells: loads with zero antennas
        "antennas_crlf.txt",  # Windows line endings
        "antennas_mixed.grid",  # Two frequencies, several nefasto cells
        "antennas_ragged.txt",  # Row width mismatch: rejected
        "antennas_sample.txt",  # Reference 6x10 grid with four 'A' antennas
        "antennas_table.csv",  # Unsupported suffix: rejected
        "empty.txt",  # Zero-byte file: rejected
    ]
)

# Count derived from list for verification
EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
