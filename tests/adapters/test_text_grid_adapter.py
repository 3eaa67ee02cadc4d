"""Tests for TextGridAdapter and parse_grid."""

from __future__ import annotations

import logging

import pytest

from domain.grid.errors import (
    EmptyGridError,
    GridTooLargeError,
    InvalidGridFileError,
    MalformedGridError,
)
from domain.grid.registry import AntennaRegistry
from domain.grid.repositories import GridRepository
from domain.grid.services import detect_antinodes
from domain.network.graph import AntennaGraph, connect_same_frequency
from domain.network.traversal import breadth_first, depth_first

# Use infrastructure.* (not src.infrastructure.*) for consistency with domain.* imports.
from infrastructure.grid.text_grid_adapter import (
    TextGridAdapter,
    parse_grid,
    split_rows,
)

SAMPLE = "..........\n...A......\n........A.\n.....A....\n..........\n......A...\n"


# ===========================================================================
# parse_grid
# ===========================================================================
def test_parse_sample_grid():
    grid = parse_grid(SAMPLE)
    assert (grid.rows, grid.columns) == (6, 10)
    assert grid.triples() == [("A", 1, 3), ("A", 2, 8), ("A", 3, 5), ("A", 5, 6)]


def test_parse_without_trailing_newline():
    grid = parse_grid("A.\n.B")
    assert (grid.rows, grid.columns) == (2, 2)
    assert grid.triples() == [("A", 0, 0), ("B", 1, 1)]


def test_parse_crlf_line_endings():
    grid = parse_grid("A..\r\n...\r\n..A\r\n")
    assert (grid.rows, grid.columns) == (3, 3)
    assert grid.triples() == [("A", 0, 0), ("A", 2, 2)]


def test_parse_custom_empty_cell():
    grid = parse_grid("#A\n0#\n", empty_cell="#")
    assert grid.triples() == [("A", 0, 1), ("0", 1, 0)]


def test_parse_ragged_grid_raises_with_row_details():
    with pytest.raises(MalformedGridError) as exc_info:
        parse_grid("....\n...\n....\n")
    assert exc_info.value.row == 1
    assert exc_info.value.width == 3
    assert exc_info.value.expected == 4


def test_parse_blank_line_in_middle_is_ragged():
    with pytest.raises(MalformedGridError):
        parse_grid("..\n\n..\n")


@pytest.mark.parametrize("text", ["", "\n", "\n\n"])
def test_parse_empty_text_raises(text):
    with pytest.raises(EmptyGridError):
        parse_grid(text)


@pytest.mark.parametrize("text", ["A\x00.\n...\n", "...\n.\t.\n", "..\x1b\n...\n"])
def test_parse_control_character_raises(text):
    with pytest.raises(InvalidGridFileError, match="Non-printable character"):
        parse_grid(text)


def test_parse_control_character_reports_position():
    with pytest.raises(InvalidGridFileError, match="row 1, column 2"):
        parse_grid("...\n..\x00\n")


def test_load_file_with_nul_byte_raises(tmp_path):
    path = tmp_path / "nul.txt"
    path.write_bytes(b"A\x00.\n...\n")
    with pytest.raises(InvalidGridFileError):
        TextGridAdapter().load_grid(path)


def test_split_rows_drops_only_trailing_blank_lines():
    assert split_rows("ab\ncd\n\n\n") == ["ab", "cd"]


# ===========================================================================
# TextGridAdapter
# ===========================================================================
def test_adapter_satisfies_repository_port():
    repository: GridRepository = TextGridAdapter()
    assert callable(repository.load_grid)


def test_adapter_rejects_multichar_empty_cell():
    with pytest.raises(ValueError):
        TextGridAdapter(empty_cell="..")


def test_file_not_found_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TextGridAdapter().load_grid(tmp_path / "missing.txt")


def test_unsupported_suffix_raises(fixtures_dir):
    with pytest.raises(InvalidGridFileError, match="extension"):
        TextGridAdapter().load_grid(fixtures_dir / "antennas_table.csv")


def test_empty_file_raises(fixtures_dir):
    with pytest.raises(EmptyGridError, match="Empty file"):
        TextGridAdapter().load_grid(fixtures_dir / "empty.txt")


def test_ragged_file_raises(fixtures_dir):
    with pytest.raises(MalformedGridError):
        TextGridAdapter().load_grid(fixtures_dir / "antennas_ragged.txt")


def test_symlink_rejected(tmp_path, fixtures_dir):
    link = tmp_path / "link.txt"
    try:
        link.symlink_to(fixtures_dir / "antennas_sample.txt")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")
    with pytest.raises(InvalidGridFileError, match="Symlinks"):
        TextGridAdapter().load_grid(link)


def test_size_budget_exceeded(fixtures_dir):
    adapter = TextGridAdapter(max_bytes=10)
    with pytest.raises(GridTooLargeError):
        adapter.load_grid(fixtures_dir / "antennas_sample.txt")


def test_non_utf8_file_raises(tmp_path):
    p = tmp_path / "latin.txt"
    p.write_bytes(b"A\xff\n..\n")
    with pytest.raises(InvalidGridFileError, match="UTF-8"):
        TextGridAdapter().load_grid(p)


def test_os_error_logged_and_reraised(tmp_path, monkeypatch, caplog):
    p = tmp_path / "locked.txt"
    p.write_text("A.\n", encoding="utf-8")

    def _raise_permission_error(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("pathlib.Path.read_text", _raise_permission_error)

    with caplog.at_level(logging.ERROR):
        with pytest.raises(PermissionError):
            TextGridAdapter().load_grid(p)
    assert "locked.txt" in caplog.text
    assert str(tmp_path) not in caplog.text


def test_load_sample_grid(fixtures_dir, caplog):
    with caplog.at_level(logging.DEBUG, logger="infrastructure.grid.text_grid_adapter"):
        grid = TextGridAdapter().load_grid(fixtures_dir / "antennas_sample.txt")

    assert grid.source == "antennas_sample.txt"
    assert (grid.rows, grid.columns) == (6, 10)
    assert "Loaded 6x10 grid with 4 antennas" in caplog.text


def test_load_str_path(fixtures_dir):
    grid = TextGridAdapter().load_grid(str(fixtures_dir / "antennas_mixed.grid"))
    assert len(grid.antennas) == 5


def test_blank_grid_warns(fixtures_dir, caplog):
    with caplog.at_level(logging.WARNING):
        grid = TextGridAdapter().load_grid(fixtures_dir / "antennas_blank.txt")
    assert grid.antennas == ()
    assert (grid.rows, grid.columns) == (3, 4)
    assert "no antennas found" in caplog.text


# ===========================================================================
# End to end: file -> registry / graph -> queries
# ===========================================================================
def test_sample_grid_registry_and_antinodes(fixtures_dir):
    grid = TextGridAdapter().load_grid(fixtures_dir / "antennas_sample.txt")
    registry = AntennaRegistry.from_antennas(grid.antennas)

    assert [a.key() for a in registry] == [(1, 3), (2, 8), (3, 5), (5, 6)]
    assert detect_antinodes(registry).as_tuples() == [(2, 4)]


def test_sample_grid_reference_session(fixtures_dir):
    """Insert 'Z', remove (3,5), then rescan: the only even pair is gone."""
    grid = TextGridAdapter().load_grid(fixtures_dir / "antennas_sample.txt")
    registry = AntennaRegistry.from_antennas(grid.antennas)

    assert registry.insert("Z", 2, 3) is True
    assert registry.remove(3, 5) is True
    assert [a.key() for a in registry] == [(1, 3), (2, 3), (2, 8), (5, 6)]
    assert len(detect_antinodes(registry)) == 0


def test_mixed_grid_graph_queries(fixtures_dir):
    grid = TextGridAdapter().load_grid(fixtures_dir / "antennas_mixed.grid")
    graph = AntennaGraph.from_antennas(grid.antennas)
    registry = AntennaRegistry.from_antennas(grid.antennas)

    assert connect_same_frequency(graph) == 4
    assert depth_first(graph, 1, 1) == breadth_first(graph, 1, 1)
    assert depth_first(graph, 1, 1).as_tuples() == [(1, 1), (3, 3)]
    assert sorted(detect_antinodes(registry).as_tuples()) == [
        (1, 2),
        (2, 0),
        (2, 2),
        (3, 2),
    ]


def test_registry_and_graph_are_independent(fixtures_dir):
    grid = TextGridAdapter().load_grid(fixtures_dir / "antennas_mixed.grid")
    registry = AntennaRegistry.from_antennas(grid.antennas)
    graph = AntennaGraph.from_antennas(grid.antennas)

    registry.remove(0, 0)
    assert graph.vertex(0, 0) is not None
    graph.clear()
    assert len(registry) == 4
