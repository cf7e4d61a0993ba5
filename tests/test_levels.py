"""Tests for level assignment."""

import pytest
from conftest import dot_graph

from gene_edges.config import Settings
from gene_edges.errors import UnreadableFile
from gene_edges.graph import assign_levels, build_edge_set
from gene_edges.models import EdgeKey


@pytest.fixture
def whole(write_file):
    """Whole graph with A-B, C-D and E-F."""
    return write_file("whole.dot", dot_graph(("A", "B"), ("C", "D"), ("E", "F")))


def test_first_appearance_wins(whole, write_levels):
    """An edge first seen at level 2 stays at 2 despite later reappearance."""
    prefix = write_levels([], [], [("C", "D")], [("C", "D")], [("C", "D")])
    edges = build_edge_set(whole, max_level=4)

    assign_levels(prefix, 4, edges)

    assert edges[EdgeKey("C", "D")].level == 2


def test_lowest_level_recorded(whole, write_levels):
    prefix = write_levels([("A", "B")], [("A", "B")])
    edges = build_edge_set(whole, max_level=1)

    assign_levels(prefix, 1, edges)

    assert edges[EdgeKey("A", "B")].level == 0


def test_whole_graph_only_keeps_sentinel(whole, write_levels):
    prefix = write_levels([("A", "B")], [("C", "D")])
    edges = build_edge_set(whole, max_level=1)

    assign_levels(prefix, 1, edges)

    assert edges[EdgeKey("E", "F")].level == 2
    assert edges[EdgeKey("F", "E")].level == 2


def test_only_forward_direction_levelled(whole, write_levels):
    """The reverse record keeps the sentinel unless its own line appears."""
    prefix = write_levels([("A", "B")], [("D", "C")])
    edges = build_edge_set(whole, max_level=1)

    assign_levels(prefix, 1, edges)

    assert edges[EdgeKey("A", "B")].level == 0
    assert edges[EdgeKey("B", "A")].level == 2
    assert edges[EdgeKey("D", "C")].level == 1
    assert edges[EdgeKey("C", "D")].level == 2


def test_orphan_created_and_levelled(whole, write_levels, capsys):
    prefix = write_levels([("A", "B")], [("X", "Y")])
    edges = build_edge_set(whole, max_level=1)

    report = assign_levels(prefix, 1, edges)

    assert EdgeKey("X", "Y") in edges
    assert EdgeKey("Y", "X") in edges
    assert edges[EdgeKey("X", "Y")].level == 1
    assert edges[EdgeKey("Y", "X")].level == 2
    assert [o.key for o in report.orphans] == [EdgeKey("X", "Y")]
    assert report.orphans[0].filename.endswith("lvl+1.dot")
    assert "Orphan found" in capsys.readouterr().err


def test_orphan_reverse_seen_later(whole, write_levels):
    prefix = write_levels([("X", "Y")], [("Y", "X")])
    edges = build_edge_set(whole, max_level=1)

    report = assign_levels(prefix, 1, edges)

    assert len(report.orphans) == 1
    assert edges[EdgeKey("X", "Y")].level == 0
    assert edges[EdgeKey("Y", "X")].level == 1


def test_no_orphans_for_known_edges(whole, write_levels, capsys):
    prefix = write_levels([("A", "B"), ("E", "F")])
    edges = build_edge_set(whole, max_level=0)

    report = assign_levels(prefix, 0, edges)

    assert report.orphans == []
    assert report.edge_lines == 2
    assert report.assigned == 2
    assert "Orphan" not in capsys.readouterr().err


def test_level_counts(whole, write_levels):
    prefix = write_levels([("A", "B")])
    edges = build_edge_set(whole, max_level=0)

    report = assign_levels(prefix, 0, edges)

    assert report.level_counts(edges) == {0: 1, 1: 5}


def test_missing_level_file_raises(whole, write_levels):
    prefix = write_levels([("A", "B")])
    edges = build_edge_set(whole, max_level=1)

    with pytest.raises(UnreadableFile) as exc:
        assign_levels(prefix, 1, edges)
    assert exc.value.path.name == "lvl+1.dot"


def test_custom_extension(whole, tmp_path):
    (tmp_path / "lvl+0.gv").write_text(dot_graph(("C", "D")), encoding="utf-8")
    edges = build_edge_set(whole, max_level=0)

    report = assign_levels(str(tmp_path / "lvl+"), 0, edges, config=Settings(level_extension="gv"))

    assert report.files == [str(tmp_path / "lvl+0.gv")]
    assert edges[EdgeKey("C", "D")].level == 0


def test_max_level_mismatch_rejected(whole, write_levels):
    prefix = write_levels([("A", "B")], [("C", "D")])
    edges = build_edge_set(whole, max_level=0)

    with pytest.raises(ValueError, match="does not match"):
        assign_levels(prefix, 1, edges)
    assert edges[EdgeKey("A", "B")].level == 1
