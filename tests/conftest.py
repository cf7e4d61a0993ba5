"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest


def dot_graph(*pairs: tuple[str, str], name: str = "G") -> str:
    """Render gene pairs as a DOT digraph with a few non-edge lines."""
    lines = [f"digraph {name} {{", "  node [shape=ellipse];", '  "ORPHANNODE";']
    lines += [f'  "{a}" -> "{b}" [penwidth=1];' for a, b in pairs]
    lines.append("}")
    return "\n".join(lines) + "\n"


def biogrid_row(gene1: str, gene2: str, system: str, pubmed_id: str) -> str:
    """Build a 16-column BioGRID tab3 line with the fields the overlay reads."""
    cols = [f"x{i}" for i in range(16)]
    cols[7] = gene1
    cols[8] = gene2
    cols[12] = system
    cols[14] = pubmed_id
    return "\t".join(cols)


BIOGRID_HEADER = "\t".join(f"#Column {i}" for i in range(16))


@pytest.fixture
def write_file(tmp_path: Path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_biogrid(write_file):
    """Write a BioGRID tab3 file from (gene1, gene2, system, pmid) tuples."""

    def _write(rows: list[tuple[str, str, str, str]], name: str = "biogrid.tab3.txt") -> Path:
        lines = [BIOGRID_HEADER] + [biogrid_row(*row) for row in rows]
        return write_file(name, "\n".join(lines) + "\n")

    return _write


@pytest.fixture
def write_levels(tmp_path: Path):
    """Write level graphs lvl+0.dot, lvl+1.dot, ... and return the prefix."""

    def _write(*levels: list[tuple[str, str]]) -> str:
        prefix = tmp_path / "lvl+"
        for level, pairs in enumerate(levels):
            Path(f"{prefix}{level}.dot").write_text(dot_graph(*pairs), encoding="utf-8")
        return str(prefix)

    return _write
