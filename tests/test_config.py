"""Tests for configuration module."""

from gene_edges.config import Settings


def test_default_settings():
    """Test that default settings are valid."""
    s = Settings()
    assert s.level_extension == "dot"
    assert s.missing_value == "NA"
    assert s.verbose is False


def test_level_file_name():
    """Test level file naming from prefix and level."""
    s = Settings()
    assert s.level_file("graphs/all_graph_lvl+", 3) == "graphs/all_graph_lvl+3.dot"


def test_level_file_custom_extension():
    """Test that a leading dot in the extension is not doubled."""
    s = Settings(level_extension=".gv")
    assert s.level_file("lvl", 0) == "lvl0.gv"


def test_settings_from_env(monkeypatch):
    """Test environment variable loading."""
    monkeypatch.setenv("GENE_EDGES_LEVEL_EXTENSION", "txt")
    monkeypatch.setenv("GENE_EDGES_VERBOSE", "true")
    s = Settings()
    assert s.level_extension == "txt"
    assert s.verbose is True
