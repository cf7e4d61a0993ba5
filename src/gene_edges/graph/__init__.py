"""
Graph file handling.

Provides:
- DOT edge-line parsing and gene label cleaning
- Whole-graph edge set construction
- Level assignment from the per-level graphs
"""

from gene_edges.graph.dot import build_edge_set, clean_gene, iter_dot_edges
from gene_edges.graph.levels import LevelReport, assign_levels

__all__ = ["build_edge_set", "clean_gene", "iter_dot_edges", "assign_levels", "LevelReport"]
