"""
STRING overlay.

Reads a headerless STRING edge list already mapped to gene symbols (human
only). Columns: gene1, gene2, interaction type, then score columns that are
not used. Every matching row counts as physical evidence whatever its type
label says.
"""

from pathlib import Path

from gene_edges.config import Settings, settings
from gene_edges.datasets.base import BaseOverlay, OverlayStats
from gene_edges.models import Edge, EdgeSet


class STRINGOverlay(BaseOverlay):
    """Annotate edges with STRING associations."""

    source_key = "string"
    columns = (0, 1, 2)

    def update(self, edge: Edge, interaction_type: str | None) -> None:
        edge.string = True
        edge.physical_interactions += 1


def apply_string(
    path: str | Path, edges: EdgeSet, config: Settings = settings
) -> OverlayStats:
    """Apply a STRING edge list to the edge set."""
    return STRINGOverlay(path, config=config).apply(edges)
