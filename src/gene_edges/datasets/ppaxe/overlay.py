"""
PPaxe overlay.

PPaxe mines PubMed abstracts for protein-protein interactions. Its headerless
output has gene1, gene2, PubMed id and score in the first four columns. Text
mining says nothing about the mechanism, so matches count as unknown
interactions; the citation and score of the last matching row are kept.
"""

from pathlib import Path

from gene_edges.config import Settings, settings
from gene_edges.datasets.base import BaseOverlay, OverlayStats
from gene_edges.models import Edge, EdgeSet


class PPaxeOverlay(BaseOverlay):
    """Annotate edges with PPaxe literature evidence."""

    source_key = "ppaxe"
    columns = (0, 1, 2, 3)

    def update(self, edge: Edge, pubmed_id: str | None, score: str | None) -> None:
        edge.ppaxe = True
        edge.unknown_interactions += 1
        edge.ppaxe_pubmed_id = pubmed_id or self.missing_value
        edge.ppaxe_score = score or self.missing_value


def apply_ppaxe(
    path: str | Path, edges: EdgeSet, config: Settings = settings
) -> OverlayStats:
    """Apply a PPaxe output file to the edge set."""
    return PPaxeOverlay(path, config=config).apply(edges)
