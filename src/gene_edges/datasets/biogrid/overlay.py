"""
BioGRID overlay.

Reads a BioGRID tab3 export (one header line) and marks the edges it
curates. Each row's experimental system is classed as genetic, physical or
unknown evidence, and exactly that one tally is incremented.

tab3 columns used (0-indexed):
    7   Official Symbol Interactor A
    8   Official Symbol Interactor B
    12  Experimental System
    14  Publication Source (PUBMED:xxxx)
"""

from enum import IntEnum
from pathlib import Path

from gene_edges.config import Settings, settings
from gene_edges.datasets.base import BaseOverlay, OverlayStats
from gene_edges.models import Edge, EdgeSet


class InteractionCategory(IntEnum):
    """Evidence class of a BioGRID experimental system."""

    GENETIC = 0
    PHYSICAL = 1
    UNKNOWN = 4


INTERACTION_TYPES: dict[str, InteractionCategory] = {
    # Physical: direct biochemical or structural evidence
    "Affinity Capture-Luminescence": InteractionCategory.PHYSICAL,
    "Affinity Capture-MS": InteractionCategory.PHYSICAL,
    "Affinity Capture-RNA": InteractionCategory.PHYSICAL,
    "Affinity Capture-Western": InteractionCategory.PHYSICAL,
    "Biochemical Activity": InteractionCategory.PHYSICAL,
    "Co-crystal Structure": InteractionCategory.PHYSICAL,
    "Co-fractionation": InteractionCategory.PHYSICAL,
    "Co-localization": InteractionCategory.PHYSICAL,
    "Co-purification": InteractionCategory.PHYSICAL,
    "Far Western": InteractionCategory.PHYSICAL,
    "FRET": InteractionCategory.PHYSICAL,
    "PCA": InteractionCategory.PHYSICAL,
    "Protein-peptide": InteractionCategory.PHYSICAL,
    "Protein-RNA": InteractionCategory.PHYSICAL,
    "Proximity Label-MS": InteractionCategory.PHYSICAL,
    "Reconstituted Complex": InteractionCategory.PHYSICAL,
    "Two-hybrid": InteractionCategory.PHYSICAL,
    # Genetic: phenotypic evidence
    "Dosage Growth Defect": InteractionCategory.GENETIC,
    "Dosage Lethality": InteractionCategory.GENETIC,
    "Dosage Rescue": InteractionCategory.GENETIC,
    "Negative": InteractionCategory.GENETIC,
    "Phenotypic Enhancement": InteractionCategory.GENETIC,
    "Phenotypic Suppression": InteractionCategory.GENETIC,
    "Positive": InteractionCategory.GENETIC,
    "Synthetic Growth Defect": InteractionCategory.GENETIC,
    "Synthetic Haploinsufficiency": InteractionCategory.GENETIC,
    "Synthetic Lethality": InteractionCategory.GENETIC,
    "Synthetic Rescue": InteractionCategory.GENETIC,
    # Explicit placeholder label
    "## UNKNOWN ##": InteractionCategory.UNKNOWN,
}


def interaction_category(system: str | None) -> InteractionCategory:
    """Class an experimental system label; unlisted labels are UNKNOWN."""
    if system is None:
        return InteractionCategory.UNKNOWN
    return INTERACTION_TYPES.get(system, InteractionCategory.UNKNOWN)


class BioGRIDOverlay(BaseOverlay):
    """Annotate edges with BioGRID curation."""

    source_key = "biogrid"
    columns = (7, 8, 12, 14)
    has_header = True

    def update(self, edge: Edge, system: str | None, pubmed_id: str | None) -> None:
        edge.biogrid = True
        edge.biogrid_pubmed_id = pubmed_id or self.missing_value

        category = interaction_category(system)
        if category == InteractionCategory.GENETIC:
            edge.genetic_interactions += 1
        elif category == InteractionCategory.PHYSICAL:
            edge.physical_interactions += 1
        else:
            edge.unknown_interactions += 1


def apply_biogrid(
    path: str | Path, edges: EdgeSet, config: Settings = settings
) -> OverlayStats:
    """Apply a BioGRID tab3 file to the edge set."""
    return BioGRIDOverlay(path, config=config).apply(edges)
