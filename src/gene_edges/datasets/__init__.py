"""
Evidence sources overlaid on the edge set.

Each source has its own submodule with an overlay class (table → edges) and
an ``apply_<source>`` shortcut. Overlays run in the order of SOURCES:

- biogrid: curated interactions, classed genetic/physical/unknown
- string: association scores, counted as physical evidence
- ppaxe: PubMed text mining, counted as unknown evidence
"""

from gene_edges.datasets.base import BaseOverlay, OverlayStats
from gene_edges.datasets.biogrid import BioGRIDOverlay
from gene_edges.datasets.ppaxe import PPaxeOverlay
from gene_edges.datasets.string import STRINGOverlay

SOURCES = [
    "biogrid",
    "string",
    "ppaxe",
]

OVERLAYS: dict[str, type[BaseOverlay]] = {
    "biogrid": BioGRIDOverlay,
    "string": STRINGOverlay,
    "ppaxe": PPaxeOverlay,
}

__all__ = ["SOURCES", "OVERLAYS", "BaseOverlay", "OverlayStats"]
