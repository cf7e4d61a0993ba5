"""
gene_edges: Leveled gene interaction edges for Neo4j

Merges a whole interaction graph (Graphviz DOT) with the per-level graphs it was
grown from, then overlays three evidence sources onto the resulting edges:

    BioGRID (curated) → STRING (association) → PPaxe (literature mining)

Every directed gene pair becomes one CSV row with its discovery level,
interaction-type tallies and provenance.

Core constraints:
- Whole-file batch job, everything held in memory and written once
- Overlays annotate existing edges, they never create new ones
- Any missing or unreadable input aborts the run
"""

__version__ = "0.1.0"
