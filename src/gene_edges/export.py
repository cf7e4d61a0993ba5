"""
CSV export of the merged edge set for Neo4j import.

One row per directed edge that at least one evidence source mentions. Both
directions of a pair are independent rows.
"""

from pathlib import Path

import polars as pl

from gene_edges.errors import UnwritableOutput
from gene_edges.models import EdgeSet

COLUMNS = [
    "gene1",
    "gene2",
    "level",
    "genetic_interaction",
    "physical_interaction",
    "unknown_interaction",
    "biogrid",
    "biogrid_pubmedid",
    "string",
    "ppaxe",
    "ppaxe_score",
    "ppaxe_pubmedid",
]

SCHEMA = {
    "gene1": pl.String,
    "gene2": pl.String,
    "level": pl.Int64,
    "genetic_interaction": pl.Int64,
    "physical_interaction": pl.Int64,
    "unknown_interaction": pl.Int64,
    "biogrid": pl.Int8,
    "biogrid_pubmedid": pl.String,
    "string": pl.Int8,
    "ppaxe": pl.Int8,
    "ppaxe_score": pl.String,
    "ppaxe_pubmedid": pl.String,
}


def to_frame(edges: EdgeSet) -> pl.DataFrame:
    """
    Collect the corroborated edges into a DataFrame in export column order.

    Edges no evidence source mentions are left out; flags become 0/1.
    """
    records = []
    for key, edge in edges.items():
        if not edge.is_corroborated:
            continue
        records.append(
            (
                key.gene1,
                key.gene2,
                edge.level,
                edge.genetic_interactions,
                edge.physical_interactions,
                edge.unknown_interactions,
                int(edge.biogrid),
                edge.biogrid_pubmed_id,
                int(edge.string),
                int(edge.ppaxe),
                edge.ppaxe_score,
                edge.ppaxe_pubmed_id,
            )
        )
    return pl.DataFrame(records, schema=SCHEMA, orient="row")


def write_records(
    edges: EdgeSet, output: str | Path, include_header: bool = False
) -> int:
    """
    Write corroborated edges to a comma-separated file, replacing it.

    Args:
        edges: Final edge set
        output: Destination CSV path
        include_header: Write the column names as a first line

    Returns:
        Number of edge rows written

    Raises:
        UnwritableOutput: if the destination cannot be opened
    """
    df = to_frame(edges)
    try:
        fh = open(output, "wb")
    except OSError as exc:
        raise UnwritableOutput(output, exc.strerror) from exc

    with fh:
        df.write_csv(fh, include_header=include_header)
    return df.height
