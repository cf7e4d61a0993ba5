"""
Graphviz DOT edge parsing.

Only edge lines matter here. A line is an edge line when it contains the
``->`` arrow; the gene symbols are the quoted labels on either side of it:

    "TP53" -> "MDM2" [penwidth=2];

Graph attributes, braces and node declarations are skipped.
"""

import re
from collections.abc import Iterator
from pathlib import Path

from gene_edges.config import Settings, settings
from gene_edges.errors import MalformedLabel, UnreadableFile
from gene_edges.models import EdgeSet

ARROW = "->"

_QUOTED = re.compile(r'"(.*?)"')


def clean_gene(token: str) -> str:
    """
    Extract the gene symbol between the first pair of double quotes.

    Raises:
        MalformedLabel: if the token has no quoted label
    """
    match = _QUOTED.search(token)
    if match is None:
        raise MalformedLabel(token)
    return match.group(1)


def iter_dot_edges(path: str | Path) -> Iterator[tuple[str, str]]:
    """
    Yield (gene1, gene2) for every edge line of a DOT file, in file order.

    Raises:
        UnreadableFile: if the file cannot be opened
        MalformedLabel: if an edge line has an unquoted endpoint
    """
    try:
        fh = open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise UnreadableFile(path, exc.strerror) from exc

    with fh:
        for line in fh:
            if ARROW not in line:
                continue
            # Chained edges ("A" -> "B" -> "C") only contribute their first pair
            parts = line.rstrip("\n").split(ARROW)
            yield clean_gene(parts[0]), clean_gene(parts[1])


def build_edge_set(path: str | Path, max_level: int, config: Settings = settings) -> EdgeSet:
    """
    Build the canonical edge set from the whole graph.

    Both directions of every edge line are inserted with the sentinel level
    and default annotations.

    Args:
        path: Whole-graph DOT file
        max_level: Highest level graph that will be scanned
        config: Settings providing the missing-value placeholder

    Returns:
        EdgeSet holding both directions of every edge
    """
    edges = EdgeSet(max_level, missing_value=config.missing_value)
    for gene1, gene2 in iter_dot_edges(path):
        edges.add_pair(gene1, gene2)
    return edges
