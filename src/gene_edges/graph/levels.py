"""
Level assignment.

Level graphs are scanned from level 0 upward and each edge keeps the first
level it shows up in. Only the forward direction of each edge line is
levelled: the reverse record gets a level only when its own arrow line
appears in some level graph.
"""

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from gene_edges.config import Settings, settings
from gene_edges.graph.dot import iter_dot_edges
from gene_edges.models import EdgeKey, EdgeSet

console = Console(stderr=True)


@dataclass
class Orphan:
    """Edge found in a level graph but missing from the whole graph."""

    key: EdgeKey
    filename: str


@dataclass
class LevelReport:
    """Outcome of a level assignment pass."""

    files: list[str] = field(default_factory=list)
    edge_lines: int = 0
    assigned: int = 0
    orphans: list[Orphan] = field(default_factory=list)

    def level_counts(self, edges: EdgeSet) -> dict[int, int]:
        """Number of directed edges per level (sentinel included)."""
        counts: dict[int, int] = {}
        for key in edges:
            level = edges[key].level
            counts[level] = counts.get(level, 0) + 1
        return dict(sorted(counts.items()))


def add_orphan(edges: EdgeSet, key: EdgeKey, filename: str, report: LevelReport) -> None:
    """Warn about an orphan edge and insert both of its directions."""
    console.print(
        f"  [yellow]Warning:[/] Orphan found in level file {escape(filename)} => {escape(str(key))}"
    )
    edges.add_pair(key.gene1, key.gene2)
    report.orphans.append(Orphan(key=key, filename=filename))


def assign_levels(
    prefix: str | Path,
    max_level: int,
    edges: EdgeSet,
    config: Settings = settings,
) -> LevelReport:
    """
    Assign each edge the lowest level graph it appears in.

    Args:
        prefix: Path prefix of the level graphs (e.g. "graphs/all_graph_lvl+")
        max_level: Highest level to scan; levels 0..max_level must all exist
        edges: Edge set to update in place
        config: Settings providing the level file extension

    Returns:
        LevelReport with scan counts and orphans

    Raises:
        UnreadableFile: if any level graph is missing
        ValueError: if max_level differs from the one the edge set was built for
    """
    if max_level != edges.max_level:
        raise ValueError(
            f"max_level {max_level} does not match the edge set (built for {edges.max_level})"
        )

    report = LevelReport()
    sentinel = edges.sentinel_level

    for level in range(max_level + 1):
        filename = config.level_file(str(prefix), level)
        report.files.append(filename)
        for gene1, gene2 in iter_dot_edges(filename):
            report.edge_lines += 1
            key = EdgeKey(gene1, gene2)
            if key not in edges:
                add_orphan(edges, key, filename, report)
            edge = edges[key]
            if edge.level == sentinel:
                edge.level = level
                report.assigned += 1

    return report
