"""
Base class for evidence overlays.

An overlay reads one tab-separated evidence table and annotates the edges
already in the edge set. Overlays never insert edges: rows naming a pair that
is not in the set are ignored, since the evidence tables cover far more genes
than any one graph.

All overlays match the exact ordered pair of a row. The reverse direction is
only annotated when the table has a reverse row of its own.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import polars as pl

from gene_edges.config import Settings, settings
from gene_edges.errors import MalformedTable, UnreadableFile
from gene_edges.models import Edge, EdgeKey, EdgeSet


@dataclass
class OverlayStats:
    """Row counts from applying one overlay."""

    source: str
    rows_read: int = 0
    rows_matched: int = 0
    rows_skipped: int = 0


class BaseOverlay(ABC):
    """Base class for evidence overlays (evidence table → edge set)."""

    source_key: str
    # 0-indexed positions of the columns handed to update(); the first two
    # are always gene1 and gene2
    columns: tuple[int, ...]
    has_header: bool = False

    def __init__(self, path: str | Path, config: Settings = settings):
        self.path = Path(path)
        self.missing_value = config.missing_value

    def read(self) -> pl.DataFrame:
        """
        Read the evidence table with every column as a string.

        The table is read with a fixed width of ``max(columns) + 1``: wider
        rows are truncated and shorter rows are padded with nulls, so one
        short row never decides the width of the whole table.

        Returns:
            DataFrame with one column per position in ``columns``

        Raises:
            UnreadableFile: if the file cannot be opened
            MalformedTable: if no row reaches the width ``columns`` needs
        """
        needed = max(self.columns) + 1
        schema = {f"column_{i + 1}": pl.String for i in range(needed)}

        try:
            fh = open(self.path, "rb")
        except OSError as exc:
            raise UnreadableFile(self.path, exc.strerror) from exc

        with fh:
            df = pl.read_csv(
                fh,
                separator="\t",
                has_header=False,
                skip_rows=1 if self.has_header else 0,
                schema=schema,
                quote_char=None,
                truncate_ragged_lines=True,
                raise_if_empty=False,
                encoding="utf8-lossy",
            )

        if df.height == 0:
            return pl.DataFrame(schema={f"col_{i}": pl.String for i in self.columns})

        # Widest populated column across all rows
        null_counts = df.null_count().row(0)
        found = max((i + 1 for i, n in enumerate(null_counts) if n < df.height), default=0)
        if found < needed:
            raise MalformedTable(self.path, needed=needed, found=found)

        return df.select(
            [pl.col(df.columns[i]).alias(f"col_{i}") for i in self.columns]
        )

    def apply(self, edges: EdgeSet) -> OverlayStats:
        """
        Annotate every edge whose forward pair appears in the table.

        Args:
            edges: Edge set to update in place

        Returns:
            OverlayStats with rows read, matched and skipped
        """
        stats = OverlayStats(source=self.source_key)
        for row in self.read().iter_rows():
            stats.rows_read += 1
            gene1, gene2, *values = row
            if gene1 is None or gene2 is None:
                stats.rows_skipped += 1
                continue
            key = EdgeKey(gene1, gene2)
            if key not in edges:
                continue
            self.update(edges[key], *values)
            stats.rows_matched += 1
        return stats

    @abstractmethod
    def update(self, edge: Edge, *values: str | None) -> None:
        """
        Apply one matching row to its edge.

        Args:
            edge: Edge whose forward key matched the row
            values: The row's remaining columns, in ``columns`` order
        """
        pass
