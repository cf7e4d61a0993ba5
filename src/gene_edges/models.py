"""
In-memory edge model.

Every gene pair is stored twice, once per direction, as two independent
records. Lookups are always by the exact ordered pair.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from gene_edges.config import settings


class EdgeKey(NamedTuple):
    """Directed gene pair."""

    gene1: str
    gene2: str

    def reversed(self) -> "EdgeKey":
        return EdgeKey(self.gene2, self.gene1)

    def __str__(self) -> str:
        return f"{self.gene1}->{self.gene2}"


@dataclass
class Edge:
    """Annotations for one directed edge."""

    level: int
    genetic_interactions: int = 0
    physical_interactions: int = 0
    unknown_interactions: int = 0
    biogrid: bool = False
    biogrid_pubmed_id: str = settings.missing_value
    string: bool = False
    ppaxe: bool = False
    ppaxe_score: str = settings.missing_value
    ppaxe_pubmed_id: str = settings.missing_value

    @property
    def is_corroborated(self) -> bool:
        """True when at least one evidence source mentions the edge."""
        return self.biogrid or self.string or self.ppaxe


class EdgeSet:
    """
    Owned map of directed edges, passed through every merge stage.

    Edges are only ever added (both directions at once) and mutated in place;
    nothing is removed.
    """

    def __init__(self, max_level: int, missing_value: str = settings.missing_value):
        if max_level < 0:
            raise ValueError(f"max_level must be >= 0, got {max_level}")
        self.max_level = max_level
        self.missing_value = missing_value
        self._edges: dict[EdgeKey, Edge] = {}

    @property
    def sentinel_level(self) -> int:
        """Level of edges not (yet) seen in any level graph."""
        return self.max_level + 1

    def new_edge(self) -> Edge:
        return Edge(
            level=self.sentinel_level,
            biogrid_pubmed_id=self.missing_value,
            ppaxe_score=self.missing_value,
            ppaxe_pubmed_id=self.missing_value,
        )

    def add_pair(self, gene1: str, gene2: str) -> EdgeKey:
        """
        Insert both directions of a gene pair with default annotations.

        Directions already present are left untouched.

        Returns:
            The forward key
        """
        key = EdgeKey(gene1, gene2)
        for k in (key, key.reversed()):
            if k not in self._edges:
                self._edges[k] = self.new_edge()
        return key

    def __getitem__(self, key: EdgeKey) -> Edge:
        return self._edges[key]

    def __contains__(self, key: object) -> bool:
        return key in self._edges

    def __iter__(self) -> Iterator[EdgeKey]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def items(self) -> Iterator[tuple[EdgeKey, Edge]]:
        yield from self._edges.items()
