"""
Error taxonomy for gene_edges.

Every error here is fatal for a merge run: the pipeline lets them propagate
and the CLI turns them into a non-zero exit.
"""

from pathlib import Path

__all__ = [
    "GeneEdgesError",
    "MalformedLabel",
    "MalformedTable",
    "UnreadableFile",
    "UnwritableOutput",
]


class GeneEdgesError(Exception):
    """Base class for all gene_edges errors."""


class MalformedLabel(GeneEdgesError, ValueError):
    """A graph token has no quoted gene label."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Cannot clean {token!r}: no quoted gene label")


class MalformedTable(GeneEdgesError, ValueError):
    """An evidence table lacks the columns its overlay reads."""

    def __init__(self, path: str | Path, needed: int, found: int):
        self.path = Path(path)
        self.needed = needed
        self.found = found
        super().__init__(f"{self.path} has {found} columns, expected at least {needed}")


class UnreadableFile(GeneEdgesError, OSError):
    """A required input file is missing or cannot be opened."""

    def __init__(self, path: str | Path, reason: str | None = None):
        self.path = Path(path)
        message = f"Cannot open {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnwritableOutput(GeneEdgesError, OSError):
    """The output destination cannot be created."""

    def __init__(self, path: str | Path, reason: str | None = None):
        self.path = Path(path)
        message = f"Cannot write {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
