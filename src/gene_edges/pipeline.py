"""
Merge pipeline runner.

Runs the five stages in order against one EdgeSet:

    whole graph → levels → BioGRID → STRING → PPaxe → CSV

Any error aborts the run; a partial merge with a source silently missing
would misreport the evidence behind every edge.

Usage:
    from gene_edges.pipeline import MergeInputs, run_merge
    report = run_merge(MergeInputs(wholegraph=..., prefix=..., max_level=3, ...))
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gene_edges.config import Settings, settings
from gene_edges.datasets import OVERLAYS, SOURCES, OverlayStats
from gene_edges.export import write_records
from gene_edges.graph import LevelReport, assign_levels, build_edge_set
from gene_edges.models import EdgeSet

console = Console(stderr=True)


@dataclass
class MergeInputs:
    """Files and depth bound for one merge run."""

    wholegraph: Path
    prefix: str
    max_level: int
    biogrid: Path
    string: Path
    ppaxe: Path
    output: Path
    include_header: bool = False

    def source_path(self, source: str) -> Path:
        return {"biogrid": self.biogrid, "string": self.string, "ppaxe": self.ppaxe}[source]


@dataclass
class StageResult:
    """Timing and a one-line summary of a finished stage."""

    name: str
    duration: float
    detail: str


@dataclass
class MergeReport:
    """Everything a merge run produced besides the CSV itself."""

    edges: EdgeSet | None = None
    levels: LevelReport | None = None
    overlays: dict[str, OverlayStats] = field(default_factory=dict)
    rows_written: int = 0
    stages: list[StageResult] = field(default_factory=list)

    @property
    def duration(self) -> float:
        return sum(stage.duration for stage in self.stages)

    def summary_table(self) -> Table:
        """Build a rich table of stage timings."""
        table = Table(title="Merge Summary", show_header=True)
        table.add_column("Stage", style="cyan")
        table.add_column("Result")
        table.add_column("Time", justify="right", style="dim")
        for stage in self.stages:
            table.add_row(escape(stage.name), stage.detail, f"{stage.duration:.1f}s")
        return table

    def level_table(self) -> Table:
        """Build a rich table of directed edges per assigned level."""
        table = Table(title="Edges per Level", show_header=True)
        table.add_column("Level", style="cyan", justify="right")
        table.add_column("Edges", justify="right")
        if self.levels is None or self.edges is None:
            return table
        sentinel = self.edges.sentinel_level
        for level, count in self.levels.level_counts(self.edges).items():
            label = f"{level} (whole graph only)" if level == sentinel else str(level)
            table.add_row(label, f"{count:,}")
        return table


def _run_stage(
    report: MergeReport,
    name: str,
    func: Callable[[], Any],
    describe: Callable[[Any], str],
    verbose: bool,
) -> Any:
    """Run one stage, timing it and recording a summary line."""
    start_time = time.time()
    if verbose:
        with console.status(f"[cyan]{escape(name)}...[/]"):
            result = func()
    else:
        result = func()
    detail = describe(result)
    report.stages.append(StageResult(name=name, duration=time.time() - start_time, detail=detail))
    if verbose:
        console.print(f"  [green]✓[/] {escape(name)}: {detail}")
    return result


def run_merge(
    inputs: MergeInputs,
    config: Settings = settings,
    verbose: bool | None = None,
) -> MergeReport:
    """
    Build, level, annotate and export the edge set.

    Args:
        inputs: Input files, depth bound and output path
        config: Settings (level file extension, verbosity default)
        verbose: Print stage progress; defaults to ``config.verbose``

    Returns:
        MergeReport with the final edge set and per-stage stats

    Raises:
        GeneEdgesError: on any unreadable input, bad gene label or
            unwritable output
    """
    if verbose is None:
        verbose = config.verbose

    report = MergeReport()

    edges = _run_stage(
        report,
        f"Reading graph file {inputs.wholegraph}",
        lambda: build_edge_set(inputs.wholegraph, inputs.max_level, config=config),
        lambda e: f"{len(e):,} directed edges",
        verbose,
    )
    report.edges = edges

    report.levels = _run_stage(
        report,
        "Adding interaction level",
        lambda: assign_levels(inputs.prefix, inputs.max_level, edges, config=config),
        lambda r: f"{len(r.files)} level files, {r.assigned:,} levelled, {len(r.orphans):,} orphans",
        verbose,
    )

    for source in SOURCES:
        overlay = OVERLAYS[source](inputs.source_path(source), config=config)
        report.overlays[source] = _run_stage(
            report,
            f"Filtering {source}",
            lambda overlay=overlay: overlay.apply(edges),
            lambda s: f"{s.rows_matched:,} / {s.rows_read:,} rows matched",
            verbose,
        )

    report.rows_written = _run_stage(
        report,
        f"Printing csv to {inputs.output}",
        lambda: write_records(edges, inputs.output, include_header=inputs.include_header),
        lambda n: f"{n:,} rows written",
        verbose,
    )

    if verbose:
        console.print(report.level_table())
        console.print(report.summary_table())

    return report
