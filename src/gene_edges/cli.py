"""
Command-line interface for gene_edges.

Commands:
- merge: Merge the whole graph, level graphs and evidence tables into a Neo4j CSV
- version: Print the package version
"""

import time
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from gene_edges import __version__
from gene_edges.config import settings
from gene_edges.errors import GeneEdgesError
from gene_edges.pipeline import MergeInputs, run_merge

app = typer.Typer(
    name="gene-edges",
    help="Leveled gene interaction edges for Neo4j",
    no_args_is_help=True,
)
console = Console(stderr=True)


def format_elapsed(seconds: float) -> str:
    """Render a duration as 'H hours, M minutes and S seconds'."""
    sec = int(seconds)
    hours = (sec // 3600) % 24
    minutes = (sec // 60) % 60
    return f"{hours} hours, {minutes} minutes and {sec % 60} seconds"


@app.command()
def merge(
    wholegraph: Path = typer.Option(
        ..., "--wholegraph", "-w",
        exists=True, dir_okay=False, readable=True,
        help="Whole graph file (DOT) the level graphs were built from",
    ),
    biogrid: Path = typer.Option(
        ..., "--biogrid", "-b",
        exists=True, dir_okay=False, readable=True,
        help="BioGRID tab3 file (header line, symbols in cols 8-9, system in 13, PMID in 15)",
    ),
    string: Path = typer.Option(
        ..., "--string", "-s",
        exists=True, dir_okay=False, readable=True,
        help="STRING edge list (gene1, gene2, type, ...), human only",
    ),
    ppaxe: Path = typer.Option(
        ..., "--ppaxe", "-p",
        exists=True, dir_okay=False, readable=True,
        help="PPaxe output (gene1, gene2, PMID, score, ...)",
    ),
    maxlvl: int = typer.Option(
        ..., "--maxlvl", "-m", min=0,
        help="Highest level graph to read (the largest N among the level files)",
    ),
    prefix: str = typer.Option(
        ..., "--prefix",
        help='Prefix of the level graph files, e.g. "all_graph_lvl+"',
    ),
    output: Path = typer.Option(
        ..., "--output", "-o", dir_okay=False,
        help="Output CSV file (overwritten)",
    ),
    header: bool = typer.Option(
        False, "--header/--no-header", help="Write a header line for LOAD CSV WITH HEADERS"
    ),
    verbose: bool = typer.Option(
        settings.verbose, "--verbose/--quiet", "-v/-q", help="Print progress and timing"
    ),
):
    """Merge graphs and evidence sources into one CSV row per directed edge."""
    inputs = MergeInputs(
        wholegraph=wholegraph,
        prefix=prefix,
        max_level=maxlvl,
        biogrid=biogrid,
        string=string,
        ppaxe=ppaxe,
        output=output,
        include_header=header,
    )

    start_time = time.time()
    if verbose:
        console.print("\n[bold blue]PROGRAM STARTED[/]")
        console.print("  Program     gene-edges merge")
        console.print(f"  Version     v{__version__}")
        console.print(f"  Start time  {datetime.now():%c}\n")

    try:
        report = run_merge(inputs, verbose=verbose)
    except GeneEdgesError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(code=1) from e

    if report.levels and report.levels.orphans:
        console.print(
            f"[yellow]{len(report.levels.orphans):,} orphan edges were added from level files[/]"
        )

    if verbose:
        console.print("\n[bold blue]PROGRAM FINISHED[/]")
        console.print(f"  End time  {datetime.now():%c}")
        console.print(f"  Job took ~ {format_elapsed(time.time() - start_time)}\n")


@app.command()
def version():
    """Print the package version."""
    typer.echo(__version__)


if __name__ == "__main__":
    app()
