"""Influence scoring commands for netinfluence."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from netinfluence.cli.common import console, load_network, render_result
from netinfluence.core import ScoreError
from netinfluence.graph import InfluenceScorer

app = typer.Typer(
    name="score",
    help="Influence scoring commands",
    no_args_is_help=True,
)

FILE_OPTION = typer.Option(
    None,
    "--file",
    "-f",
    help="Edge CSV file (defaults to the configured file for the mode)",
    dir_okay=False,
)


def _score(weighted: bool, start: str, file: Optional[Path]) -> None:
    network, _ = load_network(weighted, file)

    try:
        result = InfluenceScorer().score(network, start)
    except ScoreError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e

    console.print(render_result(result))


@app.command("unweighted")
def unweighted(
    start: str = typer.Argument(..., help="Start node (case-insensitive)"),
    file: Optional[Path] = FILE_OPTION,
) -> None:
    """
    Score a node in an unweighted network using breadth-first search.

    Example:
        netinfluence score unweighted Alice --file network.csv
    """
    _score(False, start, file)


@app.command("weighted")
def weighted(
    start: str = typer.Argument(..., help="Start node (case-insensitive)"),
    file: Optional[Path] = FILE_OPTION,
) -> None:
    """
    Score a node in a weighted network using Dijkstra's algorithm.

    Example:
        netinfluence score weighted Alice --file weighted.csv
    """
    _score(True, start, file)
