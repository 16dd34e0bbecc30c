"""Network inspection commands for netinfluence."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from netinfluence.cli.common import console, load_network, mode_name
from netinfluence.core import GraphError
from netinfluence.graph import NetworkBuilder

app = typer.Typer(
    name="network",
    help="Network inspection commands",
    no_args_is_help=True,
)


@app.command("nodes")
def nodes(
    weighted: bool = typer.Option(
        False,
        "--weighted/--unweighted",
        "-w/-u",
        help="Graph mode of the input file",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Edge CSV file (defaults to the configured file for the mode)",
        dir_okay=False,
    ),
) -> None:
    """
    List the nodes of a network.

    Example:
        netinfluence network nodes --weighted
    """
    network, _ = load_network(weighted, file)
    names = network.nodes()

    if not names:
        console.print("[yellow]Graph is empty, nothing to list.[/yellow]")
        raise typer.Exit(1)

    console.print("[bold]Available nodes:[/bold]")
    for name in names:
        console.print(f" - {name}")
    console.print(f"\n[green]Total: {len(names)} nodes[/green]")


@app.command("stats")
def stats(
    weighted: bool = typer.Option(
        False,
        "--weighted/--unweighted",
        "-w/-u",
        help="Graph mode of the input file",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Edge CSV file (defaults to the configured file for the mode)",
        dir_okay=False,
    ),
) -> None:
    """
    Show statistics about a network and how its file was loaded.

    Example:
        netinfluence network stats --file network.csv
    """
    network, report = load_network(weighted, file)

    try:
        graph_stats = NetworkBuilder().get_graph_stats(network)
    except GraphError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e

    table = Table(title=f"Network Statistics ({mode_name(weighted)})")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    for key, value in graph_stats.items():
        label = key.replace("_", " ").capitalize()
        table.add_row(label, f"{value:.4f}" if isinstance(value, float) else f"{value:,}")

    table.add_row("Rows read", f"{report.rows_read:,}")
    table.add_row("Edges loaded", f"{report.edges_loaded:,}")
    table.add_row("Rows skipped", f"{report.rows_skipped:,}")
    for reason, count in sorted(report.skipped.items()):
        table.add_row(f"  {reason.replace('_', ' ')}", f"{count:,}", style="dim")

    console.print(table)
