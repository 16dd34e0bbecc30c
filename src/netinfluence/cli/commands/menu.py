"""Interactive menu for netinfluence."""

from __future__ import annotations

import typer
from rich.panel import Panel
from rich.prompt import Prompt

from netinfluence.cli.common import console, mode_name, render_result
from netinfluence.core import LoaderError, ScoreError
from netinfluence.core.config import get_settings
from netinfluence.graph import InfluenceScorer, LoaderConfig, NetworkBuilder

MENU = (
    "1. Load UNWEIGHTED network and calculate influence\n"
    "2. Load WEIGHTED network and calculate influence\n"
    "0. Exit"
)


def _handle(weighted: bool) -> None:
    config = LoaderConfig.from_settings(get_settings(), weighted=weighted)
    try:
        network, report = NetworkBuilder().build_from_csv(config)
    except LoaderError as e:
        console.print(f"[red]{e.message}[/red]")
        return

    if report.rows_read == 0:
        console.print("[yellow]No data rows found in the file.[/yellow]")
    console.print(f"[green]Graph loaded ({mode_name(weighted)}).[/green]\n")

    names = network.nodes()
    if not names:
        console.print("[yellow]Graph is empty, nothing to calculate.[/yellow]")
        return

    console.print("[bold]Available nodes:[/bold]")
    for name in names:
        console.print(f" - {name}")

    start = Prompt.ask("\nEnter start node for influence score", console=console)

    try:
        result = InfluenceScorer().score(network, start.strip())
    except ScoreError as e:
        console.print(f"[red]{e.message}[/red]")
        return

    console.print(render_result(result))


def menu() -> None:
    """
    Run the interactive influence tool.

    Loads the configured unweighted or weighted file, lists its nodes and
    scores the node you pick, until you choose 0.
    """
    while True:
        console.print(Panel(MENU, title="Social Network Influence Tool"))
        choice = Prompt.ask("Your choice", console=console).strip()

        if choice == "1":
            _handle(weighted=False)
        elif choice == "2":
            _handle(weighted=True)
        elif choice == "0":
            console.print("Exiting...")
            raise typer.Exit()
        else:
            console.print("[red]Not a valid option.[/red]\n")
