"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from netinfluence.core import LoaderError
from netinfluence.core.config import get_settings
from netinfluence.graph import InfluenceResult, LoaderConfig, LoadReport, NetworkBuilder, SocialNetwork

console = Console()


def mode_name(weighted: bool) -> str:
    return "weighted" if weighted else "unweighted"


def load_network(weighted: bool, file: Path | None) -> tuple[SocialNetwork, LoadReport]:
    """Load a network for the CLI, exiting with code 1 on unreadable input."""
    config = LoaderConfig.from_settings(get_settings(), weighted=weighted, path=file)
    try:
        return NetworkBuilder().build_from_csv(config)
    except LoaderError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e


def render_result(result: InfluenceResult) -> Panel:
    """Format an influence result as a Rich panel."""
    precision = get_settings().score_precision
    lines = [
        f"Influence score ({mode_name(result.weighted)}) for "
        f"[bold]{result.node}[/bold]: [green]{result.score:.{precision}f}[/green]",
        "",
        f"Reachable nodes: [cyan]{result.reachable_count}[/cyan]",
        f"Total distance: [cyan]{result.total_distance}[/cyan]",
    ]
    if not result.has_reach:
        lines.append("\n[yellow]No other node is reachable from this node.[/yellow]")
    return Panel("\n".join(lines), title="Influence Score")
