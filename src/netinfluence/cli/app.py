"""Typer main application for netinfluence CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from netinfluence import __version__
from netinfluence.cli.commands import menu, network, score
from netinfluence.core import setup_logging

console = Console()

app = typer.Typer(
    name="netinfluence",
    help="Social network influence scoring from shortest-path distances",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(network.app, name="network", help="Network inspection commands")
app.add_typer(score.app, name="score", help="Influence scoring commands")
app.command("menu")(menu.menu)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        console.print(f"[bold blue]netinfluence[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    netinfluence - Social Network Influence Tool

    Load a social network from CSV and score how close a person sits to
    everyone they can reach.
    """
    setup_logging()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
