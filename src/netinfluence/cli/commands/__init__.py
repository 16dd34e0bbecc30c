"""CLI commands module for netinfluence."""

from netinfluence.cli.commands import menu, network, score

__all__ = ["menu", "network", "score"]
