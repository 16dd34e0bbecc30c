"""Custom exceptions for netinfluence."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class NetInfluenceError(Exception):
    """Base exception for all netinfluence errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class GraphError(NetInfluenceError):
    """Raised when graph operations fail."""

    def __init__(
        self,
        message: str,
        node_count: int | None = None,
        edge_count: int | None = None,
    ) -> None:
        super().__init__(
            message,
            details={"node_count": node_count, "edge_count": edge_count},
        )


class LoaderError(NetInfluenceError):
    """Raised when an edge file cannot be read."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message, details={"path": str(path) if path else None})
        self.path = path


class ScoreError(NetInfluenceError):
    """Base class for conditions that prevent an influence score."""


class NodeNotFoundError(ScoreError):
    """Raised when a start node (or any lookup target) is not in the graph."""

    def __init__(self, node: str) -> None:
        super().__init__(f"Node '{node}' not found in graph", details={"node": node})
        self.node = node


class WrongModeError(ScoreError):
    """Raised when a scoring function does not match the graph's mode."""

    def __init__(self, expected_weighted: bool, actual_weighted: bool) -> None:
        actual = "weighted" if actual_weighted else "unweighted"
        other = "weighted" if expected_weighted else "unweighted"
        super().__init__(
            f"This network is {actual}. Use the {actual} function instead of the {other} one.",
            details={
                "expected_weighted": expected_weighted,
                "actual_weighted": actual_weighted,
            },
        )
        self.expected_weighted = expected_weighted
        self.actual_weighted = actual_weighted


class EmptyGraphError(ScoreError):
    """Raised when a query is attempted on a graph with no nodes."""

    def __init__(self) -> None:
        super().__init__("Graph is empty, nothing to calculate.")
