"""In-memory undirected social network with case-insensitive node ids."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

import networkx as nx

from netinfluence.core import GraphError, NodeNotFoundError, ReadWriteLock, get_logger

logger = get_logger(__name__)


def normalize_node(node: str) -> str:
    """Return the lookup key for a node identifier."""
    return node.casefold()


@dataclass(frozen=True)
class Connection:
    """One directed half of an undirected edge."""

    neighbor: str
    weight: int


@dataclass
class _NodeEntry:
    name: str
    connections: list[Connection] = field(default_factory=list)


class SocialNetwork:
    """Undirected, optionally weighted adjacency structure.

    Node identifiers compare case-insensitively; the casing of a node's first
    appearance is kept as its display name and is what ``nodes()`` and
    ``neighbors()`` report. Parallel edges are stored as-is.
    """

    def __init__(self, weighted: bool) -> None:
        """Initialize an empty network.

        Args:
            weighted: Whether edges carry meaningful weights. Fixed for the
                lifetime of the network and used to gate the scorers.
        """
        self._weighted = weighted
        self._entries: dict[str, _NodeEntry] = {}
        self._edge_count = 0
        self._lock = ReadWriteLock()

    @property
    def weighted(self) -> bool:
        return self._weighted

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.contains(node)

    def __repr__(self) -> str:
        mode = "weighted" if self._weighted else "unweighted"
        return f"SocialNetwork({mode}, nodes={len(self)}, edges={self._edge_count})"

    def _ensure_node(self, node: str) -> _NodeEntry:
        key = normalize_node(node)
        entry = self._entries.get(key)
        if entry is None:
            entry = _NodeEntry(name=node)
            self._entries[key] = entry
        return entry

    def add_edge(self, source: str, target: str, weight: int = 1) -> None:
        """Add an undirected edge, creating either endpoint if needed.

        Weights are stored unchecked; callers must not insert non-positive
        weights into a network that will be scored with Dijkstra.
        """
        with self._lock.write():
            source_entry = self._ensure_node(source)
            target_entry = self._ensure_node(target)
            source_entry.connections.append(Connection(target_entry.name, weight))
            target_entry.connections.append(Connection(source_entry.name, weight))
            self._edge_count += 1

    def nodes(self) -> list[str]:
        """Return display names in order of first appearance."""
        return [entry.name for entry in self._entries.values()]

    def contains(self, node: str) -> bool:
        return normalize_node(node) in self._entries

    def display_name(self, node: str) -> str:
        """Return the stored casing of ``node``.

        Raises:
            NodeNotFoundError: If the node is not in the network.
        """
        entry = self._entries.get(normalize_node(node))
        if entry is None:
            raise NodeNotFoundError(node)
        return entry.name

    def neighbors(self, node: str) -> list[Connection]:
        """Return the connection list of ``node``.

        Raises:
            NodeNotFoundError: If the node is not in the network.
        """
        entry = self._entries.get(normalize_node(node))
        if entry is None:
            raise NodeNotFoundError(node)
        return list(entry.connections)

    def adjacency(self) -> dict[str, list[Connection]]:
        """Return display name -> connections for every node.

        The lists are the network's own; treat them as read-only.
        """
        return {entry.name: entry.connections for entry in self._entries.values()}

    def number_of_nodes(self) -> int:
        return len(self._entries)

    def number_of_edges(self) -> int:
        """Count undirected edges, parallel copies included."""
        return self._edge_count

    @contextmanager
    def reading(self) -> Iterator[SocialNetwork]:
        """Hold the shared read lock; inserts block until the block exits."""
        with self._lock.read():
            yield self

    def to_networkx(self) -> nx.MultiGraph:
        """Export to a NetworkX multigraph keyed by display name.

        Returns:
            MultiGraph with one edge per ``add_edge`` call and a ``weight``
            attribute on every edge.

        Raises:
            GraphError: If the export fails.
        """
        try:
            with self.reading():
                graph = nx.MultiGraph(weighted=self._weighted)
                graph.add_nodes_from(self.nodes())
                seen: set[str] = set()
                for entry in self._entries.values():
                    # Each undirected edge appears in both lists; emit it from
                    # the endpoint that comes first in insertion order.
                    for conn in entry.connections:
                        if conn.neighbor in seen:
                            continue
                        if conn.neighbor == entry.name:
                            # A self-loop is stored twice in the same list.
                            continue
                        graph.add_edge(entry.name, conn.neighbor, weight=conn.weight)
                    self_loops = [c for c in entry.connections if c.neighbor == entry.name]
                    for conn in self_loops[::2]:
                        graph.add_edge(entry.name, entry.name, weight=conn.weight)
                    seen.add(entry.name)
        except Exception as e:
            logger.error(f"Failed to export network: {e}")
            raise GraphError(
                f"Failed to export network: {e}",
                node_count=self.number_of_nodes(),
                edge_count=self.number_of_edges(),
            ) from e

        logger.debug(
            f"Exported network with {graph.number_of_nodes()} nodes "
            f"and {graph.number_of_edges()} edges"
        )
        return graph
