"""Shortest-path influence scoring.

The influence score of a start node is::

    score = reachable_count / total_distance

where ``reachable_count`` is the number of other nodes with a finite
distance from the start and ``total_distance`` is the sum of those
distances. Nodes that cannot be reached contribute to neither term. The
score is 0.0 when nothing is reachable, which ``InfluenceResult.has_reach``
distinguishes from a genuine zero.

Unweighted networks use breadth-first search (every edge costs 1);
weighted networks use Dijkstra's algorithm with lazy deletion.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from dataclasses import dataclass, field

from netinfluence.core import (
    EmptyGraphError,
    LogContext,
    NodeNotFoundError,
    WrongModeError,
    get_logger,
)
from netinfluence.graph.network import SocialNetwork

logger = get_logger(__name__)

INFINITY = math.inf


@dataclass(frozen=True)
class InfluenceResult:
    """Influence score for a single start node."""

    node: str
    weighted: bool
    score: float
    reachable_count: int
    total_distance: int
    distances: dict[str, int] = field(default_factory=dict, compare=False)

    @property
    def has_reach(self) -> bool:
        """Whether any node other than the start was reachable."""
        return self.reachable_count > 0


def ensure_not_empty(network: SocialNetwork) -> None:
    """Raise ``EmptyGraphError`` if the network has no nodes."""
    if network.number_of_nodes() == 0:
        raise EmptyGraphError()


def _check_query(network: SocialNetwork, start: str, weighted: bool) -> str:
    if network.weighted != weighted:
        raise WrongModeError(expected_weighted=weighted, actual_weighted=network.weighted)
    if not network.contains(start):
        raise NodeNotFoundError(start)
    return network.display_name(start)


def _bfs(network: SocialNetwork, start: str) -> dict[str, float]:
    adjacency = network.adjacency()
    distance = dict.fromkeys(adjacency, INFINITY)
    distance[start] = 0

    queue = deque([start])
    while queue:
        current = queue.popleft()
        for conn in adjacency[current]:
            if distance[conn.neighbor] == INFINITY:
                distance[conn.neighbor] = distance[current] + 1
                queue.append(conn.neighbor)

    return distance


def _dijkstra(network: SocialNetwork, start: str) -> dict[str, float]:
    adjacency = network.adjacency()
    distance = dict.fromkeys(adjacency, INFINITY)
    distance[start] = 0

    visited: set[str] = set()
    heap: list[tuple[float, str]] = [(0, start)]
    while heap:
        current_dist, current = heapq.heappop(heap)
        if current in visited:
            continue
        visited.add(current)

        for conn in adjacency[current]:
            new_dist = current_dist + conn.weight
            if new_dist < distance[conn.neighbor]:
                distance[conn.neighbor] = new_dist
                heapq.heappush(heap, (new_dist, conn.neighbor))

    return distance


def _finite(distance: dict[str, float]) -> dict[str, int]:
    return {node: int(d) for node, d in distance.items() if d != INFINITY}


def _reduce(start: str, distance: dict[str, float], weighted: bool) -> InfluenceResult:
    reached = _finite(distance)
    others = [d for node, d in reached.items() if node != start]

    reachable_count = len(others)
    total_distance = sum(others)

    if reachable_count == 0 or total_distance == 0:
        score = 0.0
    else:
        score = reachable_count / total_distance

    return InfluenceResult(
        node=start,
        weighted=weighted,
        score=score,
        reachable_count=reachable_count,
        total_distance=total_distance,
        distances=reached,
    )


def bfs_distances(network: SocialNetwork, start: str) -> dict[str, int]:
    """Hop distances from ``start`` to every reachable node (start included).

    Raises:
        NodeNotFoundError: If ``start`` is not in the network.
    """
    with network.reading():
        if not network.contains(start):
            raise NodeNotFoundError(start)
        return _finite(_bfs(network, network.display_name(start)))


def dijkstra_distances(network: SocialNetwork, start: str) -> dict[str, int]:
    """Weighted distances from ``start`` to every reachable node (start included).

    Raises:
        NodeNotFoundError: If ``start`` is not in the network.
    """
    with network.reading():
        if not network.contains(start):
            raise NodeNotFoundError(start)
        return _finite(_dijkstra(network, network.display_name(start)))


def influence_unweighted(network: SocialNetwork, start: str) -> InfluenceResult:
    """Compute the influence score of ``start`` in an unweighted network.

    Args:
        network: Network built with ``weighted=False``.
        start: Start node, matched case-insensitively.

    Returns:
        InfluenceResult with hop distances.

    Raises:
        WrongModeError: If the network is weighted.
        NodeNotFoundError: If ``start`` is not in the network.
    """
    with network.reading():
        name = _check_query(network, start, weighted=False)
        with LogContext(start_node=name, mode="unweighted"):
            result = _reduce(name, _bfs(network, name), weighted=False)
            logger.debug(
                f"Reached {result.reachable_count} nodes, "
                f"total distance {result.total_distance}"
            )
    return result


def influence_weighted(network: SocialNetwork, start: str) -> InfluenceResult:
    """Compute the influence score of ``start`` in a weighted network.

    Edge weights must be strictly positive.

    Args:
        network: Network built with ``weighted=True``.
        start: Start node, matched case-insensitively.

    Returns:
        InfluenceResult with weighted shortest-path distances.

    Raises:
        WrongModeError: If the network is unweighted.
        NodeNotFoundError: If ``start`` is not in the network.
    """
    with network.reading():
        name = _check_query(network, start, weighted=True)
        with LogContext(start_node=name, mode="weighted"):
            result = _reduce(name, _dijkstra(network, name), weighted=True)
            logger.debug(
                f"Reached {result.reachable_count} nodes, "
                f"total distance {result.total_distance}"
            )
    return result


class InfluenceScorer:
    """Score start nodes with the algorithm matching the network's mode."""

    def score(self, network: SocialNetwork, start: str) -> InfluenceResult:
        """Compute the influence score of ``start``.

        Raises:
            EmptyGraphError: If the network has no nodes.
            NodeNotFoundError: If ``start`` is not in the network.
        """
        ensure_not_empty(network)
        if network.weighted:
            return influence_weighted(network, start)
        return influence_unweighted(network, start)
