"""Graph module - network store, loading and influence scoring."""

from netinfluence.graph.network import Connection, SocialNetwork, normalize_node
from netinfluence.graph.loader import EdgeRecord, LoadReport, LoaderConfig, parse_rows, read_edge_records
from netinfluence.graph.builder import NetworkBuilder
from netinfluence.graph.influence import (
    InfluenceResult,
    InfluenceScorer,
    bfs_distances,
    dijkstra_distances,
    ensure_not_empty,
    influence_unweighted,
    influence_weighted,
)

__all__ = [
    "Connection",
    "SocialNetwork",
    "normalize_node",
    "EdgeRecord",
    "LoadReport",
    "LoaderConfig",
    "parse_rows",
    "read_edge_records",
    "NetworkBuilder",
    "InfluenceResult",
    "InfluenceScorer",
    "bfs_distances",
    "dijkstra_distances",
    "ensure_not_empty",
    "influence_unweighted",
    "influence_weighted",
]
