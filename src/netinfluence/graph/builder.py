"""Build a SocialNetwork from edge records."""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from netinfluence.core import GraphError, get_logger
from netinfluence.graph.loader import EdgeRecord, LoadReport, LoaderConfig, read_edge_records
from netinfluence.graph.network import SocialNetwork

logger = get_logger(__name__)


class NetworkBuilder:
    """Build undirected social networks from parsed edges."""

    def build(self, records: Iterable[EdgeRecord], weighted: bool) -> SocialNetwork:
        """Build a network from edge records.

        Args:
            records: Validated edges. In unweighted mode their weights are
                ignored and every edge costs 1.
            weighted: Mode of the resulting network.

        Returns:
            The populated SocialNetwork.
        """
        network = SocialNetwork(weighted=weighted)
        for record in records:
            network.add_edge(record.source, record.target, record.weight if weighted else 1)

        logger.info(
            f"Built graph with {network.number_of_nodes()} nodes "
            f"and {network.number_of_edges()} edges"
        )
        return network

    def build_from_csv(self, config: LoaderConfig) -> tuple[SocialNetwork, LoadReport]:
        """Load ``config.path`` and build a network in ``config.weighted`` mode.

        Raises:
            LoaderError: If the file cannot be read.
        """
        report = LoadReport()
        records = read_edge_records(config, report)
        return self.build(records, weighted=config.weighted), report

    def get_graph_stats(self, network: SocialNetwork) -> dict[str, int | float]:
        """Get basic statistics about the network.

        Returns:
            Dictionary with graph statistics.

        Raises:
            GraphError: If the statistics cannot be computed.
        """
        graph = network.to_networkx()
        node_count = graph.number_of_nodes()

        stats: dict[str, int | float] = {
            "node_count": node_count,
            "edge_count": graph.number_of_edges(),
            "density": nx.density(nx.Graph(graph)) if node_count > 0 else 0.0,
        }

        if node_count == 0:
            return stats

        try:
            degrees = [d for _, d in graph.degree()]
            weights = [w for _, _, w in graph.edges(data="weight")]

            stats["connected_components"] = nx.number_connected_components(graph)
            stats["largest_component"] = max(
                len(c) for c in nx.connected_components(graph)
            )
            stats["avg_degree"] = sum(degrees) / len(degrees)
            stats["max_degree"] = max(degrees)
            if network.weighted and weights:
                stats["total_weight"] = sum(weights)
                stats["avg_weight"] = sum(weights) / len(weights)
        except Exception as e:
            logger.error(f"Failed to compute graph statistics: {e}")
            raise GraphError(
                f"Failed to compute graph statistics: {e}",
                node_count=node_count,
                edge_count=graph.number_of_edges(),
            ) from e

        return stats
