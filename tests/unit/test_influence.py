"""
Unit tests for influence scoring.

Tests BFS and Dijkstra distances, the score reduction and mode gating.
"""

import random
import threading

import networkx as nx
import pytest

from netinfluence.core import EmptyGraphError, NodeNotFoundError, WrongModeError
from netinfluence.graph import (
    InfluenceScorer,
    SocialNetwork,
    bfs_distances,
    dijkstra_distances,
    ensure_not_empty,
    influence_unweighted,
    influence_weighted,
)


class TestUnweightedInfluence:
    """Tests for influence_unweighted."""

    @pytest.mark.unit
    def test_chain(self, chain_network):
        result = influence_unweighted(chain_network, "A")

        assert result.distances == {"A": 0, "B": 1, "C": 2}
        assert result.reachable_count == 2
        assert result.total_distance == 3
        assert result.score == pytest.approx(2 / 3)
        assert round(result.score, 2) == 0.67

    @pytest.mark.unit
    def test_start_is_case_insensitive(self, chain_network):
        result = influence_unweighted(chain_network, "a")

        assert result.node == "A"
        assert result.score == pytest.approx(2 / 3)

    @pytest.mark.unit
    def test_disconnected_nodes_are_ignored(self, disconnected_network):
        result = influence_unweighted(disconnected_network, "B")

        assert result.reachable_count == 2
        assert result.total_distance == 2
        assert result.score == pytest.approx(1.0)
        assert "X" not in result.distances
        assert "Y" not in result.distances

    @pytest.mark.unit
    def test_isolated_start_scores_zero(self):
        network = SocialNetwork(weighted=False)
        network.add_edge("Loner", "Loner")
        network.add_edge("A", "B")

        result = influence_unweighted(network, "Loner")

        assert result.score == 0.0
        assert result.reachable_count == 0
        assert result.has_reach is False

    @pytest.mark.unit
    def test_shortest_hop_count_wins(self):
        network = SocialNetwork(weighted=False)
        for a, b in [("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")]:
            network.add_edge(a, b)

        assert bfs_distances(network, "A") == {"A": 0, "B": 1, "C": 2, "D": 1}

    @pytest.mark.unit
    def test_weighted_network_is_rejected(self, weighted_chain_network):
        with pytest.raises(WrongModeError) as exc_info:
            influence_unweighted(weighted_chain_network, "A")

        assert exc_info.value.expected_weighted is False
        assert exc_info.value.actual_weighted is True

    @pytest.mark.unit
    def test_unknown_start_is_rejected(self, chain_network):
        with pytest.raises(NodeNotFoundError):
            influence_unweighted(chain_network, "Z")


class TestWeightedInfluence:
    """Tests for influence_weighted."""

    @pytest.mark.unit
    def test_chain(self, weighted_chain_network):
        result = influence_weighted(weighted_chain_network, "A")

        assert result.distances == {"A": 0, "B": 5, "C": 6}
        assert result.reachable_count == 2
        assert result.total_distance == 11
        assert result.score == pytest.approx(2 / 11)
        assert round(result.score, 2) == 0.18

    @pytest.mark.unit
    def test_lighter_parallel_edge_wins(self):
        network = SocialNetwork(weighted=True)
        network.add_edge("A", "B", 9)
        network.add_edge("B", "A", 2)

        assert dijkstra_distances(network, "A") == {"A": 0, "B": 2}

    @pytest.mark.unit
    def test_indirect_path_beats_heavy_direct_edge(self):
        network = SocialNetwork(weighted=True)
        network.add_edge("A", "C", 10)
        network.add_edge("A", "B", 3)
        network.add_edge("B", "C", 4)

        result = influence_weighted(network, "A")

        assert result.distances["C"] == 7
        assert result.total_distance == 10

    @pytest.mark.unit
    def test_unweighted_network_is_rejected(self, chain_network):
        with pytest.raises(WrongModeError):
            influence_weighted(chain_network, "A")

    @pytest.mark.unit
    def test_unknown_start_is_rejected(self, weighted_chain_network):
        with pytest.raises(NodeNotFoundError):
            influence_weighted(weighted_chain_network, "nobody")

    @pytest.mark.unit
    def test_repeated_calls_are_identical(self, weighted_chain_network):
        first = influence_weighted(weighted_chain_network, "B")
        second = influence_weighted(weighted_chain_network, "B")

        assert first == second
        assert first.distances == second.distances

    @pytest.mark.unit
    def test_matches_networkx(self):
        rng = random.Random(7)
        network = SocialNetwork(weighted=True)
        names = [f"n{i}" for i in range(40)]
        for _ in range(120):
            a, b = rng.sample(names, 2)
            network.add_edge(a, b, rng.randint(1, 20))

        graph = network.to_networkx()
        start = network.nodes()[0]
        expected = nx.single_source_dijkstra_path_length(graph, start, weight="weight")

        assert dijkstra_distances(network, start) == expected

    @pytest.mark.unit
    def test_concurrent_reads_agree(self, weighted_chain_network):
        results = []

        def run() -> None:
            results.append(influence_weighted(weighted_chain_network, "C"))

        threads = [threading.Thread(target=run) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r == results[0] for r in results)


class TestInfluenceScorer:
    """Tests for InfluenceScorer dispatch."""

    @pytest.mark.unit
    def test_dispatches_on_mode(self, chain_network, weighted_chain_network):
        scorer = InfluenceScorer()

        assert scorer.score(chain_network, "A").weighted is False
        assert scorer.score(weighted_chain_network, "A").weighted is True
        assert scorer.score(weighted_chain_network, "A").total_distance == 11

    @pytest.mark.unit
    def test_empty_graph(self):
        network = SocialNetwork(weighted=False)

        with pytest.raises(EmptyGraphError):
            ensure_not_empty(network)
        with pytest.raises(EmptyGraphError):
            InfluenceScorer().score(network, "A")
