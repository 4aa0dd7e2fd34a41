"""Tests for gomodwhy.graph.nx NetworkX conversion utilities."""

import networkx as nx
import pytest

from gomodwhy.graph.nx import from_networkx, to_networkx


class TestToNetworkx:
    def test_edges_and_successor_only_nodes(self):
        graph = to_networkx({"A": ["B", "C"], "B": ["D"]})
        assert isinstance(graph, nx.DiGraph)
        assert set(graph.nodes) == {"A", "B", "C", "D"}
        assert set(graph.edges) == {("A", "B"), ("A", "C"), ("B", "D")}

    def test_parallel_edges_collapse(self):
        graph = to_networkx({"A": ["B", "B"]})
        assert graph.number_of_edges() == 1

    def test_nodes_with_empty_successors_kept(self, diamond):
        graph = to_networkx(diamond)
        assert "D" in graph
        assert graph.out_degree("D") == 0


class TestFromNetworkx:
    def test_round_trip_drops_sinks(self, diamond):
        adjacency = from_networkx(to_networkx(diamond))
        assert adjacency == {"A": ["B", "C"], "B": ["D"], "C": ["D"]}

    def test_multidigraph_edges_collapse(self):
        graph = nx.MultiDiGraph()
        graph.add_edge("A", "B")
        graph.add_edge("A", "B")
        assert from_networkx(graph) == {"A": ["B"]}

    def test_undirected_graph_rejected(self):
        with pytest.raises(TypeError):
            from_networkx(nx.Graph([("A", "B")]))
