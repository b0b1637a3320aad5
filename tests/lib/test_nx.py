"""Tests for tgraph.lib.nx NetworkX conversion utilities."""

import networkx as nx
import pytest

from tgraph.lib.algorithms.dag_paths import critical_path, critical_path_sink
from tgraph.lib.nx import NodeMap, from_networkx, to_networkx


class TestFromNetworkx:
    """Tests for from_networkx."""

    def test_names_and_durations(self):
        """Names map to ids in node order and duration attributes carry over."""
        G = nx.DiGraph()
        G.add_node("fetch", duration=3)
        G.add_node("build", duration=5)
        G.add_node("test", duration=2)
        G.add_node("docs")
        G.add_edge("fetch", "build")
        G.add_edge("build", "test")

        graph, node_map = from_networkx(G)
        assert node_map.to_index == {"fetch": 0, "build": 1, "test": 2, "docs": 3}
        assert graph.edges() == [(0, 1), (1, 2)]
        assert graph.duration_of(1) == 5
        assert graph.duration_of(3) is None

        result = critical_path(graph)
        sink = critical_path_sink(result)
        assert node_map.names(result.reconstruct_path(sink)) == [
            "fetch",
            "build",
            "test",
        ]

    def test_custom_attribute(self):
        """duration_attr selects which node attribute becomes the duration."""
        G = nx.DiGraph()
        G.add_node("a", cost=4, duration=1)
        graph, _ = from_networkx(G, duration_attr="cost")
        assert graph.duration_of(0) == 4

    def test_multigraph_keeps_parallel_edges(self):
        """Parallel MultiDiGraph edges become duplicate adjacency entries."""
        G = nx.MultiDiGraph()
        G.add_edge("a", "b")
        G.add_edge("a", "b")
        graph, _ = from_networkx(G)
        assert graph.edge_count() == 2

    def test_undirected_rejected(self):
        """Undirected graphs raise TypeError."""
        with pytest.raises(TypeError):
            from_networkx(nx.Graph([(0, 1)]))


class TestToNetworkx:
    """Tests for to_networkx."""

    def test_roundtrip_structure(self, mixed):
        """Node and edge counts survive, duplicates and self-loops included."""
        G = to_networkx(mixed)
        assert G.number_of_nodes() == mixed.node_count
        assert G.number_of_edges() == mixed.edge_count()

    def test_durations_exported(self, project_dag):
        """Only nodes with an explicit duration get the attribute."""
        G = to_networkx(project_dag)
        assert G.nodes[2]["duration"] == 6
        assert "duration" not in G.nodes[4]

    def test_dag_stays_acyclic(self, project_dag):
        """NetworkX sees the exported DAG as acyclic."""
        G = to_networkx(project_dag)
        assert nx.is_directed_acyclic_graph(G)


class TestNodeMap:
    """Tests for NodeMap."""

    def test_from_names(self):
        """from_names builds both directions and translates id lists back."""
        node_map = NodeMap.from_names(["x", "y"])
        assert len(node_map) == 2
        assert node_map.to_name[1] == "y"
        assert node_map.names([1, 0]) == ["y", "x"]
