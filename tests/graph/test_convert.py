import networkx as nx
import pytest

from netalgo.graph.convert import NodeMap, from_networkx, to_networkx
from netalgo.graph.store import build_graph


class TestToNetworkx:
    def test_directed_store_becomes_multidigraph(self):
        g = build_graph(3, [(0, 1, 2), (0, 1, 5), (1, 2, 1)], weighted=True)
        nxg = to_networkx(g)
        assert isinstance(nxg, nx.MultiDiGraph)
        assert list(nxg.nodes) == [0, 1, 2]
        assert sorted(nxg.edges(keys=True, data="weight")) == [
            (0, 1, 0, 2),
            (0, 1, 1, 5),
            (1, 2, 2, 1),
        ]

    def test_undirected_store_collapses_arc_pairs(self):
        g = build_graph(3, [(0, 1), (1, 2), (2, 1)], directed=False)
        nxg = to_networkx(g)
        assert isinstance(nxg, nx.MultiGraph)
        assert not nxg.is_directed()
        assert nxg.number_of_edges() == 3
        assert nxg.number_of_edges(1, 2) == 2

    def test_isolated_vertices_kept(self):
        nxg = to_networkx(build_graph(4, [(0, 1)]))
        assert nxg.number_of_nodes() == 4


class TestFromNetworkx:
    def test_named_nodes_are_indexed_in_order(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=3)
        G.add_edge("B", "C", weight=4)
        graph, node_map = from_networkx(G)

        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name[2] == "C"
        assert len(node_map) == 3
        assert graph.directed and graph.weighted
        assert [(e.source, e.target, e.weight) for e in graph.get_edges()] == [
            (0, 1, 3),
            (1, 2, 4),
        ]

    def test_undirected_graph_is_undirected_store(self):
        G = nx.Graph([("x", "y")])
        graph, _ = from_networkx(G)
        assert not graph.directed
        assert not graph.weighted
        assert graph.number_of_edges() == 2

    def test_multigraph_parallel_edges(self):
        G = nx.MultiGraph()
        G.add_edge(1, 2, weight=1)
        G.add_edge(1, 2, weight=2)
        graph, _ = from_networkx(G)
        assert graph.edge_count == 2
        assert sorted(e.weight for e in graph.get_edges()) == [1, 2]

    def test_custom_weight_attribute(self):
        G = nx.DiGraph()
        G.add_edge(0, 1, capacity=7)
        graph, _ = from_networkx(G, weight_attr="capacity")
        assert graph.get_edge(0).weight == 7

    def test_forced_weighted_requires_attribute(self):
        G = nx.DiGraph()
        G.add_edge(0, 1, weight=1)
        G.add_edge(1, 2)
        with pytest.raises(ValueError, match="weight"):
            from_networkx(G, weighted=True)

    def test_forced_unweighted_ignores_attribute(self):
        G = nx.DiGraph()
        G.add_edge(0, 1, weight=9)
        graph, _ = from_networkx(G, weighted=False)
        assert graph.get_edge(0).weight == 1

    def test_round_trip_preserves_structure(self, two_triangles):
        graph, node_map = from_networkx(to_networkx(two_triangles))
        assert node_map.names(range(6)) == [0, 1, 2, 3, 4, 5]
        assert graph.edge_count == two_triangles.edge_count
        assert not graph.directed


class TestNodeMap:
    def test_from_names_and_translation(self):
        node_map = NodeMap.from_names(["a", "b", "c"])
        assert node_map.names([2, 0]) == ["c", "a"]
        assert node_map.to_index["b"] == 1

    def test_empty(self):
        assert len(NodeMap()) == 0
