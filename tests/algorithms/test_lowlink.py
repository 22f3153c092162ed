import random

import networkx as nx
import pytest

from netalgo.algorithms.base import AnalysisMode
from netalgo.algorithms.lowlink import (
    analyze_structure,
    articulation_points,
    bridges,
    strongly_connected_components,
)
from netalgo.graph.convert import to_networkx
from netalgo.graph.store import GraphStore, build_graph


def _random_graph(seed: int, directed: bool, n: int = 12, m: int = 18) -> GraphStore:
    rng = random.Random(seed)
    edges = []
    while len(edges) < m:
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            edges.append((u, v))
    return build_graph(n, edges, directed=directed)


class TestStronglyConnectedComponents:
    def test_single_cycle_is_one_component(self, cycle5):
        result = analyze_structure(cycle5, AnalysisMode.SCC)
        assert result.components == ((0, 1, 2, 3, 4),)
        assert result.component_of == (0, 0, 0, 0, 0)
        assert result.bridges is None
        assert result.articulation_points is None

    def test_components_in_completion_order(self, scc_digraph):
        result = analyze_structure(scc_digraph, AnalysisMode.SCC)
        assert result.components == ((5,), (3, 4), (0, 1, 2))
        assert result.component_of == (2, 2, 2, 1, 1, 0)

    def test_dag_has_singleton_components(self):
        g = build_graph(4, [(0, 1), (1, 2), (0, 2), (2, 3)])
        components = strongly_connected_components(g)
        assert sorted(components) == [(0,), (1,), (2,), (3,)]

    def test_on_stack_uses_discovery_order(self):
        """
        1 reaches 0 (on the stack) and 3 reaches 1. Vertex 2 has a cross edge
        to the finished component {4}; it must not merge with it.
        """
        g = build_graph(5, [(0, 1), (1, 2), (2, 4), (1, 0), (2, 3), (3, 1)])
        components = strongly_connected_components(g)
        assert sorted(components) == [(0, 1, 2, 3), (4,)]

    def test_self_loop_and_isolated_vertices(self):
        g = build_graph(3, [(1, 1)])
        assert sorted(strongly_connected_components(g)) == [(0,), (1,), (2,)]

    def test_empty_graph(self):
        result = analyze_structure(GraphStore(0), AnalysisMode.ALL)
        assert result.components == ()
        assert result.component_of == ()

    @pytest.mark.parametrize("seed", range(15))
    def test_matches_networkx(self, seed):
        g = _random_graph(seed, directed=True)
        expected = {frozenset(c) for c in nx.strongly_connected_components(to_networkx(g))}
        assert {frozenset(c) for c in strongly_connected_components(g)} == expected

    def test_deep_chain_does_not_recurse(self):
        n = 20000
        g = build_graph(n, [(i, i + 1) for i in range(n - 1)] + [(n - 1, 0)])
        result = analyze_structure(g, AnalysisMode.SCC)
        assert len(result.components) == 1
        assert len(result.components[0]) == n


class TestBridgesAndArticulationPoints:
    def test_path_every_edge_is_bridge(self, path5):
        result = analyze_structure(path5, AnalysisMode.ALL)
        assert [e.index for e in result.bridges] == [0, 1, 2, 3]
        assert result.articulation_points == (1, 2, 3)
        assert result.components is None

    def test_two_triangles(self, two_triangles):
        result = analyze_structure(two_triangles, AnalysisMode.ALL)
        assert [(e.source, e.target) for e in result.bridges] == [(2, 3)]
        assert result.articulation_points == (2, 3)

    def test_cycle_has_no_bridges(self):
        g = build_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)], directed=False)
        assert bridges(g) == []
        assert articulation_points(g) == []

    def test_parallel_edge_is_not_a_bridge(self, parallel_pair):
        """Skipping the parent by edge identity keeps the second 0-1 edge as a back edge."""
        found = bridges(parallel_pair)
        assert [e.index for e in found] == [2]
        assert articulation_points(parallel_pair) == [1]

    def test_root_with_single_child_is_not_cut_vertex(self):
        # 0 is the traversal root with one DFS child.
        g = build_graph(3, [(0, 1), (1, 2), (2, 0)], directed=False)
        assert articulation_points(g) == []

    def test_root_with_two_children_is_cut_vertex(self):
        g = build_graph(3, [(0, 1), (0, 2)], directed=False)
        assert articulation_points(g) == [0]

    def test_articulation_without_bridge(self):
        """
        Bow-tie: two triangles sharing vertex 2. Vertex 2 satisfies
        low[child] == disc[2], so it is a cut vertex while no edge is a bridge.
        """
        g = build_graph(
            5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)], directed=False
        )
        result = analyze_structure(g, AnalysisMode.ALL)
        assert result.bridges == ()
        assert result.articulation_points == (2,)

    def test_mode_selects_outputs(self, two_triangles):
        only_bridges = analyze_structure(two_triangles, AnalysisMode.BRIDGES)
        assert only_bridges.articulation_points is None
        assert len(only_bridges.bridges) == 1

        only_points = analyze_structure(two_triangles, AnalysisMode.ARTICULATION_POINTS)
        assert only_points.bridges is None
        assert only_points.articulation_points == (2, 3)

    def test_disconnected_graph(self):
        g = build_graph(6, [(0, 1), (1, 2), (3, 4)], directed=False)
        result = analyze_structure(g)
        assert [e.index for e in result.bridges] == [0, 1, 2]
        assert result.articulation_points == (1,)

    @pytest.mark.parametrize("seed", range(15))
    def test_matches_networkx(self, seed):
        g = _random_graph(seed, directed=False, m=14)
        multigraph = to_networkx(g)
        expected_bridges = {frozenset(e) for e in nx.bridges(multigraph)}
        found = {frozenset((e.source, e.target)) for e in bridges(g)}
        assert found == expected_bridges
        assert set(articulation_points(g)) == set(
            nx.articulation_points(nx.Graph(multigraph))
        )

    def test_deep_path_does_not_recurse(self):
        n = 20000
        g = build_graph(n, [(i, i + 1) for i in range(n - 1)], directed=False)
        result = analyze_structure(g)
        assert len(result.bridges) == n - 1
        assert len(result.articulation_points) == n - 2


class TestAnalysisModes:
    def test_scc_requires_directed(self, path5):
        with pytest.raises(ValueError, match="directed graph"):
            analyze_structure(path5, AnalysisMode.SCC)

    @pytest.mark.parametrize(
        "mode", [AnalysisMode.BRIDGES, AnalysisMode.ARTICULATION_POINTS]
    )
    def test_undirected_modes_reject_directed(self, cycle5, mode):
        with pytest.raises(ValueError, match="undirected graph"):
            analyze_structure(cycle5, mode)

    def test_all_on_directed_reports_components_only(self, scc_digraph):
        result = analyze_structure(scc_digraph, AnalysisMode.ALL)
        assert result.components is not None
        assert result.bridges is None
        assert result.articulation_points is None

    @pytest.mark.parametrize("fixture", ["scc_digraph", "two_triangles"])
    def test_repeated_analysis_is_identical(self, request, fixture):
        g = request.getfixturevalue(fixture)
        assert analyze_structure(g) == analyze_structure(g)

    def test_graph_is_not_modified(self, two_triangles):
        before = list(two_triangles.get_arcs())
        analyze_structure(two_triangles)
        assert list(two_triangles.get_arcs()) == before
