"""Connectivity queries built on the disjoint-set forest."""

from __future__ import annotations

from typing import List, Tuple

from netalgo.algorithms.base import AnalysisMode
from netalgo.algorithms.disjoint_set import DisjointSet
from netalgo.algorithms.lowlink import analyze_structure
from netalgo.graph.store import GraphStore, VertexID


def connected_components(graph: GraphStore) -> List[Tuple[VertexID, ...]]:
    """Return the (weakly) connected components, ignoring edge direction.

    Returns:
        Components as ascending vertex tuples, ordered by smallest member.
    """
    dsu = DisjointSet(graph.vertex_count)
    for edge in graph.get_edges():
        dsu.union(edge.source, edge.target)
    return [tuple(group) for group in dsu.groups()]


def has_cycle(graph: GraphStore) -> bool:
    """Return True if the graph contains a cycle.

    Undirected graphs: some edge joins two vertices that are already
    connected, which includes self-loops and parallel edges. Directed graphs:
    a self-loop, or a strongly connected component with two or more vertices.
    """
    if graph.directed:
        if any(edge.source == edge.target for edge in graph.get_edges()):
            return True
        result = analyze_structure(graph, AnalysisMode.SCC)
        return any(len(component) > 1 for component in result.components or ())

    dsu = DisjointSet(graph.vertex_count)
    return any(not dsu.union(edge.source, edge.target) for edge in graph.get_edges())
