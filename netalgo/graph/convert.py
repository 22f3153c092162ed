"""Conversion between GraphStore and NetworkX graphs.

`GraphStore` vertices are dense integers, so converting from an arbitrary
NetworkX graph assigns indices in node iteration order and returns a
`NodeMap` to translate results back to the original node names.

Example:
    >>> import networkx as nx
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=3)
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["B"]
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from netalgo.graph.store import GraphStore

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, indices) -> List[Hashable]:
        """Translate an iterable of vertex indices to node names."""
        return [self.to_name[i] for i in indices]

    def __len__(self) -> int:
        return len(self.to_index)


def to_networkx(graph: GraphStore) -> Union[nx.MultiDiGraph, nx.MultiGraph]:
    """Convert a GraphStore to a NetworkX multigraph.

    Directed stores become ``nx.MultiDiGraph``; undirected stores become
    ``nx.MultiGraph`` with one edge per logical edge (the arc pair collapses
    back into a single edge). Edge keys are logical edge indices and every
    edge carries a ``weight`` attribute.

    Args:
        graph: The store to convert.

    Returns:
        A NetworkX multigraph with vertices ``0..V-1``.
    """
    nx_graph = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()
    nx_graph.add_nodes_from(range(graph.vertex_count))
    for edge in graph.get_edges():
        nx_graph.add_edge(edge.source, edge.target, key=edge.index, weight=edge.weight)
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    *,
    weight_attr: str = "weight",
    weighted: Optional[bool] = None,
) -> Tuple[GraphStore, NodeMap]:
    """Convert a NetworkX graph into a GraphStore.

    Nodes are numbered in ``nx_graph.nodes`` order. Multigraph edges are kept
    as parallel edges in iteration order.

    Args:
        nx_graph: Any NetworkX graph type.
        weight_attr: Edge attribute holding the weight.
        weighted: Force weighted/unweighted. By default the result is weighted
            when at least one edge carries ``weight_attr``.

    Returns:
        Tuple[GraphStore, NodeMap]: The new store and the name/index mapping.

    Raises:
        ValueError: If ``weighted`` is True and an edge lacks ``weight_attr``.
    """
    node_map = NodeMap.from_names(list(nx_graph.nodes))
    edge_data = list(nx_graph.edges(data=True))
    if weighted is None:
        weighted = any(weight_attr in data for _, _, data in edge_data)

    edges = []
    for u, v, data in edge_data:
        src, dst = node_map.to_index[u], node_map.to_index[v]
        if not weighted:
            edges.append((src, dst))
            continue
        if weight_attr not in data:
            raise ValueError(f"Edge ({u!r}, {v!r}) has no '{weight_attr}' attribute")
        edges.append((src, dst, data[weight_attr]))

    graph = GraphStore(len(node_map), directed=nx_graph.is_directed(), weighted=weighted)
    graph.add_edges_from(edges)
    return graph, node_map
