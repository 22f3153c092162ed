"""Minimum spanning forest construction (Kruskal).

Edges are scanned in ascending weight order, by default ``(weight, index)``
so equal weights resolve by insertion order. An edge is accepted when
``DisjointSet.union`` merges two different trees. A disconnected graph yields
one tree per component rather than a truncated tree.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from netalgo.algorithms.disjoint_set import DisjointSet
from netalgo.algorithms.types import SpanningForest
from netalgo.config import ALGORITHM_CONFIG
from netalgo.exceptions import DisconnectedGraphError
from netalgo.graph.store import Edge, GraphStore
from netalgo.logging import get_logger
from netalgo.utils.validation import check_capacity, check_index

logger = get_logger(__name__)


def kruskal_order(graph: GraphStore) -> List[int]:
    """Return logical edge indices sorted by ``(weight, index)``."""
    edges = graph.get_edges()
    return sorted(range(len(edges)), key=lambda i: (edges[i].weight, i))


def _validate_edge_order(edges: Sequence[Edge], edge_order: Sequence[int]) -> List[int]:
    order = list(edge_order)
    bound = len(edges)
    for index in order:
        check_index(index, bound, "edge")
    if len(order) != bound or len(set(order)) != bound:
        raise ValueError(
            f"edge_order must be a permutation of the {bound} edge indices, "
            f"got {len(order)} entries ({len(set(order))} distinct)"
        )
    if ALGORITHM_CONFIG.verify_edge_order:
        for prev, cur in zip(order, order[1:]):
            if edges[cur].weight < edges[prev].weight:
                raise ValueError(
                    f"edge_order is not ascending by weight: edge {cur} "
                    f"(weight {edges[cur].weight}) follows edge {prev} "
                    f"(weight {edges[prev].weight})"
                )
    return order


def find_spanning_forest(
    graph: GraphStore,
    *,
    edge_order: Optional[Sequence[int]] = None,
    require_connected: bool = False,
) -> SpanningForest:
    """Compute a minimum-weight spanning forest with Kruskal's algorithm.

    Edge direction is ignored; a directed store is treated as its underlying
    undirected graph. The scan stops as soon as ``V - 1`` edges are accepted.

    Args:
        graph: The graph to span.
        edge_order: Optional permutation of logical edge indices, ascending by
            weight, produced by an external sorter. Defaults to
            :func:`kruskal_order`.
        require_connected: Raise instead of returning a multi-tree forest.

    Returns:
        SpanningForest: Total weight, accepted edges and component count.

    Raises:
        InvalidCapacityError: If any edge weight is negative.
        InvalidIndexError: If ``edge_order`` references a missing edge.
        ValueError: If ``edge_order`` is not an ascending permutation.
        DisconnectedGraphError: If ``require_connected`` and the graph has
            more than one component.

    Examples:
        >>> g = build_graph(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)],
        ...                 directed=False, weighted=True)
        >>> find_spanning_forest(g).total_weight
        19
    """
    edges = graph.get_edges()
    for edge in edges:
        check_capacity(edge.weight, edge.index)
    if edge_order is None:
        order = kruskal_order(graph)
    else:
        order = _validate_edge_order(edges, edge_order)

    vertex_count = graph.vertex_count
    target = max(vertex_count - 1, 0)
    dsu = DisjointSet(vertex_count)
    accepted: List[Edge] = []
    total_weight = 0

    for index in order:
        if len(accepted) == target:
            break
        edge = edges[index]
        if dsu.union(edge.source, edge.target):
            accepted.append(edge)
            total_weight += edge.weight

    components = dsu.component_count
    logger.debug(
        "Kruskal accepted %d of %d edges (total weight %s, %d component(s))",
        len(accepted),
        len(edges),
        total_weight,
        components,
    )
    if components > 1:
        if require_connected:
            raise DisconnectedGraphError(components)
        logger.info(
            "Graph is disconnected: returning a spanning forest of %d trees", components
        )

    return SpanningForest(
        total_weight=total_weight,
        edges=tuple(accepted),
        component_count=components,
        vertex_count=vertex_count,
    )
