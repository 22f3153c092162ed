"""Dense-index multigraph store shared by every netalgo algorithm.

`GraphStore` extends `networkx.MultiDiGraph` with a fixed vertex set
``0..V-1``, dense logical edge indices and unique integer arc keys. Undirected
graphs store each logical edge as two arcs that carry the same logical index,
so a traversal can tell the arc it arrived on from a parallel edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from pickle import dumps, loads
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    Union,
)

import networkx as nx

from netalgo.utils.validation import check_count, check_index, check_weight

VertexID = int
ArcID = int
Weight = Union[int, float]
AttrDict = Dict[str, Any]

#: ``(source, target, arc_id, attribute_dict)``, as returned by ``get_arcs()``.
ArcTuple = Tuple[VertexID, VertexID, ArcID, AttrDict]

#: Edge specification accepted by :func:`build_graph`: ``(u, v)`` or ``(u, v, w)``.
EdgeSpec = Union[Tuple[int, int], Tuple[int, int, Weight], Sequence[Any]]


@dataclass(frozen=True)
class Edge:
    """A logical edge of a :class:`GraphStore`.

    Attributes:
        index: Dense logical edge index, assigned in insertion order.
        source: First endpoint (tail for directed graphs).
        target: Second endpoint (head for directed graphs).
        weight: Weight or capacity; ``1`` for unweighted graphs.
    """

    index: int
    source: VertexID
    target: VertexID
    weight: Weight = 1


class Arc(NamedTuple):
    """A stored directed arc, as listed by :meth:`GraphStore.arc_lists`."""

    id: ArcID
    source: VertexID
    target: VertexID
    edge: int
    weight: Weight


class GraphStore(nx.MultiDiGraph):
    """A multi-directed graph over a fixed, dense vertex set.

    This class enforces:
      - Vertices are ``0..vertex_count-1``, created at construction and never
        added, removed or renumbered afterwards.
      - Logical edges are append-only and indexed densely from 0.
      - Every arc has a unique integer key; undirected edges are stored as two
        arcs (forward and back-reference) sharing one logical edge index.
      - ``copy()`` performs a pickle-based deep copy by default.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(
        self,
        vertex_count: int = 0,
        directed: bool = True,
        weighted: bool = False,
        **attr: Any,
    ) -> None:
        """Initialize a GraphStore.

        Args:
            vertex_count: Number of vertices; they are labelled ``0..vertex_count-1``.
            directed: If False, every added edge is stored as a pair of arcs.
            weighted: Whether edge weights were supplied by the caller.
            **attr: Graph attributes forwarded to the MultiDiGraph constructor.

        Attributes:
            _arcs: Map arc key to ``(source, target, arc_key, attribute_dict)``.
            _logical_edges: Logical edges in insertion order.
        """
        check_count(vertex_count)
        super().__init__(**attr)
        self.graph["directed"] = bool(directed)
        self.graph["weighted"] = bool(weighted)
        self._arcs: Dict[ArcID, ArcTuple] = {}
        self._logical_edges: List[Edge] = []
        # Only advances; arc ids are never reused.
        self._next_arc_id: int = 0
        super().add_nodes_from(range(vertex_count))

    def new_edge_key(self, u: VertexID, v: VertexID, key: Any = None) -> ArcID:  # type: ignore[override]
        """Return a new unique integer arc key.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``.
        """
        arc_id = self._next_arc_id
        self._next_arc_id += 1
        return arc_id

    def copy(self, as_view: bool = False) -> GraphStore:
        """Create a copy of this graph.

        The copy is pickle-based so it carries the logical edge table along
        with the NetworkX structure.

        Raises:
            ValueError: If ``as_view`` is True. NetworkX views are built from
                the adjacency maps alone and would not see any logical edges.
        """
        if as_view:
            raise ValueError(
                "GraphStore does not support views; use copy() for an independent graph"
            )
        return loads(dumps(self))

    #
    # Properties
    #
    @property
    def directed(self) -> bool:
        """True if edges were added as single directed arcs."""
        return self.graph.get("directed", True)

    @property
    def weighted(self) -> bool:
        """True if the caller supplied edge weights."""
        return self.graph.get("weighted", False)

    @property
    def vertex_count(self) -> int:
        return len(self._node)

    @property
    def edge_count(self) -> int:
        """Number of logical edges (not arcs)."""
        return len(self._logical_edges)

    #
    # Mutation
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: VertexID,
        v_for_edge: VertexID,
        weight: Optional[Weight] = None,
        **attr: Any,
    ) -> int:
        """Append a logical edge between two existing vertices.

        Directed graphs get one arc ``u -> v``. Undirected graphs get the arc
        pair ``u -> v`` and ``v -> u``; both carry ``edge=<logical index>``.

        Args:
            u_for_edge: Source vertex index.
            v_for_edge: Target vertex index.
            weight: Finite real weight/capacity, required on weighted stores
                and not accepted on unweighted ones (their edges weigh ``1``).
                Negative values are stored; algorithms that need non-negative
                values reject them.
            **attr: Extra arc attributes.

        Returns:
            int: The logical edge index.

        Raises:
            InvalidIndexError: If either endpoint is out of range.
            ValueError: If the weight is missing on a weighted store, given on
                an unweighted one, or not a finite real number.
        """
        n = self.vertex_count
        check_index(u_for_edge, n)
        check_index(v_for_edge, n)
        index = len(self._logical_edges)
        if self.weighted:
            if weight is None:
                raise ValueError(f"Edge {index} needs a weight in a weighted graph")
            check_weight(weight, index)
        elif weight is not None:
            raise ValueError(
                f"Edge {index} cannot carry weight {weight!r} in an unweighted graph"
            )
        else:
            weight = 1

        edge = Edge(index, u_for_edge, v_for_edge, weight)
        self._add_arc(u_for_edge, v_for_edge, edge, attr)
        if not self.directed:
            self._add_arc(v_for_edge, u_for_edge, edge, attr)
        self._logical_edges.append(edge)
        return index

    def add_edges_from(self, ebunch_to_add: Iterable[EdgeSpec], **attr: Any) -> List[int]:  # type: ignore[override]
        """Add ``(u, v)`` or ``(u, v, weight)`` edges in order.

        Returns:
            List[int]: The logical indices of the new edges.
        """
        indices = []
        for spec in ebunch_to_add:
            if len(spec) == 2:
                indices.append(self.add_edge(spec[0], spec[1], **attr))
            elif len(spec) == 3:
                indices.append(self.add_edge(spec[0], spec[1], spec[2], **attr))
            else:
                raise ValueError(f"Edge must be (u, v) or (u, v, weight), got {spec!r}")
        return indices

    def _add_arc(self, u: VertexID, v: VertexID, edge: Edge, attr: AttrDict) -> ArcID:
        key = self.new_edge_key(u, v)
        data = dict(attr)
        data["weight"] = edge.weight
        data["edge"] = edge.index
        super().add_edge(u, v, key=key, **data)
        self._arcs[key] = (u, v, key, self._succ[u][v][key])
        return key

    def _reject(self, *args: Any, **kwargs: Any) -> None:
        raise ValueError(
            "GraphStore vertices and edges are append-only: "
            "vertices are fixed at construction and edges cannot be removed."
        )

    add_node = _reject  # type: ignore[assignment]
    add_nodes_from = _reject  # type: ignore[assignment]
    remove_node = _reject  # type: ignore[assignment]
    remove_nodes_from = _reject  # type: ignore[assignment]
    remove_edge = _reject  # type: ignore[assignment]
    remove_edges_from = _reject  # type: ignore[assignment]
    clear = _reject  # type: ignore[assignment]
    clear_edges = _reject  # type: ignore[assignment]

    #
    # Read interface
    #
    def check_vertex(self, v: Any, kind: str = "vertex") -> VertexID:
        """Return ``v`` if it is a valid vertex index, else raise InvalidIndexError."""
        return check_index(v, self.vertex_count, kind)

    def get_edges(self) -> Tuple[Edge, ...]:
        """Return all logical edges in index order."""
        return tuple(self._logical_edges)

    def get_edge(self, index: int) -> Edge:
        """Return the logical edge with the given index.

        Raises:
            InvalidIndexError: If no such edge exists.
        """
        check_index(index, len(self._logical_edges), "edge")
        return self._logical_edges[index]

    def get_arcs(self) -> Dict[ArcID, ArcTuple]:
        """Return every stored arc keyed by arc id, in insertion order."""
        return self._arcs

    def arc_lists(self) -> List[List[Arc]]:
        """Return the outgoing arcs of each vertex, in insertion order.

        This is the adjacency ordering every traversal in netalgo follows, so
        results are reproducible for a given sequence of ``add_edge`` calls.
        """
        lists: List[List[Arc]] = [[] for _ in range(self.vertex_count)]
        for u, v, key, data in self._arcs.values():
            lists[u].append(Arc(key, u, v, data["edge"], data["weight"]))
        return lists

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"{type(self).__name__}({kind}, vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )


def build_graph(
    vertex_count: int,
    edges: Iterable[EdgeSpec],
    directed: bool = True,
    weighted: bool = False,
) -> GraphStore:
    """Validate an edge list and build a :class:`GraphStore` from it.

    All indices and weights are checked before the store is created, so a
    rejected call allocates nothing.

    Args:
        vertex_count: Number of vertices ``V``; indices must lie in ``[0, V)``.
        edges: ``(u, v)`` pairs, or ``(u, v, weight)`` triples when ``weighted``.
        directed: Store single arcs (True) or symmetric arc pairs (False).
        weighted: Whether each edge carries an explicit weight.

    Returns:
        GraphStore: The populated graph.

    Raises:
        InvalidIndexError: If an endpoint is outside ``[0, vertex_count)``.
        ValueError: On malformed edge tuples, missing or unexpected weights,
            or non-numeric weights.

    Examples:
        >>> g = build_graph(3, [(0, 1, 2.5), (1, 2, 1.0)], weighted=True)
        >>> g.edge_count
        2
    """
    check_count(vertex_count)
    normalized: List[Tuple[int, int, Weight]] = []
    for position, spec in enumerate(edges):
        spec = tuple(spec)
        if weighted:
            if len(spec) != 3:
                raise ValueError(
                    f"Edge {position} must be (u, v, weight) in a weighted graph, got {spec!r}"
                )
            u, v, w = spec
            check_weight(w, position)
        else:
            if len(spec) != 2:
                raise ValueError(
                    f"Edge {position} must be (u, v) in an unweighted graph, got {spec!r}"
                )
            u, v = spec
            w = 1
        check_index(u, vertex_count)
        check_index(v, vertex_count)
        normalized.append((u, v, w))

    graph = GraphStore(vertex_count, directed=directed, weighted=weighted)
    for u, v, w in normalized:
        if weighted:
            graph.add_edge(u, v, w)
        else:
            graph.add_edge(u, v)
    return graph
