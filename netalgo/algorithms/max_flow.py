"""Maximum flow via shortest augmenting paths (Edmonds-Karp).

Each iteration runs a breadth-first search over arcs with residual capacity
above the tolerance, so every augmenting path has the fewest possible arcs.
That bounds the number of augmentations by O(V*E) and the total running time
by O(V*E^2). The residual network stores each arc next to its mirror
(``a`` and ``a ^ 1``), and pushing ``f`` units moves exactly ``f`` from one
to the other, so ``cap[a] + cap[a ^ 1]`` never changes.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, FrozenSet, List, Optional

from netalgo.algorithms.base import NONE, ArcRef, Capacity
from netalgo.algorithms.types import FlowSummary
from netalgo.config import ALGORITHM_CONFIG
from netalgo.graph.store import ArcID, GraphStore, VertexID
from netalgo.logging import get_logger
from netalgo.utils.validation import check_capacity

logger = get_logger(__name__)


class ResidualNetwork:
    """Paired-arc residual network over vertices ``0..vertex_count-1``.

    Residual arc ``2k`` is the k-th added arc and ``2k + 1`` its mirror, which
    starts with zero capacity.

    Attributes:
        head: Target vertex of each residual arc.
        capacity: Current residual capacity of each residual arc.
        adjacency: Residual arcs leaving each vertex, in insertion order.
        arc_ids: GraphStore arc id of each forward residual arc.
    """

    __slots__ = ("vertex_count", "head", "capacity", "adjacency", "arc_ids")

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        self.head: List[VertexID] = []
        self.capacity: List[Capacity] = []
        self.adjacency: List[List[int]] = [[] for _ in range(vertex_count)]
        self.arc_ids: List[ArcID] = []

    @classmethod
    def from_graph(cls, graph: GraphStore) -> "ResidualNetwork":
        """Build the residual network of ``graph`` with zero initial flow.

        Raises:
            InvalidCapacityError: If any arc has a negative capacity. All arcs
                are checked before the network is allocated.
        """
        arcs = graph.get_arcs()
        for _, _, _, data in arcs.values():
            check_capacity(data["weight"], data["edge"])

        network = cls(graph.vertex_count)
        for u, v, key, data in arcs.values():
            network.add_arc(u, v, data["weight"], key)
        return network

    def add_arc(self, u: VertexID, v: VertexID, cap: Capacity, arc_id: ArcID) -> int:
        """Append arc ``u -> v`` and its zero-capacity mirror; return the forward index."""
        forward = len(self.head)
        self.head.append(v)
        self.capacity.append(cap)
        self.adjacency[u].append(forward)
        self.head.append(u)
        self.capacity.append(0)
        self.adjacency[v].append(forward + 1)
        self.arc_ids.append(arc_id)
        return forward

    def tail(self, arc: int) -> VertexID:
        return self.head[arc ^ 1]

    def push(self, arc: int, amount: Capacity) -> None:
        """Move ``amount`` units of residual capacity from ``arc`` to its mirror."""
        self.capacity[arc] -= amount
        self.capacity[arc ^ 1] += amount

    def shortest_augmenting_path(
        self, source: VertexID, sink: VertexID, tolerance: float = 0.0
    ) -> Optional[List[int]]:
        """Breadth-first search for a fewest-arcs path with positive residuals.

        Returns:
            The residual arcs from ``source`` to ``sink`` in path order, or None
            if the sink is unreachable.
        """
        via = [NONE] * self.vertex_count
        visited = [False] * self.vertex_count
        visited[source] = True
        queue = deque([source])
        head, capacity, adjacency = self.head, self.capacity, self.adjacency

        while queue:
            u = queue.popleft()
            for arc in adjacency[u]:
                v = head[arc]
                if visited[v] or capacity[arc] <= tolerance:
                    continue
                visited[v] = True
                via[v] = arc
                if v == sink:
                    path = []
                    while v != source:
                        arc = via[v]
                        path.append(arc)
                        v = head[arc ^ 1]
                    path.reverse()
                    return path
                queue.append(v)
        return None

    def reachable_from(self, source: VertexID, tolerance: float = 0.0) -> FrozenSet[VertexID]:
        """Vertices reachable from ``source`` over arcs with residual above ``tolerance``."""
        seen = {source}
        stack = [source]
        while stack:
            u = stack.pop()
            for arc in self.adjacency[u]:
                v = self.head[arc]
                if v not in seen and self.capacity[arc] > tolerance:
                    seen.add(v)
                    stack.append(v)
        return frozenset(seen)


def max_flow(
    graph: GraphStore,
    source: VertexID,
    sink: VertexID,
    *,
    tolerance: Optional[float] = None,
) -> FlowSummary:
    """Compute the maximum flow from ``source`` to ``sink``.

    Edge weights are capacities. On an undirected graph each edge contributes
    one arc of that capacity in each direction. The graph itself is not
    modified; all residual state lives in a per-call :class:`ResidualNetwork`.

    Args:
        graph: The capacitated network.
        source: Source vertex.
        sink: Sink vertex. ``source == sink`` yields a zero flow.
        tolerance: Residual capacities at or below this are treated as zero.
            Defaults to ``ALGORITHM_CONFIG.flow_tolerance``.

    Returns:
        FlowSummary: Flow value, per-arc flow and residuals, and a minimum cut.

    Raises:
        InvalidIndexError: If ``source`` or ``sink`` is out of range.
        InvalidCapacityError: If any capacity is negative.

    Examples:
        >>> g = build_graph(3, [(0, 1, 10), (1, 2, 5)], weighted=True)
        >>> max_flow(g, 0, 2).total_flow
        5
    """
    graph.check_vertex(source, "source vertex")
    graph.check_vertex(sink, "sink vertex")
    tol = ALGORITHM_CONFIG.resolve_tolerance(tolerance)
    network = ResidualNetwork.from_graph(graph)

    total_flow: Capacity = 0
    augmentations = 0
    if source != sink:
        while True:
            path = network.shortest_augmenting_path(source, sink, tol)
            if path is None:
                break
            bottleneck = min(network.capacity[arc] for arc in path)
            for arc in path:
                network.push(arc, bottleneck)
            total_flow += bottleneck
            augmentations += 1

    logger.debug(
        "Max flow %s -> %s: value %s after %d augmentation(s)",
        source,
        sink,
        total_flow,
        augmentations,
    )
    return _build_flow_summary(graph, network, source, total_flow, augmentations, tol)


def _build_flow_summary(
    graph: GraphStore,
    network: ResidualNetwork,
    source: VertexID,
    total_flow: Capacity,
    augmentations: int,
    tolerance: float,
) -> FlowSummary:
    """Construct a ``FlowSummary`` from the final residual network."""
    edge_flow: Dict[ArcRef, Capacity] = {}
    residual_cap: Dict[ArcRef, Capacity] = {}
    original_cap: Dict[ArcRef, Capacity] = {}

    for k, arc_id in enumerate(network.arc_ids):
        forward = 2 * k
        ref = (network.tail(forward), network.head[forward], arc_id)
        edge_flow[ref] = network.capacity[forward + 1]
        residual_cap[ref] = network.capacity[forward]
        original_cap[ref] = graph.get_arcs()[arc_id][3]["weight"]

    reachable = network.reachable_from(source, tolerance)
    min_cut = tuple(
        ref for ref in edge_flow if ref[0] in reachable and ref[1] not in reachable
    )

    return FlowSummary(
        total_flow=total_flow,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
        augmentations=augmentations,
        original_cap=original_cap,
    )
