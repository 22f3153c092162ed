"""Structural analysis with discovery-order / low-link bookkeeping.

One depth-first traversal yields strongly connected components on directed
graphs (Tarjan), or bridges and articulation points on undirected graphs.
The traversal keeps an explicit stack of ``[vertex, parent_edge, next_arc]``
frames instead of recursing, and visits vertices and arcs in the same order a
recursive implementation would.

Low-link updates differ by analysis:
  - SCC: a tree child contributes ``low[child]``; an arc to a vertex still on
    the component stack contributes that vertex's *discovery order*; arcs to
    vertices in finished components are ignored.
  - Undirected: the arc pair of the edge used to enter a vertex is skipped
    by logical edge index (so a parallel edge still counts as a back edge).
    Tree edge ``(u, w)`` is a bridge iff ``low[w] > disc[u]``; non-root ``u``
    is an articulation point iff some child has ``low[w] >= disc[u]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from netalgo.algorithms.base import NONE, UNVISITED, AnalysisMode
from netalgo.algorithms.types import StructureResult
from netalgo.graph.store import Arc, Edge, GraphStore, VertexID
from netalgo.logging import get_logger

logger = get_logger(__name__)

_UNDIRECTED_MODES = (AnalysisMode.BRIDGES, AnalysisMode.ARTICULATION_POINTS)


@dataclass
class _TraversalContext:
    """Per-call traversal state; nothing here outlives one analysis."""

    arcs: List[List[Arc]]
    track_scc: bool
    disc: List[int] = field(default_factory=list)
    low: List[int] = field(default_factory=list)
    next_order: int = 0
    # SCC bookkeeping
    stack: List[VertexID] = field(default_factory=list)
    on_stack: List[bool] = field(default_factory=list)
    components: List[Tuple[VertexID, ...]] = field(default_factory=list)
    component_of: List[int] = field(default_factory=list)
    # Undirected bookkeeping
    bridge_edges: List[int] = field(default_factory=list)
    is_cut: List[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        n = len(self.arcs)
        self.disc = [UNVISITED] * n
        self.low = [UNVISITED] * n
        if self.track_scc:
            self.on_stack = [False] * n
            self.component_of = [NONE] * n
        else:
            self.is_cut = [False] * n

    def discover(self, v: VertexID) -> None:
        self.disc[v] = self.low[v] = self.next_order
        self.next_order += 1
        if self.track_scc:
            self.stack.append(v)
            self.on_stack[v] = True

    def close_component(self, v: VertexID) -> None:
        """Pop the component stack down to and including ``v``."""
        index = len(self.components)
        members = []
        while True:
            w = self.stack.pop()
            self.on_stack[w] = False
            self.component_of[w] = index
            members.append(w)
            if w == v:
                break
        self.components.append(tuple(sorted(members)))


def _visit(ctx: _TraversalContext, root: VertexID) -> None:
    """Run the depth-first traversal from one unvisited root."""
    disc, low, arcs = ctx.disc, ctx.low, ctx.arcs
    track_scc = ctx.track_scc
    root_children = 0

    ctx.discover(root)
    frames = [[root, NONE, 0]]
    while frames:
        frame = frames[-1]
        v, parent_edge, i = frame
        out = arcs[v]

        if i < len(out):
            frame[2] = i + 1
            arc = out[i]
            w = arc.target
            if not track_scc and arc.edge == parent_edge:
                continue
            if disc[w] == UNVISITED:
                if v == root:
                    root_children += 1
                ctx.discover(w)
                frames.append([w, arc.edge, 0])
            elif track_scc:
                if ctx.on_stack[w] and disc[w] < low[v]:
                    low[v] = disc[w]
            elif disc[w] < low[v]:
                low[v] = disc[w]
            continue

        # All arcs of v explored.
        frames.pop()
        if track_scc and low[v] == disc[v]:
            ctx.close_component(v)
        if not frames:
            break

        u = frames[-1][0]
        if low[v] < low[u]:
            low[u] = low[v]
        if not track_scc:
            if low[v] > disc[u]:
                ctx.bridge_edges.append(parent_edge)
            if u != root and low[v] >= disc[u]:
                ctx.is_cut[u] = True

    if not track_scc and root_children > 1:
        ctx.is_cut[root] = True


def _resolve_mode(graph: GraphStore, mode: AnalysisMode) -> AnalysisMode:
    mode = AnalysisMode(mode)
    if mode == AnalysisMode.SCC and not graph.directed:
        raise ValueError(
            "Strongly connected components require a directed graph; "
            "use BRIDGES or ARTICULATION_POINTS on undirected graphs"
        )
    if mode in _UNDIRECTED_MODES and graph.directed:
        raise ValueError(f"{mode.name} analysis requires an undirected graph")
    return mode


def analyze_structure(
    graph: GraphStore, mode: AnalysisMode = AnalysisMode.ALL
) -> StructureResult:
    """Compute SCCs, bridges and/or articulation points in one O(V+E) pass.

    ``SCC`` applies to directed graphs; ``BRIDGES`` and ``ARTICULATION_POINTS``
    apply to undirected graphs. ``ALL`` computes whatever applies to the
    graph's kind. Repeated calls on an unchanged graph return equal results.

    Args:
        graph: The graph to analyze; it is only read.
        mode: Which analysis to report.

    Returns:
        StructureResult: Requested structures; the others are None.

    Raises:
        ValueError: If ``mode`` does not apply to the graph's kind.
    """
    mode = _resolve_mode(graph, mode)
    ctx = _TraversalContext(arcs=graph.arc_lists(), track_scc=graph.directed)
    for root in range(graph.vertex_count):
        if ctx.disc[root] == UNVISITED:
            _visit(ctx, root)

    if ctx.track_scc:
        logger.debug(
            "Found %d strongly connected component(s) in %r", len(ctx.components), graph
        )
        return StructureResult(
            mode=mode,
            components=tuple(ctx.components),
            component_of=tuple(ctx.component_of),
        )

    bridges = None
    if mode in (AnalysisMode.BRIDGES, AnalysisMode.ALL):
        bridges = tuple(graph.get_edge(e) for e in sorted(ctx.bridge_edges))
    points = None
    if mode in (AnalysisMode.ARTICULATION_POINTS, AnalysisMode.ALL):
        points = tuple(v for v, cut in enumerate(ctx.is_cut) if cut)
    logger.debug(
        "Found %d bridge(s) and %d articulation point(s) in %r",
        len(ctx.bridge_edges),
        sum(ctx.is_cut),
        graph,
    )
    return StructureResult(mode=mode, bridges=bridges, articulation_points=points)


def strongly_connected_components(graph: GraphStore) -> List[Tuple[VertexID, ...]]:
    """Return the SCCs of a directed graph in completion order."""
    result = analyze_structure(graph, AnalysisMode.SCC)
    return list(result.components or ())


def bridges(graph: GraphStore) -> List[Edge]:
    """Return the bridges of an undirected graph, sorted by edge index."""
    result = analyze_structure(graph, AnalysisMode.BRIDGES)
    return list(result.bridges or ())


def articulation_points(graph: GraphStore) -> List[VertexID]:
    """Return the articulation points of an undirected graph in ascending order."""
    result = analyze_structure(graph, AnalysisMode.ARTICULATION_POINTS)
    return list(result.articulation_points or ())
