"""Types and data structures for algorithm results.

Defines immutable result containers returned by the public algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from netalgo.algorithms.base import AnalysisMode, ArcRef, Capacity
from netalgo.graph.store import Edge, VertexID


@dataclass(frozen=True)
class SpanningForest:
    """Minimum-weight spanning forest produced by Kruskal's algorithm.

    Attributes:
        total_weight: Sum of the accepted edge weights.
        edges: Accepted logical edges in acceptance order.
        component_count: Number of trees in the forest (1 for a connected graph).
        vertex_count: Number of vertices covered by the forest.
    """

    total_weight: Capacity
    edges: Tuple[Edge, ...]
    component_count: int
    vertex_count: int

    @property
    def is_spanning_tree(self) -> bool:
        """True if the input graph was connected (a single tree)."""
        return self.component_count <= 1


@dataclass(frozen=True)
class StructureResult:
    """Outcome of a low-link structural traversal.

    Fields that the requested mode did not compute are ``None``.

    Attributes:
        mode: The mode the traversal ran with.
        components: Strongly connected components as sorted vertex tuples, in
            completion order (reverse topological order of the condensation).
        component_of: ``component_of[v]`` is the index of v's component.
        bridges: Bridge edges sorted by logical edge index.
        articulation_points: Cut vertices in ascending order.
    """

    mode: AnalysisMode
    components: Optional[Tuple[Tuple[VertexID, ...], ...]] = None
    component_of: Optional[Tuple[int, ...]] = None
    bridges: Optional[Tuple[Edge, ...]] = None
    articulation_points: Optional[Tuple[VertexID, ...]] = None


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: The maximum flow value achieved.
        edge_flow: Flow on each graph arc, keyed by ``(source, target, arc_id)``.
        residual_cap: Remaining forward capacity on each graph arc. The
            mirrored reverse residual of an arc equals its ``edge_flow``.
        reachable: Vertices reachable from the source in the final residual
            network (the source side of a minimum cut).
        min_cut: Arcs from ``reachable`` to the rest of the graph.
        augmentations: Number of augmenting paths pushed.
        original_cap: Capacity of each graph arc before any flow was pushed.
    """

    total_flow: Capacity
    edge_flow: Dict[ArcRef, Capacity]
    residual_cap: Dict[ArcRef, Capacity]
    reachable: FrozenSet[VertexID]
    min_cut: Tuple[ArcRef, ...]
    augmentations: int
    original_cap: Dict[ArcRef, Capacity]

    @property
    def min_cut_capacity(self) -> Capacity:
        """Total original capacity of the minimum-cut arcs."""
        return sum(self.original_cap[arc] for arc in self.min_cut)


@dataclass(frozen=True)
class MatchingResult:
    """Maximum bipartite matching.

    Attributes:
        pairs: Matched ``(left, right)`` pairs.
        match_left: ``match_left[l]`` is the right vertex matched to ``l`` or None.
        match_right: ``match_right[r]`` is the left vertex matched to ``r`` or None.
    """

    pairs: FrozenSet[Tuple[int, int]]
    match_left: Tuple[Optional[int], ...]
    match_right: Tuple[Optional[int], ...]

    @property
    def size(self) -> int:
        return len(self.pairs)
