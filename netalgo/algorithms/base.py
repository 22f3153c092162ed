from __future__ import annotations

from enum import IntEnum
from typing import Tuple

from netalgo.graph.store import ArcID, VertexID, Weight

#: Directed arc reference used in flow results: ``(source, target, arc_id)``.
ArcRef = Tuple[VertexID, VertexID, ArcID]

#: Numeric edge weight or capacity.
Capacity = Weight

#: Discovery order assigned to a vertex the traversal has not reached yet.
UNVISITED = -1

#: Marks a missing parent arc, matched vertex or similar slot.
NONE = -1


class AnalysisMode(IntEnum):
    """
    Which low-link analyses a structural traversal should produce.
    """

    #: Strongly connected components (directed graphs).
    SCC = 1
    #: Bridges, i.e. edges whose removal disconnects their component (undirected graphs).
    BRIDGES = 2
    #: Articulation points, i.e. cut vertices (undirected graphs).
    ARTICULATION_POINTS = 3
    #: Every analysis that applies to the graph's kind, in one traversal.
    ALL = 4
