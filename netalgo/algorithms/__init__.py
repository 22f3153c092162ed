"""Graph algorithms: union-find, spanning forests, low-link analysis, flow and matching."""

from netalgo.algorithms.base import AnalysisMode
from netalgo.algorithms.connectivity import connected_components, has_cycle
from netalgo.algorithms.disjoint_set import DisjointSet
from netalgo.algorithms.lowlink import (
    analyze_structure,
    articulation_points,
    bridges,
    strongly_connected_components,
)
from netalgo.algorithms.matching import bipartite_flow_network, max_bipartite_matching
from netalgo.algorithms.max_flow import ResidualNetwork, max_flow
from netalgo.algorithms.spanning_tree import find_spanning_forest, kruskal_order
from netalgo.algorithms.types import (
    FlowSummary,
    MatchingResult,
    SpanningForest,
    StructureResult,
)

__all__ = [
    "AnalysisMode",
    "DisjointSet",
    "FlowSummary",
    "MatchingResult",
    "ResidualNetwork",
    "SpanningForest",
    "StructureResult",
    "analyze_structure",
    "articulation_points",
    "bipartite_flow_network",
    "bridges",
    "connected_components",
    "find_spanning_forest",
    "has_cycle",
    "kruskal_order",
    "max_bipartite_matching",
    "max_flow",
    "strongly_connected_components",
]
