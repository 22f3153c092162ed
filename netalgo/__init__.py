"""netalgo: graph connectivity, structural analysis and flow algorithms.

netalgo builds on a dense-index NetworkX multigraph (`GraphStore`) and
provides union-find connectivity, Kruskal spanning forests, a single-pass
low-link analyzer (strongly connected components, bridges, articulation
points), Edmonds-Karp maximum flow and bipartite matching.

Primary API:
    build_graph() - Validate an edge list and create a GraphStore
    find_spanning_forest() - Minimum spanning tree, or forest if disconnected
    analyze_structure() - SCCs, bridges and articulation points in one pass
    max_flow() - Maximum flow with residual capacities and a minimum cut
    max_bipartite_matching() - Maximum matching of a bipartite graph

Example:
    from netalgo import build_graph, find_spanning_forest

    g = build_graph(
        4,
        [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)],
        directed=False,
        weighted=True,
    )
    forest = find_spanning_forest(g)
    forest.total_weight  # 19
"""

from __future__ import annotations

from netalgo import logging
from netalgo._version import __version__
from netalgo.algorithms import (
    AnalysisMode,
    DisjointSet,
    FlowSummary,
    MatchingResult,
    SpanningForest,
    StructureResult,
    analyze_structure,
    articulation_points,
    bipartite_flow_network,
    bridges,
    connected_components,
    find_spanning_forest,
    has_cycle,
    max_bipartite_matching,
    max_flow,
    strongly_connected_components,
)
from netalgo.config import ALGORITHM_CONFIG, AlgorithmConfig
from netalgo.exceptions import (
    DisconnectedGraphError,
    InvalidCapacityError,
    InvalidIndexError,
    NetAlgoError,
)
from netalgo.graph.convert import NodeMap, from_networkx, to_networkx
from netalgo.graph.store import Edge, GraphStore, build_graph

__all__ = [
    # Version
    "__version__",
    # Graph store
    "GraphStore",
    "Edge",
    "build_graph",
    # Algorithms (primary API)
    "find_spanning_forest",
    "analyze_structure",
    "max_flow",
    "max_bipartite_matching",
    "DisjointSet",
    "AnalysisMode",
    "strongly_connected_components",
    "bridges",
    "articulation_points",
    "connected_components",
    "has_cycle",
    "bipartite_flow_network",
    # Results
    "SpanningForest",
    "StructureResult",
    "FlowSummary",
    "MatchingResult",
    # Errors
    "NetAlgoError",
    "InvalidIndexError",
    "InvalidCapacityError",
    "DisconnectedGraphError",
    # Configuration
    "AlgorithmConfig",
    "ALGORITHM_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
