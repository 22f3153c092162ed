"""Graph primitives and helpers.

This package provides the dense-index multigraph `GraphStore`, the
`build_graph` constructor, and NetworkX conversion helpers (`convert`).
"""

from netalgo.graph.store import Arc, Edge, GraphStore, build_graph

__all__ = ["Arc", "Edge", "GraphStore", "build_graph"]
