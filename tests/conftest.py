"""Global pytest configuration and shared sample graphs."""

from __future__ import annotations

import pytest

from netalgo.graph.store import GraphStore, build_graph
from netalgo.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Give each test the default logging configuration."""
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
    setup_root_logger()


@pytest.fixture
def kruskal4() -> GraphStore:
    # Weights:
    #        [10]
    #    0────────1
    #    │ \      │
    # [6]│  \[5]  │[15]
    #    │   \    │
    #    2────────3
    #        [4]
    return build_graph(
        4,
        [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)],
        directed=False,
        weighted=True,
    )


@pytest.fixture
def cycle5() -> GraphStore:
    # 0 ─► 1 ─► 2 ─► 3 ─► 4 ─► 0
    return build_graph(5, [(i, (i + 1) % 5) for i in range(5)], directed=True)


@pytest.fixture
def path5() -> GraphStore:
    # 0 ── 1 ── 2 ── 3 ── 4
    return build_graph(5, [(i, i + 1) for i in range(4)], directed=False)


@pytest.fixture
def two_triangles() -> GraphStore:
    # Two triangles joined by the bridge 2 ── 3:
    #
    #   0           4
    #   │ \       / │
    #   │  2 ── 3   │
    #   │ /       \ │
    #   1           5
    return build_graph(
        6,
        [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)],
        directed=False,
    )


@pytest.fixture
def parallel_pair() -> GraphStore:
    # Edges 0 and 1 both join 0 ── 1, so neither is a bridge; 1 ── 2 is.
    #
    #    ┌───┐
    #    0   1 ── 2
    #    └───┘
    return build_graph(3, [(0, 1), (1, 0), (1, 2)], directed=False)


@pytest.fixture
def scc_digraph() -> GraphStore:
    # Components {0,1,2}, {3,4}, {5}:
    #
    #   0 ─► 1 ─► 3 ◄─► 4
    #   ▲    │    │
    #   └─ 2 ◄┘   ▼
    #             5
    return build_graph(
        6,
        [(0, 1), (1, 2), (2, 0), (1, 3), (3, 4), (4, 3), (3, 5)],
        directed=True,
    )


@pytest.fixture
def clrs_network() -> GraphStore:
    # Classic textbook network, source 0 and sink 5. Max flow is 23 and the
    # only minimum cut is {0, 1, 2, 4} | {3, 5}, crossing arcs
    # 1->3 [12], 4->3 [7] and 4->5 [4].
    return build_graph(
        6,
        [
            (0, 1, 16),
            (0, 2, 13),
            (1, 2, 10),
            (2, 1, 4),
            (1, 3, 12),
            (3, 2, 9),
            (2, 4, 14),
            (4, 3, 7),
            (3, 5, 20),
            (4, 5, 4),
        ],
        directed=True,
        weighted=True,
    )
