"""Maximum bipartite matching with augmenting paths (Kuhn's algorithm).

Left vertices are tried one at a time. Each attempt is a depth-first search
for an augmenting path that ends at a free right vertex, where a matched right
vertex ``r`` can be taken if its current partner can be re-matched elsewhere.
The ``seen`` marks on right vertices belong to a single attempt and are
allocated afresh for every left vertex. When no attempt succeeds any more,
no augmenting path exists and the matching is maximum (Berge).
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from netalgo.algorithms.base import NONE
from netalgo.algorithms.types import MatchingResult
from netalgo.graph.store import GraphStore
from netalgo.logging import get_logger
from netalgo.utils.validation import check_count, check_index

logger = get_logger(__name__)

Pair = Tuple[int, int]


def _adjacency(left_count: int, right_count: int, pairs: Iterable[Pair]) -> List[List[int]]:
    """Validate every pair, then group right endpoints by left vertex."""
    validated = []
    for pair in pairs:
        left, right = pair
        check_index(left, left_count, "left vertex")
        check_index(right, right_count, "right vertex")
        validated.append((left, right))

    adjacency: List[List[int]] = [[] for _ in range(left_count)]
    for left, right in validated:
        adjacency[left].append(right)
    return adjacency


def _augment(
    root: int,
    adjacency: Sequence[Sequence[int]],
    match_left: List[int],
    match_right: List[int],
    seen: List[bool],
) -> bool:
    """Search for an augmenting path from free left vertex ``root``.

    Frames are ``[left_vertex, next_neighbor_index]``; ``via[k]`` is the right
    vertex through which frame ``k + 1`` was entered. On success the path is
    flipped: every left vertex on the stack takes the right vertex it reached.
    """
    frames = [[root, 0]]
    via: List[int] = []
    while frames:
        frame = frames[-1]
        left, i = frame
        neighbors = adjacency[left]
        if i == len(neighbors):
            frames.pop()
            if via:
                via.pop()
            continue

        frame[1] = i + 1
        right = neighbors[i]
        if seen[right]:
            continue
        seen[right] = True

        if match_right[right] == NONE:
            via.append(right)
            for (u, _), r in zip(frames, via):
                match_left[u] = r
                match_right[r] = u
            return True
        via.append(right)
        frames.append([match_right[right], 0])
    return False


def max_bipartite_matching(
    left_count: int, right_count: int, pairs: Iterable[Pair]
) -> MatchingResult:
    """Compute a maximum matching of a bipartite graph.

    Args:
        left_count: Number of left vertices, indexed ``0..left_count-1``.
        right_count: Number of right vertices, indexed ``0..right_count-1``.
        pairs: Allowed ``(left, right)`` pairs. Duplicates are harmless.

    Returns:
        MatchingResult: The matched pairs and per-side partner tables.

    Raises:
        InvalidIndexError: If a pair references a vertex outside its side.
        ValueError: If a count is negative.
    """
    check_count(left_count, "left vertex")
    check_count(right_count, "right vertex")
    adjacency = _adjacency(left_count, right_count, pairs)

    match_left = [NONE] * left_count
    match_right = [NONE] * right_count
    size = 0
    for left in range(left_count):
        # Fresh marks per attempt; sharing them would hide valid paths.
        seen = [False] * right_count
        if _augment(left, adjacency, match_left, match_right, seen):
            size += 1

    logger.debug(
        "Bipartite matching of size %d (%d left, %d right)", size, left_count, right_count
    )
    return MatchingResult(
        pairs=frozenset((l, r) for l, r in enumerate(match_left) if r != NONE),
        match_left=tuple(None if r == NONE else r for r in match_left),
        match_right=tuple(None if l == NONE else l for l in match_right),
    )


def bipartite_flow_network(
    left_count: int, right_count: int, pairs: Iterable[Pair]
) -> Tuple[GraphStore, int, int]:
    """Express a bipartite matching instance as a unit-capacity flow network.

    Vertices ``0..L-1`` are the left side, ``L..L+R-1`` the right side, then
    the source ``L+R`` and the sink ``L+R+1``. The maximum flow from source to
    sink equals the maximum matching size.

    Returns:
        Tuple[GraphStore, int, int]: The network, the source and the sink.
    """
    check_count(left_count, "left vertex")
    check_count(right_count, "right vertex")
    adjacency = _adjacency(left_count, right_count, pairs)

    source = left_count + right_count
    sink = source + 1
    network = GraphStore(sink + 1, directed=True, weighted=True)
    for left in range(left_count):
        network.add_edge(source, left, 1)
    for left, rights in enumerate(adjacency):
        for right in rights:
            network.add_edge(left, left_count + right, 1)
    for right in range(right_count):
        network.add_edge(left_count + right, sink, 1)
    return network, source, sink
