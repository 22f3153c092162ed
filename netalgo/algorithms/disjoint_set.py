"""Disjoint-set forest (union-find) over dense integer elements.

Uses union by rank and path compression, giving amortized O(alpha(n)) per
operation. ``union`` only ever redirects one root under another root, so the
parent relation stays acyclic and ``find`` always terminates.
"""

from __future__ import annotations

from typing import Dict, List

from netalgo.utils.validation import check_count, check_index


class DisjointSet:
    """Union-find structure over the elements ``0..size-1``.

    Attributes:
        parent: ``parent[x]``; a self-parent marks a set representative.
        rank: Upper bound on the height of the tree rooted at each element,
            consulted only to choose the merge direction.

    Example:
        >>> ds = DisjointSet(4)
        >>> ds.union(0, 1)
        True
        >>> ds.connected(1, 0)
        True
        >>> ds.component_count
        3
    """

    __slots__ = ("parent", "rank", "_components")

    def __init__(self, size: int) -> None:
        check_count(size, "element")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self._components = size

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def component_count(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._components

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``.

        Every node on the walked path is re-pointed directly at the root.

        Raises:
            InvalidIndexError: If ``x`` is not in ``[0, len(self))``.
        """
        check_index(x, len(self.parent), "element")
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets containing ``x`` and ``y``.

        The root of lower rank is attached under the root of higher rank; on a
        tie ``y``'s root goes under ``x``'s root, whose rank grows by one.

        Returns:
            bool: False if ``x`` and ``y`` were already in the same set.

        Raises:
            InvalidIndexError: If either element is out of range. Both are
                checked before ``find`` compresses any path.
        """
        n = len(self.parent)
        check_index(x, n, "element")
        check_index(y, n, "element")
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        rank = self.rank
        if rank[root_x] < rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if rank[root_x] == rank[root_y]:
            rank[root_x] += 1
        self._components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """True if ``x`` and ``y`` belong to the same set."""
        return self.find(x) == self.find(y)

    def groups(self) -> List[List[int]]:
        """Return every set as an ascending list, ordered by smallest member."""
        by_root: Dict[int, List[int]] = {}
        for x in range(len(self.parent)):
            by_root.setdefault(self.find(x), []).append(x)
        return list(by_root.values())

    def __repr__(self) -> str:
        return f"DisjointSet(size={len(self)}, components={self._components})"
