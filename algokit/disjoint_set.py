"""Union-find with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements ``0 .. n-1``, each starting alone."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def merge(self, a: int, b: int) -> int:
        """Join the sets of ``a`` and ``b``; the smaller joins the larger.

        Returns the representative of the joined set.
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return root_a
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        return root_a

    def size(self, x: int) -> int:
        """Return the number of elements in the set holding ``x``."""
        return self._size[self.find(x)]