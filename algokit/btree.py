"""B-tree keyed by any mutually comparable values."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Iterator
from typing import Any


class BTreeNode:
    """A B-tree node: sorted keys and, unless a leaf, one more child than keys."""

    def __init__(self, leaf: bool = True) -> None:
        self.leaf = leaf
        self.keys: list[Any] = []
        self.children: list[BTreeNode] = []

    def search(self, key: Any) -> BTreeNode | None:
        """Return the node in this subtree that holds ``key``, or None."""
        node = self
        while True:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return node
            if node.leaf:
                return None
            node = node.children[i]

    def traverse(self) -> Iterator[Any]:
        """Yield the keys of this subtree in ascending order."""
        if self.leaf:
            yield from self.keys
            return
        for child, key in zip(self.children, self.keys):
            yield from child.traverse()
            yield key
        yield from self.children[-1].traverse()


class BTree:
    """A B-tree of minimum degree ``degree``; duplicate keys are kept."""

    def __init__(self, degree: int) -> None:
        if degree < 2:
            raise ValueError(f"minimum degree must be at least 2, got {degree}")
        self.degree = degree
        self.root: BTreeNode | None = None
        self._count = 0

    @property
    def _max_keys(self) -> int:
        return 2 * self.degree - 1

    def _split_child(self, parent: BTreeNode, index: int) -> None:
        t = self.degree
        child = parent.children[index]
        sibling = BTreeNode(child.leaf)
        middle = child.keys[t - 1]
        sibling.keys = child.keys[t:]
        child.keys = child.keys[: t - 1]
        if not child.leaf:
            sibling.children = child.children[t:]
            child.children = child.children[:t]
        parent.keys.insert(index, middle)
        parent.children.insert(index + 1, sibling)

    def _insert_non_full(self, node: BTreeNode, key: Any) -> None:
        while not node.leaf:
            i = bisect_right(node.keys, key)
            if len(node.children[i].keys) == self._max_keys:
                self._split_child(node, i)
                if key > node.keys[i]:
                    i += 1
            node = node.children[i]
        insort_right(node.keys, key)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree, splitting full nodes on the way down."""
        root = self.root
        if root is None:
            root = BTreeNode(leaf=True)
            root.keys.append(key)
            self.root = root
        elif len(root.keys) == self._max_keys:
            new_root = BTreeNode(leaf=False)
            new_root.children.append(root)
            self._split_child(new_root, 0)
            index = 1 if new_root.keys[0] < key else 0
            self._insert_non_full(new_root.children[index], key)
            self.root = new_root
        else:
            self._insert_non_full(root, key)
        self._count += 1

    def search(self, key: Any) -> BTreeNode | None:
        """Return the node holding ``key``, or None if it is absent."""
        return self.root.search(key) if self.root is not None else None

    def traverse(self) -> Iterator[Any]:
        """Yield every key in ascending order."""
        if self.root is not None:
            yield from self.root.traverse()

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.traverse()

    def __len__(self) -> int:
        return self._count