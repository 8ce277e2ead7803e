"""A character treap: a binary search tree kept as a min-heap on random priorities."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Iterator
from dataclasses import dataclass

PRIORITY_RANGE = 51  # priorities are drawn from range(PRIORITY_RANGE)
WIDTH_OFFSET = 10  # indentation per level in the rendered tree

_PRIORITY_BYTES = 4
_DATA_BYTES = 1
_POINTER_BYTES = 8
_NODE_OVERHEAD = _PRIORITY_BYTES + 2 * _POINTER_BYTES
_NODE_TOTAL = _NODE_OVERHEAD + _DATA_BYTES


@dataclass
class _Node:
    data: str
    priority: int
    left: _Node | None = None
    right: _Node | None = None


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


class Treap:
    """Treap of single characters with the lowest priority at the root."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """Create an empty treap drawing priorities from ``rng``."""
        self._rng = rng if rng is not None else random.Random()
        self._root: _Node | None = None
        self._bytes_overhead = 0
        self._bytes_total = 0

    def insert(self, data: str) -> None:
        """Insert the single character ``data``; equal keys go right."""
        if not isinstance(data, str) or len(data) != 1:
            raise ValueError("treap data must be a single character")
        self._root = self._insert(self._root, data)

    def _insert(self, node: _Node | None, data: str) -> _Node:
        if node is None:
            self._bytes_overhead += _NODE_OVERHEAD
            self._bytes_total += _NODE_TOTAL
            return _Node(data, self._rng.randrange(PRIORITY_RANGE))
        if data < node.data:
            node.left = self._insert(node.left, data)
            if node.left.priority < node.priority:
                return _rotate_right(node)
        else:
            node.right = self._insert(node.right, data)
            if node.right.priority < node.priority:
                return _rotate_left(node)
        return node

    def search(self, data: str) -> int | None:
        """Return the priority of ``data``, or None when it is absent."""
        node = self._root
        while node is not None:
            if data == node.data:
                return node.priority
            node = node.left if data < node.data else node.right
        return None

    def __iter__(self) -> Iterator[str]:
        """Yield the stored characters in key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, left below."""
        parts: list[str] = []

        def visit(node: _Node | None, depth: int) -> None:
            if node is None:
                return
            visit(node.right, depth + 1)
            padding = " " * (WIDTH_OFFSET * depth)
            parts.append(f"\n{padding}{node.priority}|{node.data}\n")
            visit(node.left, depth + 1)

        visit(self._root, 0)
        return "".join(parts)

    def space_overhead(self) -> int:
        """Return the bytes spent on priorities and child links."""
        return self._bytes_overhead

    def space_total(self) -> int:
        """Return the bytes needed for all nodes, data included."""
        return self._bytes_total

    def overhead_fraction(self) -> float:
        """Return overhead bytes over total bytes; NaN for an empty treap."""
        if self._bytes_total == 0:
            return math.nan
        return self._bytes_overhead / self._bytes_total


def main(argv: list[str] | None = None) -> int:
    """Insert the letters B to G, draw the treap and report C's priority."""
    treap = Treap()
    for code in range(66, 72):
        treap.insert(chr(code))
    sys.stdout.write(treap.render())
    print(f"\nC has priority: {treap.search('C')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())