"""A binary search tree that keeps distinct, ordered values."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BST:
    """Unbalanced binary search tree. Inserting a value already present does nothing."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> BST:
        """Build a tree by inserting ``values`` in the order given."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def insert(self, value: Any) -> None:
        """Insert ``value`` unless an equal value is already stored."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def search(self, value: Any) -> bool:
        """Return True if ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def min_value(self) -> Any | None:
        """Return the smallest value, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def in_order(self) -> list[Any]:
        """Return the stored values in ascending order."""
        return list(self)

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0
        levels = 0
        frontier = deque([self._root])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                node = frontier.popleft()
                if node.left is not None:
                    frontier.append(node.left)
                if node.right is not None:
                    frontier.append(node.right)
        return levels

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size


def main(argv: Sequence[str] | None = None) -> int:
    """Build the demonstration tree and print what it answers."""
    if argv is None:
        argv = sys.argv[1:]
    values = [int(arg) for arg in argv] if argv else [10, 5, 15, 3, 7, 12, 18]
    tree = BST.from_values(values)

    print(f"Search 7: {str(tree.search(7)).lower()}")
    print(f"Search 20: {str(tree.search(20)).lower()}")

    tree.insert(20)
    print(f"Search 20: {str(tree.search(20)).lower()}")

    print(f"Height of tree: {tree.height()}")

    smallest = tree.min_value()
    if smallest is None:
        print("No min tree is empty")
    else:
        print(f"Min value: {smallest}")

    print(f"In-order traversal: {tree.in_order()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())