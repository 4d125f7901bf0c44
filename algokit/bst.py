"""An unbalanced binary search tree of distinct keys."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    key: Any
    left: "_Node | None" = None
    right: "_Node | None" = None


class BinarySearchTree:
    """Binary search tree; inserting a key already present has no effect."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key`` unless it is already in the tree."""
        if self._root is None:
            self._root = _Node(key)
            self._size += 1
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size