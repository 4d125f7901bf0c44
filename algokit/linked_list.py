"""A singly linked list with tail appends."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    data: Any
    next: "_Node | None" = None


class LinkedList:
    """Singly linked list that keeps a tail pointer for O(1) appends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length

    def render(self) -> str:
        """Return the list as ``a-->b-->...-->``, each value followed by an arrow."""
        return "".join(f"{value}-->" for value in self)


def read_until_sentinel(values: Iterable[Any], sentinel: Any = -1) -> LinkedList:
    """Build a list from ``values`` up to, and excluding, the first ``sentinel``."""
    result = LinkedList()
    for value in values:
        if value == sentinel:
            break
        result.append(value)
    return result