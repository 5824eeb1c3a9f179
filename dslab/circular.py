"""Circular doubly linked list whose positions wrap around."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from dslab.doubly import _Node
from dslab.singly import _nth, _walk


class CircularList:
    """A circular doubly linked list addressed by position.

    Positions count forward from the head and wrap around, so index
    ``len(lst)`` names the head again. Negative indices are rejected.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(self._size, value)

    def _node_at(self, index: int) -> _Node:
        if self._head is None:
            raise IndexError("list is empty")
        if index < 0:
            raise IndexError(f"invalid index {index}")
        return _nth(_walk(self._head, "right"), index % self._size)

    @staticmethod
    def _splice_after(prev: _Node, node: _Node) -> None:
        node.left, node.right = prev, prev.right
        prev.right.left = node
        prev.right = node

    def insert(self, index: int, value: int) -> None:
        """Insert value as the new head (index 0) or after the node at index-1."""
        node = _Node(value)
        if index != 0:
            self._splice_after(self._node_at(index - 1), node)
        else:
            if self._head is None:
                node.left = node.right = node
            else:
                self._splice_after(self._head.left, node)
            self._head = node
        self._size += 1

    def delete(self, index: int) -> int:
        """Remove the node at index and return its value."""
        node = self._node_at(index)
        if node.right is node:
            self._head = None
        else:
            node.right.left, node.left.right = node.left, node.right
            if self._head is node:
                self._head = node.right
        self._size -= 1
        return node.value

    def get(self, index: int) -> int:
        """Return the value at index."""
        return self._node_at(index).value

    def set(self, index: int, value: int) -> None:
        """Replace the value at index."""
        self._node_at(index).value = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in islice(_walk(self._head, "right"), self._size))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"