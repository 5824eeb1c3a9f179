"""Doubly linked list with Python-style negative indexing and a small menu."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import partial

from dslab.singly import _ask_int, _nth, _walk


@dataclass(eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class DoublyLinkedList:
    """A doubly linked list addressed by position.

    Non-negative indices count from the start, negative ones from the end
    (-1 is the last node). Inserting into an empty list always succeeds,
    whatever the index.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._start: _Node | None = None
        self._end: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(-1, value)

    def _node_at(self, index: int) -> _Node:
        if index >= 0:
            node = _nth(_walk(self._start, "right"), index)
        else:
            node = _nth(_walk(self._end, "left"), -index - 1)
        if node is None:
            raise IndexError("Invalid index")
        return node

    def _link_after(self, prev: _Node, node: _Node) -> None:
        node.left = prev
        node.right = prev.right
        if prev.right is None:
            self._end = node
        else:
            prev.right.left = node
        prev.right = node

    def _unlink(self, node: _Node) -> None:
        if node.left is None:
            self._start = node.right
        else:
            node.left.right = node.right
        if node.right is None:
            self._end = node.left
        else:
            node.right.left = node.left

    def insert(self, index: int, value: int) -> None:
        """Insert value at the front (0), end (-1) or after the node at index-1."""
        node = _Node(value)
        if index == 0 or self._end is None:
            node.right = self._start
            if self._start is None:
                self._end = node
            else:
                self._start.left = node
            self._start = node
        else:
            self._link_after(self._end if index == -1 else self._node_at(index - 1), node)
        self._size += 1

    def delete(self, index: int) -> int:
        """Remove the node at index and return its value."""
        if self._start is None:
            raise IndexError("List is empty")
        node = self._node_at(index)
        self._unlink(node)
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
        return (node.value for node in _walk(self._start, "right"))

    def __reversed__(self) -> Iterator[int]:
        return (node.value for node in _walk(self._end, "left"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Run the insert/delete/display loop on standard input until it ends."""
    items = DoublyLinkedList()
    ask = partial(_ask_int, complaint="Invalid input error")
    try:
        while True:
            choice = ask(">> ")
            try:
                if choice == 1:
                    value = ask("V: ")
                    items.insert(ask("I: "), value)
                elif choice == 2:
                    index = ask("I: ")
                    print(f"Value: {items.delete(index)}")
                elif choice == 3:
                    print("".join(f"{value}\n" for value in items), end="")
            except IndexError as exc:
                print(f"{exc} error")
    except EOFError:
        return 0