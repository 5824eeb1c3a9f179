"""Singly linked list with head and tail tracking, plus an interactive menu."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any

MENU = (
    "Menu:\n"
    "    1. Insert at the begining\n"
    "    2. Insert at nth position\n"
    "    3. Insert at the end\n"
    "    4. Delete at the begining\n"
    "    5. Delete at nth position\n"
    "    6. Delete at the end\n"
    "    7. Get at the nth position\n"
    "    8. Set at the nth position\n"
    "    9. Length of the List\n"
    "    10. Exit"
)


@dataclass(eq=False)
class _Node:
    value: int
    link: _Node | None = None


def _walk(node: Any, step: str) -> Iterator[Any]:
    """Yield node and every node reached by following the attribute step."""
    while node is not None:
        yield node
        node = getattr(node, step)


def _nth(nodes: Iterator[Any], index: int) -> Any:
    """Return the node index places into nodes, or None if there is none."""
    return next(islice(nodes, index, None), None)


def _ask_int(prompt: str, complaint: str = "Error: Invalid Input!!!") -> int:
    """Prompt until an integer is typed, printing complaint after bad input."""
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print(complaint)


def _read_values(count_prompt: str, item_prompt: str, complaint: str = "Invalid input") -> list[int]:
    """Ask for a count, then for that many integers; item_prompt gets the position."""
    count = _ask_int(count_prompt, complaint)
    return [_ask_int(item_prompt.format(position), complaint) for position in range(count)]


class SinglyLinkedList:
    """A singly linked list addressed by position.

    Index 0 is the first node, -1 the last node and -2 the node before the
    last one. Any other negative index is invalid.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._reset()
        for value in values:
            self.insert(-1, value)

    def _reset(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def _node_at(self, index: int) -> _Node:
        node: _Node | None
        if index == -1:
            node = self._tail
        elif index == -2:
            node = self._node_at(self._size - 2) if self._size >= 2 else None
        elif index >= 0:
            node = _nth(_walk(self._head, "link"), index)
        else:
            node = None
        if node is None:
            raise IndexError(f"unable to locate the node at index {index}")
        return node

    def insert(self, index: int, value: int) -> None:
        """Insert value so that it sits at index; -1 appends."""
        node = _Node(value)
        if index == 0 or (index == -1 and self._head is None):
            node.link = self._head
            self._head = node
        elif index == -1 or index > 0:
            prev = self._node_at(-1 if index == -1 else index - 1)
            node.link = prev.link
            prev.link = node
        else:
            raise IndexError(f"unable to insert at index {index}")
        if node.link is None:
            self._tail = node
        self._size += 1

    def delete(self, index: int) -> int:
        """Remove the node at index and return its value."""
        if self._head is None:
            raise IndexError("list is empty")
        if index == 0 or (index == -1 and self._head.link is None):
            target = self._head
            self._head = target.link
            if self._head is None:
                self._tail = None
        elif index == -1 or index > 0:
            prev = self._node_at(-2 if index == -1 else index - 1)
            target = prev.link
            if target is None:
                raise IndexError(f"unable to locate the node at index {index}")
            prev.link = target.link
            if prev.link is None:
                self._tail = prev
        else:
            raise IndexError(f"unable to locate the node at index {index}")
        self._size -= 1
        return target.value

    def get(self, index: int) -> int:
        """Return the value at index."""
        return self._node_at(index).value

    def set(self, index: int, value: int) -> None:
        """Replace the value at index."""
        self._node_at(index).value = value

    def clear(self) -> None:
        """Remove every node."""
        self._reset()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in _walk(self._head, "link"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Run the interactive list menu on standard input; argv is unused."""
    items = SinglyLinkedList()
    print(MENU)
    try:
        while True:
            choice = _ask_int(">> ")
            if not 1 <= choice <= 10:
                print("Error: Invalid Input!!!")
                continue
            if choice == 10:
                return 0

            index = 0
            if choice % 3 == 2 or choice == 7:
                index = _ask_int("Enter the index: ")
            elif choice in (3, 6):
                index = -1
            value = 0
            if choice < 4 or choice == 8:
                value = _ask_int("Enter the value: ")

            try:
                if choice < 4:
                    items.insert(index, value)
                elif choice < 7:
                    print(f"Value deleted: {items.delete(index)}")
                elif choice == 7:
                    print(f"The value is {items.get(index)}")
                elif choice == 8:
                    items.set(index, value)
                else:
                    print(f"The length of the linked list is {len(items)}")
            except IndexError as exc:
                print(f"Error: {exc}")

            print("List:\t" + "".join(f"{item}\t" for item in items))
    except EOFError:
        return 0