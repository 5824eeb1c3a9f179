"""Binary search tree of distinct integers, plus an interactive menu."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import partial

from dslab.singly import _ask_int

MENU = (
    "---Menu---\n"
    "  1. Insert\n"
    "  2. Pre-oder\n"
    "  3. In-oder\n"
    "  4. Post-order\n"
    "  5. Delete\n"
    "  6. Exit"
)


@dataclass(eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """An unbalanced binary search tree that rejects duplicate values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add value to the tree; a duplicate raises ValueError."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value == node.value:
                raise ValueError(f"{value} is already in the tree")
            side = "left" if value < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, new)
                return
            node = child

    def delete(self, value: int) -> None:
        """Remove value if present.

        A node with a right subtree takes its in-order successor's value,
        a node with only a left subtree its predecessor's; the replacement
        node is then removed the same way.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return

        while True:
            if node.right is not None:
                step, back = "right", "left"
            elif node.left is not None:
                step, back = "left", "right"
            else:
                if parent is None:
                    self._root = None
                elif parent.left is node:
                    parent.left = None
                else:
                    parent.right = None
                return
            parent, replacement = node, getattr(node, step)
            while getattr(replacement, back) is not None:
                parent, replacement = replacement, getattr(replacement, back)
            node.value = replacement.value
            node = replacement

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def _visit(self, first: str, second: str) -> list[int]:
        """Depth-first walk yielding each node before its first, then second child."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            for side in (second, first):
                child = getattr(node, side)
                if child is not None:
                    stack.append(child)
        return result

    def preorder(self) -> list[int]:
        """Return values in node, left, right order."""
        return self._visit("left", "right")

    def inorder(self) -> list[int]:
        """Return values in ascending order."""
        result: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> list[int]:
        """Return values in left, right, node order."""
        return self._visit("right", "left")[::-1]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.preorder()!r})"


def main(argv: list[str] | None = None) -> int:
    """Run the tree menu on standard input; argv is unused."""
    tree = BinarySearchTree()
    ask = partial(_ask_int, complaint="Invalid input")
    listings = {
        2: ("Tree in Pre order: ", tree.preorder),
        3: ("Tree in In order: ", tree.inorder),
        4: ("Tree in Post order: ", tree.postorder),
    }
    print(MENU)
    try:
        while True:
            choice = ask(">> ")
            if choice == 1:
                try:
                    tree.insert(ask(">> Enter the value: "))
                    print("Inserted")
                except ValueError:
                    print("Insertion failed")
            elif choice in listings:
                title, order = listings[choice]
                print(title + "".join(f"\t{value}" for value in order()))
            elif choice == 5:
                tree.delete(ask("Value to delete: "))
            elif choice == 6:
                print("Exiting...")
                return 0
    except EOFError:
        return 0