"""Breadth- and depth-first traversal of graphs given as adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _rows(matrix: Sequence[Sequence[int]], start: int) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < len(rows):
        raise IndexError(f"start node {start} is not in the graph")
    return rows


def _neighbours(row: list[int]) -> list[int]:
    return [node for node, edge in enumerate(row) if edge == 1]


def bfs(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return nodes in breadth-first order; an entry of 1 marks an edge."""
    rows = _rows(matrix, start)
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in _neighbours(rows[node]):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return nodes in stack-based depth-first order.

    Nodes are marked when pushed and neighbours are pushed in ascending
    order, so the highest-numbered neighbour is visited first.
    """
    rows = _rows(matrix, start)
    visited = {start}
    order: list[int] = []
    stack = [start]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in _neighbours(rows[node]):
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return order


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Invalid input")


def main(argv: list[str] | None = None) -> int:
    """Read an adjacency matrix from standard input and print both traversals."""
    try:
        count = _ask_int("Enter the number of nodes: ")
        matrix = [
            [_ask_int(f"Enter the value[{i}][{j}]: ") for j in range(count)]
            for i in range(count)
        ]
    except EOFError:
        return 1

    print("Matrix:")
    for row in matrix:
        print("".join(f"{value}    " for value in row))

    if count > 0:
        print("BFS: " + "".join(f"{node}, " for node in bfs(matrix)))
        print("DFS: " + "".join(f"{node}, " for node in dfs(matrix)))
    else:
        print("BFS: ")
        print("DFS: ")
    return 0