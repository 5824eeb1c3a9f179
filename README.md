# dslab

A small collection of classic data structures, most of them with an
interactive, menu-driven program that reads its input from standard input.
The package has no dependencies beyond the standard library.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Library

| Module             | What it provides                                                   |
|--------------------|--------------------------------------------------------------------|
| `dslab.singly`     | `SinglyLinkedList`: insert, delete, get and set by position        |
| `dslab.doubly`     | `DoublyLinkedList`: positions from either end, `reversed()` walk   |
| `dslab.circular`   | `CircularList`: a circular doubly linked list, positions wrap      |
| `dslab.hashing`    | `HashTable` and `TableFullError`: fixed-size linear probing         |
| `dslab.stack`      | `BoundedStack`: a stack with a fixed capacity (default 5)          |
| `dslab.graph`      | `bfs` and `dfs` over an adjacency matrix                           |
| `dslab.bst`        | `BinarySearchTree`: insert, delete, `in`, pre/in/post-order lists   |
| `dslab.polynomial` | `multiply` and `format_polynomial` for coefficient lists           |
| `dslab.frequency`  | `most_frequent`: the most repeated value in a sequence             |
| `dslab.palindrome` | `is_palindrome`: compares a sequence with its reverse              |
| `dslab.memory`     | `MemoryManager` and `Block`: best-fit partition allocation         |

### Linked lists

All three lists take an optional iterable of initial values, support
`len()` and iteration, and raise `IndexError` for a position they cannot
reach.

- `SinglyLinkedList`: index `0` is the front, `-1` the last node and `-2`
  the node before it; other negative indices are invalid. `insert(-1, v)`
  appends. `clear()` empties the list.
- `DoublyLinkedList`: non-negative indices count from the start, negative
  ones from the end. Inserting into an empty list always succeeds.
- `CircularList`: positions count forward from the head and wrap around;
  negative indices are rejected.

```python
from dslab.singly import SinglyLinkedList

items = SinglyLinkedList([1, 2, 3])
items.insert(-1, 4)
items.delete(0)      # returns 1
list(items)          # [2, 3, 4]
```

### Hash table

`HashTable(size=10)` stores non-zero integer keys with non-zero values.
`put(key, value)` returns the slot used and raises `ValueError` for a zero
key or value and `TableFullError` when no slot is free. `get` and `delete`
raise `KeyError` for a missing key. `slot(key)` reports where a key lives
or would go.

### Stack

`BoundedStack.push` raises `OverflowError` when full; `pop` raises
`IndexError` when empty. Iteration runs from bottom to top.

### Graphs

`bfs(matrix, start=0)` and `dfs(matrix, start=0)` return the visiting order
over a square adjacency matrix in which `1` marks an edge. The depth-first
walk is stack based, so the highest-numbered neighbour is visited first.

```python
from dslab.graph import bfs, dfs

matrix = [
    [0, 1, 1],
    [1, 0, 0],
    [1, 0, 0],
]
bfs(matrix)          # [0, 1, 2]
dfs(matrix)          # [0, 2, 1]
```

### Binary search tree

```python
from dslab.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()       # [20, 30, 40, 50, 70]
40 in tree           # True
tree.delete(30)
```

Inserting a value that is already present raises `ValueError`; deleting a
missing value does nothing.

### Polynomials

Coefficients are listed in ascending power. `multiply([1, 1], [1, 1])`
gives `[1, 2, 1]`, and `format_polynomial([1, 2, 1])` gives `"x^2+2x+1"`.

### Memory manager

`MemoryManager(partitions)` lays out the given partition sizes separated by
reserved blocks. `create(name, size)` places a process in the smallest free
hole that fits and returns `True`, or queues it and returns `False`.
`stop(pid)` frees or dequeues a process and returns the queued processes
that could then start. `blocks()` and `queued()` return snapshots of
`Block` objects.

## Commands

Each command runs an interactive program that prompts for its input and
stops at end of input.

    dslab-singly       # menu over a singly linked list
    dslab-doubly       # insert, delete and display a doubly linked list
    dslab-hashing      # put, get and remove keys in a hash table
    dslab-stack        # push, pop and display a bounded stack
    dslab-graph        # read an adjacency matrix, print BFS and DFS orders
    dslab-bst          # insert, delete and traverse a binary search tree
    dslab-polymul      # multiply two polynomials
    dslab-frequency    # find the most repeated element
    dslab-palindrome   # check whether a list reads the same both ways
    dslab-memory       # simulate best-fit memory allocation with a queue

## Limitations

- `CircularList` is a library class only; there is no command for it.
- All state lives in memory for the length of one run; nothing is saved.