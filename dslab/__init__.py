"""Classic data structures (linked lists, stack, hash table, tree, graph
traversal, polynomials, best-fit memory) with small interactive programs."""

__version__ = "0.1.0"