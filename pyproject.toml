[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Classic data structures with small interactive programs: linked lists, stack, hash table, binary search tree, graph traversal, polynomials and best-fit memory allocation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "circular list",
    "binary search tree",
    "hash table",
    "stack",
    "graph traversal",
    "polynomial",
    "memory allocation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslab-singly = "dslab.singly:main"
dslab-doubly = "dslab.doubly:main"
dslab-hashing = "dslab.hashing:main"
dslab-stack = "dslab.stack:main"
dslab-graph = "dslab.graph:main"
dslab-bst = "dslab.bst:main"
dslab-polymul = "dslab.polynomial:main"
dslab-frequency = "dslab.frequency:main"
dslab-palindrome = "dslab.palindrome:main"
dslab-memory = "dslab.memory:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
