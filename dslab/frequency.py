"""Find the most repeated value in a sequence, plus an interactive prompt."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from dslab.singly import _read_values


def most_frequent(values: Iterable[int]) -> int:
    """Return the value that occurs most often.

    Ties go to the value whose last occurrence comes earliest.
    An empty input raises ValueError.
    """
    items = list(values)
    if not items:
        raise ValueError("no values given")
    counts = Counter(items)
    last_seen = {value: position for position, value in enumerate(items)}
    top = max(counts.values())
    return min(
        (value for value, count in counts.items() if count == top),
        key=last_seen.__getitem__,
    )


def main(argv: list[str] | None = None) -> int:
    """Read a list of integers from standard input and print the most repeated."""
    try:
        values = _read_values("Enter the element count: ", "Enter the element[{}]: ")
        print(f"Max repeated element is {most_frequent(values)}")
    except EOFError:
        return 1
    except ValueError:
        print("No elements given")
        return 1
    return 0