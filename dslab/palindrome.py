"""Palindrome check for integer sequences, plus an interactive prompt."""

from __future__ import annotations

from collections.abc import Iterable

from dslab.singly import _read_values


def is_palindrome(values: Iterable[int]) -> bool:
    """Return True if the values read the same forwards and backwards."""
    items = list(values)
    return items == items[::-1]


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input and report whether they form a palindrome."""
    try:
        values = _read_values("Enter the max elements count: ", "Enter the Element[{}]: ")
    except EOFError:
        return 1
    print("List is palindrome" if is_palindrome(values) else "List is not palindrome")
    return 0