"""Polynomial multiplication on coefficient lists, plus an interactive prompt."""

from __future__ import annotations

from collections.abc import Sequence


def multiply(poly1: Sequence[int], poly2: Sequence[int]) -> list[int]:
    """Multiply two polynomials given as coefficients in ascending power."""
    first, second = list(poly1), list(poly2)
    if not first or not second:
        return []
    product = [0] * (len(first) + len(second) - 1)
    for i, a in enumerate(first):
        for j, b in enumerate(second):
            product[i + j] += a * b
    return product


def format_polynomial(coefficients: Sequence[int]) -> str:
    """Render ascending-power coefficients from the highest power down.

    Zero terms are skipped and a coefficient of 1 is left off x terms.
    """
    terms: list[str] = []
    for power, coeff in reversed(list(enumerate(coefficients))):
        if coeff == 0:
            continue
        if power == 0:
            terms.append(str(coeff))
            continue
        prefix = "" if coeff == 1 else str(coeff)
        terms.append(prefix + ("x" if power == 1 else f"x^{power}"))
    return "+".join(terms) or "0"


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Invalid input")


def _read_polynomial(label: str) -> list[int]:
    order = _ask_int(f"Enter the order of the {label}: ")
    coefficients = [
        _ask_int(f"Coeffient of x^{power}: ") for power in range(order, -1, -1)
    ]
    coefficients.reverse()
    return coefficients


def main(argv: list[str] | None = None) -> int:
    """Read two polynomials from standard input and print their product."""
    try:
        poly1 = _read_polynomial("polynomial1")
        poly2 = _read_polynomial("polynomial2")
    except EOFError:
        return 1
    print("Product: " + format_polynomial(multiply(poly1, poly2)))
    return 0