"""Elementary control-flow examples: conditions, switches, loops and ranges."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def greeting() -> str:
    """Return the greeting line."""
    return "Hello World! This is my first program"


def classify(x: int, y: int) -> list[str]:
    """Describe where ``x`` falls and whether the combined condition holds."""
    if x < 10:
        messages = ["x is less than 10"]
    elif 10 <= x <= 90:
        messages = ["x is between 10 and 90"]
    else:
        messages = ["x is greater than 90"]
    if x >= 10 and (x < 50 or y < 50):
        messages.append("x greater than 10 and (x or y below 50)")
    return messages


def describe_sum(a: int, b: int) -> str:
    """Name the sum of ``a`` and ``b`` when it is 1, 2 or 3."""
    match a + b:
        case 1 | 2 | 3 as total:
            return f"Sum is {total}"
        case _:
            return "Printing default"


def nested_break_trace(outer: int = 10, inner: int = 10, stop: int = 5) -> list[tuple[int, int]]:
    """Return the ``(i, j)`` pairs visited by two nested loops that both stop at ``j == stop``."""
    visited: list[tuple[int, int]] = []
    for i in range(1, outer + 1):
        for j in range(1, inner + 1):
            visited.append((i, j))
            if j == stop:
                return visited
    return visited


def count_until(limit: int = 10, stop: int = 7) -> list[int]:
    """Count from 1 to ``limit``, stopping after ``stop`` is reached."""
    counted: list[int] = []
    for k in range(1, limit + 1):
        counted.append(k)
        if k == stop:
            break
    return counted


def powers_of_two(count: int = 8) -> list[tuple[int, int]]:
    """Return ``(exponent, 2**exponent)`` for the first ``count`` exponents."""
    return [(exponent, 1 << exponent) for exponent in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print every example in turn."""
    print(greeting())
    print()

    x, y = 100, 10
    print("x=", x)
    print("y=", y)
    for line in classify(x, y):
        print(line)

    print(describe_sum(2, 1))

    for i in range(1, 6):
        print(i)

    current = None
    for i, j in nested_break_trace():
        if i != current:
            print("loop I --> ", i)
            current = i
        print("    loop J --> ", j)
    print("-------------------")
    for k in count_until():
        print("loop K --> ", k)

    print("x:", 3)
    print("y:", 20)
    print("z:", 50)
    print("i and j:", 100, "hello")

    print("variable a=", "A", "variable b=", "B")

    for exponent, value in powers_of_two():
        print(f"2^{exponent} = {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())