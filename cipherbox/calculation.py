"""Small arithmetic helpers: a sum-and-difference function and a calculator."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Calculator:
    """Adds numbers and remembers the last result in ``calculs``."""

    calculs: int = 0

    def add(self, num1: int, num2: int) -> int:
        """Return ``num1 + num2`` and store it as the last result."""
        self.calculs = num1 + num2
        return self.calculs


def calc(num1: int, num2: int) -> tuple[int, int]:
    """Return the sum and the difference of two numbers."""
    return num1 + num2, num1 - num2


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sum and difference of 15 and 10, then a calculator result."""
    x, y = 15, 10
    total, diff = calc(x, y)
    print("Sum", total)
    print("Diff", diff)

    calculator = Calculator()
    print("Sum", calculator.add(x, y))
    print("calculation.Calculs", calculator.calculs)
    return 0


if __name__ == "__main__":
    sys.exit(main())