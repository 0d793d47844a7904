"""Deferred calls, shared references and simple console input."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from contextlib import ExitStack
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass
class Box:
    """A mutable integer shared by every name that refers to it."""

    value: int = 0

    def increment(self) -> int:
        """Add one to the value and return it."""
        self.value += 1
        return self.value


def defer_trace(initial: str = "World", updated: str = "Hello") -> list[str]:
    """Return the lines printed when a call deferred with ``initial`` runs after the body."""
    trace: list[str] = []

    def sample(text: str) -> None:
        trace.append(text)
        trace.append("Inside the sample()")

    with ExitStack() as stack:
        my_var = initial
        # The argument is captured now, not when the callback runs.
        stack.callback(sample, my_var)
        trace.append("Inside the main()")
        my_var = updated
        trace.append(my_var)
    return trace


def lifo_trace(values: Iterable[T], last: T) -> list[T]:
    """Defer a call for each of ``values``, emit ``last``, and return the resulting order."""
    trace: list[T] = []
    with ExitStack() as stack:
        for value in values:
            stack.callback(trace.append, value)
        trace.append(last)
    return trace


def full_name(first: str, second: str) -> str:
    """Join a first and a last name with a space."""
    return f"{first} {second}"


def _read_token() -> str:
    try:
        line = input()
    except EOFError:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Show deferred calls, a shared reference, then ask for a name."""
    for line in defer_trace():
        print(line)
    for value in lifo_trace([1, 2, 3], 4):
        print(value)

    box = Box(20)
    print("Address:", hex(id(box)))
    print("Value:", box.value)

    alias = box
    print("Address of a:", hex(id(box)))
    print("Value of a:", box.value)
    print("Address pointed by pointer b (= Address of a):", hex(id(alias)))
    print("Value stored at the Address pointed by pointer b:", alias.value)
    print("incrementing the value pointed by pointer b")
    alias.increment()
    print("Value stored at the Address pointed by pointer b:", alias.value)
    print("Value of a:", box.value)

    print("Enter Your First Name: ", end="")
    sys.stdout.flush()
    first = _read_token()
    print("Enter Second Last Name: ", end="")
    sys.stdout.flush()
    second = _read_token()
    print("Your Full Name is: ", end="")
    print(full_name(first, second))
    return 0


if __name__ == "__main__":
    sys.exit(main())