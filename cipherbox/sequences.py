"""Fixed arrays, slices that share their storage, and slice growth on append."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class Device:
    """A device entry: an index, a manufacturer and an accelerator path."""

    index: str = ""
    fab: str = ""
    cxl_dev_afu_path: str = ""

    def __str__(self) -> str:
        return "{" + " ".join((self.index, self.fab, self.cxl_dev_afu_path)) + "}"


def _grow(old_cap: int, needed: int) -> int:
    """Return the capacity of the new storage when ``needed`` items no longer fit."""
    doubled = 2 * old_cap
    if needed > doubled:
        return needed
    if old_cap < 256:
        return doubled
    new_cap = old_cap
    while new_cap < needed:
        new_cap += (new_cap + 3 * 256) // 4
    return new_cap


class Slice:
    """A window ``array[low:high]`` that reads and writes through to ``array``.

    Appending fills the unused room of the array after the window first; once
    that room runs out the slice moves to new, larger storage of its own and
    the original array is no longer touched.
    """

    def __init__(self, array: list[Any], low: int = 0, high: int | None = None) -> None:
        if high is None:
            high = len(array)
        if not 0 <= low <= high <= len(array):
            raise IndexError(
                f"slice bounds out of range [{low}:{high}] with capacity {len(array)}"
            )
        self._array = array
        self._start = low
        self._len = high - low

    @property
    def cap(self) -> int:
        """Number of items the slice can hold before it needs new storage."""
        return len(self._array) - self._start

    def __len__(self) -> int:
        return self._len

    def _position(self, index: int) -> int:
        if not 0 <= index < self._len:
            raise IndexError(f"index out of range [{index}] with length {self._len}")
        return self._start + index

    def __getitem__(self, index: int) -> Any:
        return self._array[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._array[self._position(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._array[self._start : self._start + self._len])

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"Slice({list(self)!r}, cap={self.cap})"

    def append(self, *args: Any) -> None:
        """Add each argument to the end of the slice."""
        self.extend(args)

    def extend(self, values: Iterable[Any]) -> None:
        """Add every item of ``values`` to the end of the slice."""
        items = list(values)
        needed = self._len + len(items)
        if needed <= self.cap:
            end = self._start + self._len
            self._array[end : end + len(items)] = items
        else:
            new_cap = _grow(self.cap, needed)
            self._array = [*self, *items, *([None] * (new_cap - needed))]
            self._start = 0
        self._len = needed


def _go(values: Iterable[Any]) -> str:
    return "[" + " ".join(str(value) for value in values) + "]"


def _describe(label: str, values: list[Any] | Slice) -> str:
    cap = values.cap if isinstance(values, Slice) else len(values)
    return f"{label} len={len(values)} cap={cap} {_go(values)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the array, slice and append examples."""
    numbers = ["One", "Two", "Three"]
    print(numbers[1])
    print(len(numbers))
    print(_go(numbers))
    directions = [1, 2, 3, 4, 5]
    print(_go(directions))
    print(len(directions))

    words = ["one", "two", "three", "four", "five"]
    print("Array after creation:", _go(words))
    window = Slice(words, 1, 4)
    print("Slice after creation:", window)
    window[0] = "changed"
    print("Slice after modifying:", window)
    print("Array after slice modification:", _go(words))
    print(_describe("ARRAY", words))
    print(_describe("SLICE", window))

    digits = ["1", "2", "3", "4", "5"]
    slice_a = Slice(digits, 1, 3)
    names = ["one", "two", "three", "four", "five"]
    slice_b = Slice(names, 1, 3)
    print("array a:", _go(digits))
    print("array b:", _go(names))
    print("Slice_a:", slice_a)
    print("Slice_b:", slice_b)
    print("Length of slice_a:", len(slice_a))
    print("Length of slice_b:", len(slice_b))
    slice_a.extend(slice_b)
    print("New Slice_a after appending slice_b :", slice_a)
    print("Length of slice_a:", len(slice_a))
    slice_a.append("text1")
    print("New Slice_a after appending text1 :", slice_a)
    print("Length of slice_a:", len(slice_a))
    print("array a:", _go(digits))
    print("array b:", _go(names))

    rule = "-" * 131
    devices = [
        Device("un", "fab1", "/tmp"),
        Device("deux", "fab2", "/etc"),
        Device("trois", "fab3", "/home/fabrice"),
        Device(),
        Device(),
    ]
    device_slice = Slice(devices, 1, 3)
    print(rule)
    print(_describe("array a", devices))
    print(_describe("slice_a", device_slice))
    print(rule)
    for device in (
        Device("quatre", "fab4", "/gudul"),
        Device("cinq", "fab5", ""),
        Device("six", "fab6", "/dev/sixcarte"),
    ):
        device_slice.append(device)
        print(_describe("array a", devices))
        print(_describe("slice_a", device_slice))
        print(rule)
    return 0


if __name__ == "__main__":
    sys.exit(main())