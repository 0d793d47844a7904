"""Dictionaries, nested dictionaries, tuple keys and a small record type."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

CARD_IDS: dict[str, str] = {
    "U200_capi2": "0x0665",
    "U50_capi2": "0x0669",
    "AD9V3_capi2": "0x060f",
    "AD9H3_capi2": "0x0667",
    "AD9H7_capi2": "0x0668",
    "AD9V3_ocapi": "0x060f",
    "AD9H3_ocapi": "0x0667",
    "AD9H7_ocapi": "0x0666",
    "N250SOC_ocapi": "0x0666",
}

_SCORE_ENTRIES: tuple[tuple[str, str, int], ...] = (
    ("A", "a", 7),
    ("A", "b", 2),
    ("A", "c", 9),
    ("B", "a", 13),
    ("B", "b", 5),
    ("C", "a", 8),
    ("C", "b", 12),
)


@dataclass
class Employee:
    """An employee record."""

    name: str
    address: str
    age: int

    def display(self) -> str:
        """Write the employee's name on its own line and return it."""
        line = f"{self.name}\n"
        sys.stdout.write(line)
        return self.name


def card_id(name: str) -> str:
    """Return the device id of the named card; unknown names raise ``KeyError``."""
    return CARD_IDS[name]


def has_card(name: str) -> bool:
    """Tell whether a card of that name is known."""
    return name in CARD_IDS


def nested_scores() -> dict[str, dict[str, int]]:
    """Return a fresh two-level table of scores."""
    scores: dict[str, dict[str, int]] = {}
    for outer, inner, value in _SCORE_ENTRIES:
        scores.setdefault(outer, {})[inner] = value
    return scores


def _go(value: Any) -> str:
    if isinstance(value, dict):
        return "map[" + " ".join(f"{_go(k)}:{_go(value[k])}" for k in sorted(value)) + "]"
    if isinstance(value, tuple):
        return "{" + " ".join(_go(item) for item in value) + "}"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the dictionary and record examples."""
    m = {"k1": 7, "k2": 13}
    print("map:", _go(m))
    print("v1: ", m["k1"])
    print("len:", len(m))
    del m["k2"]
    print("map:", _go(m))
    print("prs:", _go("k2" in m))
    print("map:", _go({"foo": 1, "bar": 2}))

    print("CardMap:", _go(CARD_IDS))
    print("9V3 OpenCAPI: ", card_id("AD9V3_ocapi"))
    print("AD9H7_ocapi value (0x666): ", card_id("AD9H7_ocapi"))
    print("len:", len(CARD_IDS))
    print("BAD prs:", _go(has_card("k2")))
    print("GOOD prs:", _go(has_card("AD9H3_capi2")))

    print("map:", _go(nested_scores()))
    data = {outer: inner for outer, inner in nested_scores().items() if outer in ("A", "B")}
    print("data:", _go(data))
    print("data[A][c]:", data["A"]["c"])
    simple = {("A", "a"): 12, ("A", "b"): 8, ("B", "a"): 5}
    print("Simple Map with key as struct:", _go(simple))

    Employee("John", "Street-1, London", 30).display()
    Employee("Raj", "Building-1, Paris", 25).display()
    return 0


if __name__ == "__main__":
    sys.exit(main())