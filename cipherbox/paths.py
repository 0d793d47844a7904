"""String splitting and device path helpers."""

from __future__ import annotations

import posixpath
import sys
from collections.abc import Iterable, Iterator, Sequence

CXL_DEV_DIR = "/dev/cxl"
CXL_PREFIX = "afu"
CXL_SUFFIX = ".0m"
SYS_DEVICES_DIR = "/sys/devices"
PCI_PREFIX = "pci"


def go_split(text: str, sep: str) -> list[str]:
    """Split ``text`` around ``sep``; an empty ``sep`` splits into characters."""
    if sep == "":
        return list(text)
    return text.split(sep)


def trim_prefix(text: str, prefix: str) -> str:
    """Return ``text`` without ``prefix`` if it starts with it."""
    return text.removeprefix(prefix)


def _join(*parts: str) -> str:
    return posixpath.normpath(posixpath.join(*parts))


def cxl_device_path(capi_id: str | int) -> str:
    """Return the device path of the accelerator with the given id."""
    return _join(CXL_DEV_DIR, f"{CXL_PREFIX}{capi_id}{CXL_SUFFIX}")


def domain_bus_device(pci_id: str) -> str:
    """Drop the function number (last two characters) from a PCI id."""
    if len(pci_id) < 2:
        raise ValueError(f"PCI id {pci_id!r} is too short")
    return pci_id[:-2]


def pci_root_path(pci_id: str) -> str:
    """Return the sysfs root directory of the PCI domain and bus of ``pci_id``."""
    if len(pci_id) < 5:
        raise ValueError(f"PCI id {pci_id!r} is too short")
    return _join(SYS_DEVICES_DIR, PCI_PREFIX + pci_id[:-5])


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _quote_list(items: Iterable[str]) -> str:
    return "[" + " ".join(_quote(item) for item in items) + "]"


_SPLIT_EXAMPLES: tuple[tuple[str, str], ...] = (
    ("a,b,c", ","),
    ("a man a plan a canal panama", "a "),
    (" xyz ", ""),
    ("", "Bernardo O'Higgins"),
    ("card0", "card"),
)


def _example_lines(pci_id: str, dev_id: str) -> Iterator[str]:
    for text, sep in _SPLIT_EXAMPLES:
        yield _quote_list(go_split(text, sep))
    yield _quote(trim_prefix("card0", "card"))
    yield cxl_device_path("1")

    yield f"pciID=  {pci_id}"
    yield f"len(pciID)=  {len(pci_id)}"
    yield f"DBD=  {domain_bus_device(pci_id)}"

    yield f"ID=  {dev_id}"
    yield f"len(ID)=  {len(dev_id)}"
    yield f"Suffix=  {dev_id[:-5]}"
    yield f"Dev Path = {pci_root_path(dev_id)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print split, trim and path examples."""
    lines = list(_example_lines("0003:01:00.0", "0004:00:00.1"))
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())