"""Opening, reading, writing and checking files, with errors reported as exceptions."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence

CUSTOM_ERROR = "Custom error message: File name is wrong"
MISSING_NAME = "invalid.txt"
STAT_PATH = "/tmp/ostest"
READ_PATH = "data.txt"
WRITE_PATH = "file1.txt"
WRITE_TEXT = "Write Line one"


def open_file_name(name: str | os.PathLike[str]) -> str:
    """Open ``name`` and return the name it was opened under.

    Any failure to open is raised with :data:`CUSTOM_ERROR` as its message,
    the original error attached as the cause.
    """
    try:
        with open(name, "rb") as handle:
            return os.fsdecode(handle.name)
    except OSError as exc:
        raise type(exc)(CUSTOM_ERROR) from exc


def read_text(path: str | os.PathLike[str]) -> str:
    """Return the whole content of the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def write_text(path: str | os.PathLike[str], text: str) -> int:
    """Create or truncate ``path``, write ``text`` and return the number of bytes written."""
    with open(path, "wb") as handle:
        return handle.write(text.encode("utf-8"))


def path_exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` exists; errors other than a missing file are raised."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def _demo_error() -> None:
    try:
        print("file opened", open_file_name(MISSING_NAME))
    except OSError as exc:
        print(exc.__cause__ or exc)


def _demo_custom() -> None:
    try:
        print("file opened", open_file_name(MISSING_NAME))
    except OSError as exc:
        print(exc)


def _demo_stat() -> None:
    exists = path_exists(STAT_PATH)
    print("exists=", "true" if exists else "false")
    print("IsNotExist else test" if exists else "IsNotExist if test")
    print("IsExist else test")


def _demo_read() -> None:
    try:
        print("Contents of file:", read_text(READ_PATH))
    except OSError as exc:
        print("File reading error", exc)


def _demo_write() -> None:
    try:
        written = write_text(WRITE_PATH, WRITE_TEXT)
    except OSError as exc:
        print(exc)
        return
    print(written, "bytes written")


_DEMOS: dict[str, Callable[[], None]] = {
    "error": _demo_error,
    "custom": _demo_custom,
    "stat": _demo_stat,
    "read": _demo_read,
    "write": _demo_write,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the file demonstrations, or all of them."""
    parser = argparse.ArgumentParser(prog="fileops", description=__doc__)
    parser.add_argument("demo", nargs="?", default="all", choices=["all", *_DEMOS])
    args = parser.parse_args(argv)
    names = list(_DEMOS) if args.demo == "all" else [args.demo]
    for name in names:
        _DEMOS[name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())