"""Watch a file and report each time it is written to."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

from watchdog.events import EVENT_TYPE_MODIFIED, FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/tmp/foo"


def _resolve(path: str | bytes) -> str:
    return os.path.realpath(os.fsdecode(path))


class FileModifiedHandler(FileSystemEventHandler):
    """Calls ``callback(path)`` when the watched file, or a file in the watched directory, is written."""

    def __init__(self, path: str | os.PathLike[str], callback: Callable[[str], None]) -> None:
        super().__init__()
        self.path = os.fspath(path)
        self.callback = callback
        self._watched = _resolve(self.path)

    def _matches(self, src: str) -> bool:
        return src == self._watched or os.path.dirname(src) == self._watched

    def on_any_event(self, event: FileSystemEvent) -> None:
        """Log the event and call back if it is a write to the watched path."""
        logger.info("--> event: %s", event)
        logger.info("   > event.Op: %s", event.event_type)
        if event.event_type != EVENT_TYPE_MODIFIED or event.is_directory:
            return
        src = _resolve(event.src_path)
        if self._matches(src):
            self.callback(src if src != self._watched else self.path)


@contextmanager
def watch(
    path: str | os.PathLike[str], callback: Callable[[str], None]
) -> Iterator[BaseObserver]:
    """Watch ``path`` for writes while the ``with`` block runs."""
    target = os.fspath(path)
    if not os.path.exists(target):
        raise FileNotFoundError(f"no such file or directory: {target}")
    directory = target if os.path.isdir(target) else os.path.dirname(os.path.abspath(target))
    observer = Observer()
    observer.schedule(FileModifiedHandler(target, callback), directory, recursive=False)
    observer.start()
    try:
        yield observer
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Watch a file until interrupted, logging every write to it."""
    parser = argparse.ArgumentParser(prog="watcher", description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    def report(modified: str) -> None:
        logger.info("--> modified file: %s", modified)

    try:
        with watch(args.path, report):
            while True:
                time.sleep(1)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())