"""Block until one of a set of signals arrives."""

from __future__ import annotations

import signal
import sys
import threading
from collections.abc import Iterable, Sequence
from types import FrameType


def wait_for_signal(signums: Iterable[int]) -> signal.Signals:
    """Wait for one of ``signums`` and return it; the previous handlers are restored."""
    wanted = [signal.Signals(signum) for signum in signums]
    if not wanted:
        raise ValueError("at least one signal is needed")

    received: list[signal.Signals] = []
    done = threading.Event()

    def handler(signum: int, frame: FrameType | None) -> None:
        if not received:
            received.append(signal.Signals(signum))
        done.set()

    previous: dict[signal.Signals, object] = {}
    try:
        for signum in wanted:
            previous[signum] = signal.signal(signum, handler)
        # Wake up regularly so that handlers run even when the signal hit another thread.
        while not done.wait(0.1):
            pass
    finally:
        for signum, old in previous.items():
            signal.signal(signum, old if old is not None else signal.SIG_DFL)  # type: ignore[arg-type]
    return received[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Wait for an interrupt or termination signal and report it."""
    print("awaiting signal")
    sys.stdout.flush()
    received = wait_for_signal([signal.SIGINT, signal.SIGTERM])
    print()
    print("Type of signal received: ", received.name)
    print("Signal received --> exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())