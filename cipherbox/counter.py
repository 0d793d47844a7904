"""A shared counter incremented by several workers, with or without a lock."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager, nullcontext


class Counter:
    """An integer incremented by read, pause, write; the lock makes that atomic."""

    def __init__(self, use_lock: bool = True) -> None:
        self.value = 0
        self._lock: AbstractContextManager[object] = threading.Lock() if use_lock else nullcontext()

    def increment(self, delay: float = 0.0) -> int:
        """Read the value, wait ``delay`` seconds, then store the value read plus one."""
        with self._lock:
            temp = self.value
            temp += 1
            if delay > 0:
                time.sleep(delay)
            self.value = temp
            return temp


def _pause(max_delay: float) -> float:
    # Either no pause or a full pause, chosen at random.
    return random.choice((0.0, max_delay))


def _run(
    workers: int,
    increments: int,
    use_lock: bool,
    max_delay: float,
    concurrent: bool,
    report: Callable[[int, int], None] | None,
) -> int:
    if workers < 1:
        raise ValueError("at least one worker is needed")
    if increments < 0:
        raise ValueError("increments must not be negative")
    if max_delay < 0:
        raise ValueError("max_delay must not be negative")

    counter = Counter(use_lock)

    def process(n: int) -> None:
        for _ in range(increments):
            time.sleep(_pause(max_delay))
            counter.increment(_pause(max_delay))
        if report is not None:
            report(n, counter.value)

    if not concurrent:
        for n in range(1, workers + 1):
            process(n)
        return counter.value

    threads = [threading.Thread(target=process, args=(n,)) for n in range(1, workers + 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter.value


def run_workers(workers: int, increments: int, use_lock: bool, max_delay: float) -> int:
    """Run ``workers`` threads that each increment a shared counter; return the final count."""
    return _run(workers, increments, use_lock, max_delay, True, None)


def main(argv: Sequence[str] | None = None) -> int:
    """Run three workers of ten increments each and print the counts."""
    parser = argparse.ArgumentParser(prog="counter", description=__doc__)
    parser.add_argument(
        "mode",
        nargs="?",
        default="locked",
        choices=["sequential", "unlocked", "locked"],
        help="run the workers one after another, in parallel without a lock, or with one",
    )
    parser.add_argument("--delay", type=float, default=1.0, help="longest pause in seconds")
    args = parser.parse_args(argv)

    def report(n: int, value: int) -> None:
        print(f"Count after i={n} Count:", value)

    final = _run(
        workers=3,
        increments=10,
        use_lock=args.mode != "unlocked",
        max_delay=args.delay,
        concurrent=args.mode != "sequential",
        report=report,
    )
    print("Final Count:", final)
    return 0


if __name__ == "__main__":
    sys.exit(main())