"""Producer and consumer threads that talk through queues standing in for channels."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_CLOSED = object()

DISPLAY_LINE = "In display"
MAIN_LINE = "In main"


class DeadlockError(RuntimeError):
    """Raised when values are sent that nobody can ever receive."""


def fibonacci(n: int) -> Iterator[int]:
    """Yield the first ``n`` Fibonacci numbers, starting from 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    x, y = 0, 1
    for _ in range(n):
        yield x
        x, y = y, x + y


def _drain(channel: queue.Queue[Any]) -> Iterator[Any]:
    """Yield items from ``channel`` until it is closed."""
    while (item := channel.get()) is not _CLOSED:
        yield item


def _send_all(channel: queue.Queue[Any], values: Iterable[Any]) -> None:
    for value in values:
        channel.put(value)
    channel.put(_CLOSED)


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def fibonacci_via_queue(n: int, capacity: int = 10) -> list[int]:
    """Produce ``n`` Fibonacci numbers in one thread and collect them in another."""
    _check_capacity(capacity)
    if n < 0:
        raise ValueError("n must not be negative")
    # A bounded queue of size 1 is the closest match to an unbuffered channel.
    channel: queue.Queue[Any] = queue.Queue(maxsize=capacity or 1)
    producer = threading.Thread(target=_send_all, args=(channel, fibonacci(n)), daemon=True)
    producer.start()
    received = list(_drain(channel))
    producer.join()
    return received


def stream_until_closed(count: int = 10) -> list[int]:
    """Send ``0..count-1`` from one thread and read them in another until closed."""
    if count < 0:
        raise ValueError("count must not be negative")
    channel: queue.Queue[Any] = queue.Queue(maxsize=1)
    received: list[int] = []
    producer = threading.Thread(target=_send_all, args=(channel, range(count)), daemon=True)
    consumer = threading.Thread(target=lambda: received.extend(_drain(channel)), daemon=True)
    producer.start()
    consumer.start()
    producer.join()
    consumer.join()
    return received


def buffered_exchange(values: Sequence[T], capacity: int) -> list[T]:
    """Send every value into a buffer of ``capacity`` slots, then read them all back."""
    _check_capacity(capacity)
    if len(values) > capacity:
        raise DeadlockError(
            f"cannot send {len(values)} values into a buffer of {capacity} with no receiver"
        )
    channel: queue.Queue[T] = queue.Queue(maxsize=capacity)
    for value in values:
        channel.put_nowait(value)
    return [channel.get_nowait() for _ in values]


def first_ready(sources: Iterable[tuple[float, T]]) -> T:
    """Start one thread per ``(delay, value)`` pair and return the first value delivered."""
    pending = list(sources)
    if not pending:
        raise ValueError("at least one source is needed")
    channel: queue.Queue[T] = queue.Queue()

    def deliver(delay: float, value: T) -> None:
        time.sleep(delay)
        channel.put(value)

    for delay, value in pending:
        threading.Thread(target=deliver, args=(delay, value), daemon=True).start()
    return channel.get()


def _interleave(
    main_delay: float, worker_delay: float, rounds: int, emit: Callable[[str], None]
) -> None:
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    if main_delay < 0 or worker_delay < 0:
        raise ValueError("delays must not be negative")
    lock = threading.Lock()
    stop = threading.Event()

    def worker() -> None:
        for _ in range(rounds):
            if stop.wait(worker_delay):
                return
            with lock:
                if stop.is_set():
                    return
                emit(DISPLAY_LINE)

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    try:
        for _ in range(rounds):
            time.sleep(main_delay)
            with lock:
                emit(MAIN_LINE)
    finally:
        # The main flow does not wait for the worker: whatever it has not done yet is dropped.
        with lock:
            stop.set()
    thread.join()


def run_interleaved(main_delay: float, worker_delay: float, rounds: int = 5) -> list[str]:
    """Run a worker and the main flow side by side and return the lines each emitted."""
    trace: list[str] = []
    _interleave(main_delay, worker_delay, rounds, trace.append)
    return trace


def _demo_channel() -> None:
    channel: queue.Queue[int] = queue.Queue(maxsize=1)

    def display() -> None:
        time.sleep(5)
        print("Inside display()")
        channel.put(1234)

    threading.Thread(target=display, daemon=True).start()
    x = channel.get()
    print("Inside main()")
    print("Printing x in main() after taking from channel:", x)


def _demo_buffer() -> None:
    for value in buffered_exchange([1, 2], 2):
        print(value)


def _demo_close() -> None:
    print("Send data")
    print("Read data")
    for value in stream_until_closed(10):
        print(value)
    print("channel has been closed")
    print("Inside main()")


def _demo_range() -> None:
    capacity = 10
    print("capacity of c channel:", capacity)
    for value in fibonacci_via_queue(capacity, capacity):
        print(value)


def _demo_goroutine() -> None:
    _interleave(2, 1, 5, print)


def _demo_goroutine2() -> None:
    _interleave(1, 2, 5, print)
    print("main ends before go display finishes...")


def _demo_select() -> str:
    chosen = first_ready([(4, "from data1()"), (2, "from data2()")])
    sys.stdout.write(chosen + "\n")
    return chosen


_DEMOS: dict[str, Callable[[], Any]] = {
    "channel": _demo_channel,
    "buffer": _demo_buffer,
    "close": _demo_close,
    "range": _demo_range,
    "goroutine": _demo_goroutine,
    "goroutine2": _demo_goroutine2,
    "select": _demo_select,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the channel and thread demonstrations, or all of them."""
    parser = argparse.ArgumentParser(prog="concurrency", description=__doc__)
    parser.add_argument("demo", nargs="?", default="all", choices=["all", *_DEMOS])
    args = parser.parse_args(argv)
    names = list(_DEMOS) if args.demo == "all" else [args.demo]
    for name in names:
        _DEMOS[name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())