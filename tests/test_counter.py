import threading

import pytest

from cipherbox.counter import Counter, run_workers


def test_increment_counts_up():
    counter = Counter()
    results = [counter.increment() for _ in range(5)]
    assert results == list(range(1, 6))
    assert counter.value == 5


def test_increment_without_lock_sequentially():
    counter = Counter(use_lock=False)
    for _ in range(4):
        counter.increment()
    assert counter.value == 4


def _race(counter, threads):
    barrier = threading.Barrier(threads)

    def task():
        barrier.wait()
        counter.increment(0.1)

    workers = [threading.Thread(target=task) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return counter.value


def test_locked_counter_loses_no_update():
    assert _race(Counter(use_lock=True), 4) == 4


def test_unlocked_counter_loses_updates():
    assert _race(Counter(use_lock=False), 4) < 4


def test_run_workers_locked_total():
    workers, increments = 3, 5
    assert run_workers(workers, increments, True, 0.0) == workers * increments


def test_run_workers_locked_with_delay():
    workers, increments = 3, 2
    assert run_workers(workers, increments, True, 0.005) == workers * increments


def test_run_workers_unlocked_bounded():
    workers, increments = 3, 4
    final = run_workers(workers, increments, False, 0.005)
    assert 1 <= final <= workers * increments


def test_run_workers_zero_increments():
    assert run_workers(2, 0, True, 0.0) == 0


@pytest.mark.parametrize(
    "workers, increments, delay",
    [(0, 1, 0.0), (1, -1, 0.0), (1, 1, -0.5)],
)
def test_run_workers_rejects_bad_arguments(workers, increments, delay):
    with pytest.raises(ValueError):
        run_workers(workers, increments, True, delay)