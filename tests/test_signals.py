import signal
import threading

import pytest

from cipherbox.signals import wait_for_signal


def _raise_later(signum, delay=0.2):
    timer = threading.Timer(delay, signal.raise_signal, args=(signum,))
    timer.daemon = True
    timer.start()
    return timer


def test_returns_the_signal_received():
    timer = _raise_later(signal.SIGTERM)
    try:
        received = wait_for_signal([signal.SIGINT, signal.SIGTERM])
    finally:
        timer.join()
    assert received == signal.SIGTERM


def test_interrupt_is_caught():
    timer = _raise_later(signal.SIGINT)
    try:
        received = wait_for_signal([signal.SIGINT, signal.SIGTERM])
    finally:
        timer.join()
    assert received is signal.SIGINT


def test_previous_handler_restored():
    before = signal.getsignal(signal.SIGTERM)
    timer = _raise_later(signal.SIGTERM)
    try:
        wait_for_signal([signal.SIGTERM])
    finally:
        timer.join()
    assert signal.getsignal(signal.SIGTERM) == before


def test_requires_a_signal():
    with pytest.raises(ValueError):
        wait_for_signal([])


def test_rejects_unknown_signal_number():
    with pytest.raises(ValueError):
        wait_for_signal([-1])