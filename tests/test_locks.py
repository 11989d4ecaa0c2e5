import threading
import time

import pytest

from app.registry.locks import RWLock


def _wait_until(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


def test_readers_share_the_lock():
    lock = RWLock()
    barrier = threading.Barrier(2, timeout=2)
    errors = []

    def reader():
        with lock.read():
            try:
                # both readers must be inside at the same time to pass
                barrier.wait()
            except threading.BrokenBarrierError as exc:
                errors.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert errors == []


def test_writer_waits_for_reader():
    lock = RWLock()
    acquired = threading.Event()

    def writer():
        with lock.write():
            acquired.set()

    lock.acquire_read()
    t = threading.Thread(target=writer)
    t.start()

    assert not acquired.wait(0.1)
    lock.release_read()
    assert acquired.wait(2)
    t.join(timeout=2)


def test_waiting_writer_blocks_new_readers():
    lock = RWLock()
    order = []

    def writer():
        with lock.write():
            order.append("writer")

    def late_reader():
        with lock.read():
            order.append("reader")

    lock.acquire_read()
    w = threading.Thread(target=writer)
    w.start()
    assert _wait_until(lambda: lock._writers_waiting == 1)

    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(timeout=2)
    r.join(timeout=2)
    assert order == ["writer", "reader"]


def test_release_without_acquire_raises():
    lock = RWLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
