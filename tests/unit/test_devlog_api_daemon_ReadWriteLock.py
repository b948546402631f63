"""Tests for devlog.api.daemon.ReadWriteLock."""

import threading
import time

from devlog.api.daemon.ReadWriteLock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(2, timeout=2)

    def reader():
        with lock.read():
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert not any(t.is_alive() for t in threads)


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events: list[str] = []
    writer_in = threading.Event()

    def writer():
        with lock.write():
            writer_in.set()
            time.sleep(0.1)
            events.append("writer-done")

    def reader():
        writer_in.wait()
        with lock.read():
            events.append("reader")

    w = threading.Thread(target=writer)
    r = threading.Thread(target=reader)
    w.start()
    r.start()
    w.join(timeout=5)
    r.join(timeout=5)
    assert events == ["writer-done", "reader"]


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order: list[str] = []
    lock.acquire_read()

    def writer():
        with lock.write():
            order.append("writer")

    def late_reader():
        with lock.read():
            order.append("late-reader")

    w = threading.Thread(target=writer)
    w.start()
    time.sleep(0.05)
    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(timeout=5)
    r.join(timeout=5)
    assert order == ["writer", "late-reader"]


def test_lock_released_on_exception():
    lock = ReadWriteLock()
    try:
        with lock.write():
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    with lock.read():
        pass
