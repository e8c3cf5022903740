import threading
import time

import pytest

from tasktracker.utils.rwlock import ReadWriteLock


def test_multiple_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=5)

    def reader():
        with lock.read_lock():
            # All three readers must be inside at once to pass the barrier.
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert lock.readers == 0


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    reader_entered = threading.Event()

    def reader():
        with lock.read_lock():
            reader_entered.set()

    with lock.write_lock():
        assert lock.write_locked
        thread = threading.Thread(target=reader)
        thread.start()
        assert not reader_entered.wait(0.1)

    thread.join()
    assert reader_entered.is_set()
    assert not lock.write_locked


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    writer_entered = threading.Event()

    def writer():
        with lock.write_lock():
            writer_entered.set()

    with lock.read_lock():
        thread = threading.Thread(target=writer)
        thread.start()
        assert not writer_entered.wait(0.1)

    thread.join()
    assert writer_entered.is_set()


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order: list[str] = []

    def writer():
        with lock.write_lock():
            order.append('writer')

    def late_reader():
        with lock.read_lock():
            order.append('reader')

    lock.acquire_read()
    writer_thread = threading.Thread(target=writer)
    writer_thread.start()
    # Give the writer time to start waiting behind the held read lock.
    time.sleep(0.1)
    reader_thread = threading.Thread(target=late_reader)
    reader_thread.start()
    time.sleep(0.1)
    assert order == []
    lock.release_read()

    writer_thread.join()
    reader_thread.join()
    assert order == ['writer', 'reader']


def test_writes_are_serialized():
    lock = ReadWriteLock()
    counter = {'value': 0}

    def increment():
        for _ in range(1000):
            with lock.write_lock():
                current = counter['value']
                counter['value'] = current + 1

    threads = [threading.Thread(target=increment) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert counter['value'] == 4000


def test_lock_released_on_exception():
    lock = ReadWriteLock()
    with pytest.raises(KeyError):
        with lock.write_lock():
            raise KeyError('boom')
    with pytest.raises(KeyError):
        with lock.read_lock():
            raise KeyError('boom')

    assert not lock.write_locked
    assert lock.readers == 0


def test_release_without_acquire():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
