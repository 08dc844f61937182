"""Reader/writer lock for in-memory DAOs.

Classes:
    ReadWriteLock: shared read access, exclusive write access.

Example:
    >>> lock = ReadWriteLock()
    >>> with lock.read_lock():
    ...     value = mapping.get(key)
    >>> with lock.write_lock():
    ...     mapping[key] = value
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class ReadWriteLock:
    """Writer-preferring reader/writer lock

    Any number of readers may hold the lock at the same time. A writer holds it
    alone. Once a writer is waiting, new readers queue behind it so a steady
    stream of reads can't starve writes.

    NOTE: the lock is not reentrant. Acquiring it again from a thread that
          already holds it deadlocks.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._waiting_writers = 0

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block"""
        with self._condition:
            while self._writing or self._waiting_writers:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the duration of the block"""
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writing or self._readers:
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()
