"""Readers-writer lock shared by request handlers running on any thread."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class LockUnavailableError(RuntimeError):
    """Raised when the lock is poisoned or cannot be acquired in time."""


class ReadWriteLock:
    """Many concurrent readers or one writer, writers preferred.

    A writer whose critical section raises poisons the lock: every later
    acquisition fails with ``LockUnavailableError`` because the guarded data
    can no longer be trusted.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def acquire_read(self, timeout: float | None = None) -> bool:
        with self._cond:
            if not self._cond.wait_for(lambda: not self._writer and not self._waiting_writers, timeout):
                return False
            self._readers += 1
            return True

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, timeout: float | None = None) -> bool:
        with self._cond:
            self._waiting_writers += 1
            try:
                acquired = self._cond.wait_for(lambda: not self._writer and self._readers == 0, timeout)
            finally:
                self._waiting_writers -= 1
            if not acquired:
                # Readers parked behind this writer may go now.
                self._cond.notify_all()
                return False
            self._writer = True
            return True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self, timeout: float | None = None) -> Iterator[None]:
        if not self.acquire_read(timeout):
            raise LockUnavailableError("Timed out waiting for read lock")
        try:
            if self._poisoned:
                raise LockUnavailableError("Lock is poisoned")
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self, timeout: float | None = None) -> Iterator[None]:
        if not self.acquire_write(timeout):
            raise LockUnavailableError("Timed out waiting for write lock")
        try:
            if self._poisoned:
                raise LockUnavailableError("Lock is poisoned")
            try:
                yield
            except BaseException:
                self._poisoned = True
                raise
        finally:
            self.release_write()
