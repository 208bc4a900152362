"""In-memory, append-only record store."""
from __future__ import annotations

import structlog

from tracker_service.core.exceptions import StoreUnavailableError
from tracker_service.core.locks import LockUnavailableError, ReadWriteLock
from tracker_service.domain.models import StoredRecord

logger = structlog.get_logger(__name__)


class RecordStore:
    """Ordered sequence of every ingested record for the life of the process.

    The list is owned by the store; callers only ever get tuple snapshots.
    """

    def __init__(self, *, lock_timeout: float | None = None) -> None:
        # None waits forever.
        self._lock_timeout = lock_timeout if lock_timeout and lock_timeout > 0 else None
        self._lock = ReadWriteLock()
        self._records: list[StoredRecord] = []

    @property
    def available(self) -> bool:
        return not self._lock.poisoned

    def append(self, record: StoredRecord) -> None:
        try:
            with self._lock.write_locked(self._lock_timeout):
                self._records.append(record)
        except LockUnavailableError as exc:
            logger.error("record_store append rejected", reason=str(exc))
            raise StoreUnavailableError("Failed to lock data store") from exc

    def snapshot(self) -> tuple[StoredRecord, ...]:
        try:
            with self._lock.read_locked(self._lock_timeout):
                return tuple(self._records)
        except LockUnavailableError as exc:
            logger.error("record_store snapshot rejected", reason=str(exc))
            raise StoreUnavailableError("Failed to read data store") from exc

    def count(self) -> int:
        try:
            with self._lock.read_locked(self._lock_timeout):
                return len(self._records)
        except LockUnavailableError as exc:
            raise StoreUnavailableError("Failed to read data store") from exc
