"""Read side of the record store."""
from __future__ import annotations

from typing import Sequence

from tracker_service.core.exceptions import QueryUnavailableError, StoreUnavailableError
from tracker_service.domain.models import StoredRecord
from tracker_service.repositories.records import RecordStore


class QueryService:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def query_all(self) -> Sequence[StoredRecord]:
        """All stored records in insertion order."""
        try:
            return self._store.snapshot()
        except StoreUnavailableError as exc:
            raise QueryUnavailableError(str(exc)) from exc
