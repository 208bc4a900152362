"""Report ingestion business logic."""
from __future__ import annotations

import structlog

from tracker_service.core.exceptions import (
    BadPayloadError,
    IngestUnavailableError,
    PayloadDecodeError,
    StoreUnavailableError,
)
from tracker_service.domain.dto import IncomingReportDTO
from tracker_service.domain.models import StoredRecord
from tracker_service.repositories.records import RecordStore
from tracker_service.services.decoder import decode_payload

logger = structlog.get_logger(__name__)


class IngestService:
    """Decodes tracker reports and appends them to the record store."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def ingest(self, report: IncomingReportDTO) -> StoredRecord:
        # Decoding stays outside the store lock.
        try:
            decoded = decode_payload(report.payload)
        except PayloadDecodeError as exc:
            logger.warning("report rejected", device_id=report.id, payload=report.payload, reason=str(exc))
            raise BadPayloadError(exc) from exc

        record = StoredRecord.from_report(report.id, decoded, date=report.date, time=report.time)
        try:
            self._store.append(record)
        except StoreUnavailableError as exc:
            raise IngestUnavailableError(str(exc)) from exc

        logger.info(
            "report accepted",
            device_id=record.id,
            longitude=record.longitude,
            latitude=record.latitude,
            battery=record.battery,
            timestamp=record.timestamp,
        )
        return record
