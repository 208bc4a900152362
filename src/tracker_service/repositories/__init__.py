"""Repository exports."""

from tracker_service.repositories.records import RecordStore

__all__ = ["RecordStore"]
