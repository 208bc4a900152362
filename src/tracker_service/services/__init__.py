"""Domain services exports."""

from tracker_service.services.ingest import IngestService
from tracker_service.services.query import QueryService

__all__ = ["IngestService", "QueryService"]
