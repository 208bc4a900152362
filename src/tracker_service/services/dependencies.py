"""Shared dependency providers for aiohttp handlers."""
from __future__ import annotations

from typing import Callable, TypeVar

from aiohttp import web

from tracker_service.repositories.records import RecordStore
from tracker_service.services.ingest import IngestService
from tracker_service.services.query import QueryService

TService = TypeVar("TService")

RECORD_STORE_KEY = web.AppKey("record_store", RecordStore)

_INGEST_SERVICE_KEY = "ingest_service"
_QUERY_SERVICE_KEY = "query_service"


def get_record_store(request: web.Request) -> RecordStore:
    return request.app[RECORD_STORE_KEY]


def _get_or_create_service(
    request: web.Request,
    cache_key: str,
    builder: Callable[[RecordStore], TService],
) -> TService:
    service = request.get(cache_key)
    if service is None:
        service = builder(get_record_store(request))
        request[cache_key] = service
    return service


def get_ingest_service(request: web.Request) -> IngestService:
    return _get_or_create_service(request, _INGEST_SERVICE_KEY, IngestService)


def get_query_service(request: web.Request) -> QueryService:
    return _get_or_create_service(request, _QUERY_SERVICE_KEY, QueryService)
