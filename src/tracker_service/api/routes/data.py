"""Tracker report ingest and query endpoints."""
from __future__ import annotations

from typing import Any

from aiohttp import web
from pydantic import ValidationError

from tracker_service.aiohttp_app import json_error, read_json
from tracker_service.core.exceptions import (
    BadPayloadError,
    IngestUnavailableError,
    InvalidHexError,
    PayloadDecodeError,
    QueryUnavailableError,
    WrongLengthError,
)
from tracker_service.domain.dto import IncomingReportDTO
from tracker_service.services.dependencies import get_ingest_service, get_query_service

routes = web.RouteTableDef()


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{loc}: {err['msg']}")
    return "Invalid report: " + "; ".join(parts)


def _decode_error_details(cause: PayloadDecodeError) -> dict[str, Any]:
    if isinstance(cause, WrongLengthError):
        return {"reason": "wrong_length", "expected": cause.expected, "actual": cause.actual}
    if isinstance(cause, InvalidHexError):
        return {"reason": "invalid_hex", "slice": cause.slice_name}
    return {"reason": "invalid_payload"}


@routes.post("/api/data")
async def receive_data(request: web.Request) -> web.Response:
    """Ingest endpoint the tracker firmware posts to."""
    body = await read_json(request)
    try:
        dto = IncomingReportDTO.model_validate(body)
    except ValidationError as exc:
        raise json_error(web.HTTPBadRequest, _validation_message(exc)) from exc

    service = get_ingest_service(request)
    try:
        service.ingest(dto)
    except BadPayloadError as exc:
        raise json_error(web.HTTPBadRequest, str(exc), **_decode_error_details(exc.cause)) from exc
    except IngestUnavailableError as exc:
        raise json_error(web.HTTPInternalServerError, str(exc)) from exc

    return web.json_response({"status": "success"})


@routes.get("/api/data")
async def get_data(request: web.Request) -> web.Response:
    """Every stored record in insertion order."""
    service = get_query_service(request)
    try:
        records = service.query_all()
    except QueryUnavailableError as exc:
        raise json_error(web.HTTPInternalServerError, str(exc)) from exc
    return web.json_response([record.model_dump(mode="json") for record in records])
