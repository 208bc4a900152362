"""Request tracing middleware: trace/request ids and per-request logging."""
from __future__ import annotations

import time
from typing import Any, Mapping
from uuid import UUID, uuid4

import structlog
from aiohttp import web

TRACE_ID_HEADER = "X-Trace-Id"
REQUEST_ID_HEADER = "X-Request-Id"

logger = structlog.get_logger(__name__)

# Never logged.
SENSITIVE_HEADERS = frozenset({
    "authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "x-auth-token",
})


def is_valid_uuid(value: str) -> bool:
    try:
        UUID(value)
        return True
    except (ValueError, AttributeError):
        return False


def get_safe_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Headers with sensitive entries dropped; repeated keys keep the first value."""
    safe: dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS or key in safe:
            continue
        safe[key] = value
    return safe


def _incoming_id(request: web.Request, header: str) -> str:
    value = request.headers.get(header)
    if not value or not is_valid_uuid(value):
        return str(uuid4())
    return value


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def create_trace_middleware(service_name: str):
    """Create trace middleware bound to the given service name."""

    @web.middleware
    async def trace_middleware(request: web.Request, handler):
        start = time.perf_counter()
        trace_id = _incoming_id(request, TRACE_ID_HEADER)
        request_id = _incoming_id(request, REQUEST_ID_HEADER)
        request["trace_id"] = trace_id
        request["request_id"] = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            trace_id=trace_id,
            request_id=request_id,
            service=service_name,
            method=request.method,
            path=request.path,
        )

        request_info: dict[str, Any] = {
            "query_string": request.query_string or None,
            "remote": request.remote,
            "headers": get_safe_headers(request.headers),
        }
        if request.content_length:
            request_info["content_length"] = request.content_length
        logger.info("Incoming request", **request_info)

        try:
            response = await handler(request)

            response_info: dict[str, Any] = {
                "status_code": response.status,
                "duration_ms": _elapsed_ms(start),
            }
            if response.status >= 400:
                logger.warning("Request completed with error status", **response_info)
            else:
                logger.info("Request completed", **response_info)

            response.headers[TRACE_ID_HEADER] = trace_id
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except web.HTTPException as exc:
            logger.warning(
                "Request failed with HTTP exception",
                status_code=exc.status_code,
                duration_ms=_elapsed_ms(start),
                error=exc.text or exc.reason,
            )
            exc.headers[TRACE_ID_HEADER] = trace_id
            exc.headers[REQUEST_ID_HEADER] = request_id
            raise
        except Exception as exc:
            logger.error(
                "Request failed with exception",
                duration_ms=_elapsed_ms(start),
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=True,
            )
            raise
        finally:
            structlog.contextvars.clear_contextvars()

    return trace_middleware
