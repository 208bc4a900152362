"""aiohttp application helpers: base app, health, OpenAPI, CORS, JSON bodies."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from aiohttp import web
from aiohttp_cors import CorsConfig, ResourceOptions, setup as cors_setup

from tracker_service.middleware.trace import create_trace_middleware
from tracker_service.settings import Settings

# aiohttp_cors expects a sequence of strings (or "*"), NOT a comma-separated string.
_ALLOWED_HEADERS = (
    "Accept",
    "Accept-Language",
    "Content-Language",
    "Content-Type",
    "X-Trace-Id",
    "X-Request-Id",
)

# The dashboard only reads; the tracker only posts.
_ALLOWED_METHODS = ("GET", "HEAD", "POST", "OPTIONS")

_EXPOSED_HEADERS = (
    "X-Trace-Id",
    "X-Request-Id",
    "Content-Disposition",
)


def create_base_app(settings: Settings) -> tuple[web.Application, CorsConfig]:
    """Create a base aiohttp app with tracing middleware and CORS configured."""
    app = web.Application()
    app.middlewares.append(create_trace_middleware(settings.app_name))

    cors = cors_setup(
        app,
        defaults={
            origin: ResourceOptions(
                allow_credentials=False,
                expose_headers=_EXPOSED_HEADERS,
                allow_headers=_ALLOWED_HEADERS,
                allow_methods=_ALLOWED_METHODS,
            )
            for origin in settings.cors_allowed_origins
        },
    )
    return app, cors


def add_healthcheck(
    app: web.Application,
    settings: Settings,
    extra: Callable[[web.Application], dict[str, Any]] | None = None,
) -> None:
    """Register ``GET /health``; ``extra`` contributes service-specific fields."""

    async def healthcheck(request: web.Request) -> web.Response:
        body: dict[str, Any] = {"status": "ok", "service": settings.app_name, "env": settings.env}
        if extra is not None:
            body.update(extra(request.app))
        return web.json_response(body)

    app.router.add_get("/health", healthcheck)


def add_openapi_spec(app: web.Application, openapi_path: Path) -> None:
    """Register an endpoint that serves the OpenAPI spec."""

    async def openapi_spec(_request: web.Request) -> web.StreamResponse:
        if not openapi_path.exists():
            raise web.HTTPNotFound(text="OpenAPI spec is not bundled with this build")
        return web.FileResponse(openapi_path, headers={"Content-Type": "application/yaml"})

    app.router.add_get("/openapi.yaml", openapi_spec)


def add_cors_to_routes(app: web.Application, cors: CorsConfig) -> None:
    """Apply CORS configuration to all routes in the app."""
    for route in list(app.router.routes()):
        cors.add(route)


async def read_json(request: web.Request) -> dict[str, Any]:
    """Parse JSON body from request, raising HTTPBadRequest on invalid input."""
    try:
        data = await request.json()
    except Exception as exc:
        raise json_error(web.HTTPBadRequest, "Invalid JSON payload") from exc
    if not isinstance(data, dict):
        raise json_error(web.HTTPBadRequest, "JSON body must be an object")
    return data


def json_error(exc_cls: type[web.HTTPException], message: str, **details: Any) -> web.HTTPException:
    """Build an HTTP error carrying the ``{"status": "error", "message": ...}`` body."""
    return exc_cls(
        text=json.dumps({"status": "error", "message": message, **details}),
        content_type="application/json",
    )
