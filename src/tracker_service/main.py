"""aiohttp application entrypoint."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from aiohttp import web

from tracker_service.aiohttp_app import (
    add_cors_to_routes,
    add_healthcheck,
    add_openapi_spec,
    create_base_app,
)
from tracker_service.api.router import setup_routes
from tracker_service.core.exceptions import StoreUnavailableError
from tracker_service.logging_config import configure_logging
from tracker_service.repositories.records import RecordStore
from tracker_service.services.dependencies import RECORD_STORE_KEY
from tracker_service.settings import settings

# Configure structured logging
configure_logging(settings.log_level)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
OPENAPI_PATH = PROJECT_ROOT / "openapi" / "openapi.yaml"


def _store_health(app: web.Application) -> dict[str, Any]:
    store = app[RECORD_STORE_KEY]
    try:
        return {"records": store.count()}
    except StoreUnavailableError:
        return {"status": "degraded", "records": None}


def create_app(store: RecordStore | None = None) -> web.Application:
    app, cors = create_base_app(settings)

    # One store per application; it lives until the process exits.
    if store is None:
        store = RecordStore(lock_timeout=settings.store_lock_timeout_seconds)
    app[RECORD_STORE_KEY] = store

    add_healthcheck(app, settings, extra=_store_health)
    add_openapi_spec(app, OPENAPI_PATH)
    setup_routes(app)

    add_cors_to_routes(app, cors)

    return app


def main() -> None:
    web.run_app(create_app(), host=settings.host, port=settings.port, access_log=None)


if __name__ == "__main__":
    main()
