"""Data export endpoint (CSV / JSON) for the dashboard download button."""
from __future__ import annotations

import json
from typing import Sequence

from aiohttp import web

from tracker_service.aiohttp_app import json_error
from tracker_service.core.exceptions import QueryUnavailableError
from tracker_service.domain.models import StoredRecord
from tracker_service.services.dependencies import get_query_service
from tracker_service.settings import settings

routes = web.RouteTableDef()

CSV_COLUMNS = ("id", "timestamp", "longitude", "latitude", "battery")


def records_to_csv(records: Sequence[StoredRecord]) -> str:
    """Header plus one plain comma-joined row per record; fields are not quoted."""
    lines = [",".join(CSV_COLUMNS)]
    for record in records:
        lines.append(
            ",".join(
                str(value)
                for value in (
                    record.id,
                    record.timestamp,
                    record.longitude,
                    record.latitude,
                    record.battery,
                )
            )
        )
    return "\n".join(lines) + "\n"


def records_to_json(records: Sequence[StoredRecord]) -> str:
    return json.dumps(
        [record.model_dump(mode="json") for record in records],
        ensure_ascii=False,
        indent=2,
    )


@routes.get("/api/data/export")
async def export_data(request: web.Request) -> web.Response:
    """Export every stored record as CSV or JSON.

    Query params:
      - format: csv | json (default csv)
    """
    fmt = request.rel_url.query.get("format", "csv").lower()
    if fmt not in ("csv", "json"):
        raise json_error(web.HTTPBadRequest, "format must be csv or json")

    service = get_query_service(request)
    try:
        records = service.query_all()
    except QueryUnavailableError as exc:
        raise json_error(web.HTTPInternalServerError, str(exc)) from exc

    filename = settings.export_filename
    if fmt == "json":
        body = records_to_json(records)
        content_type = "application/json"
        filename = filename.rsplit(".", 1)[0] + ".json"
    else:
        body = records_to_csv(records)
        content_type = "text/csv"

    return web.Response(
        text=body,
        content_type=content_type,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
