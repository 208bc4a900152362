"""Integration tests for the data export endpoint."""
from __future__ import annotations

import pytest

from tracker_service.api.routes.export import records_to_csv
from tracker_service.domain.models import StoredRecord


@pytest.mark.asyncio
async def test_export_csv(service_client, report_body):
    await service_client.post("/api/data", json=report_body())
    await service_client.post("/api/data", json=report_body("ffffffffff", device_id="dev2", time="13:00:00"))

    resp = await service_client.get("/api/data/export")
    assert resp.status == 200
    assert "text/csv" in resp.headers.get("Content-Type", "")
    assert resp.headers["Content-Disposition"] == 'attachment; filename="gps_data.csv"'

    body = await resp.text()
    assert body == (
        "id,timestamp,longitude,latitude,battery\n"
        "dev1,2024-01-01 12:00:00,2587,11325,78\n"
        "dev2,2024-01-01 13:00:00,65535,65535,255\n"
    )


@pytest.mark.asyncio
async def test_export_csv_empty_store_has_header_only(service_client):
    resp = await service_client.get("/api/data/export?format=csv")
    assert resp.status == 200
    assert await resp.text() == "id,timestamp,longitude,latitude,battery\n"


@pytest.mark.asyncio
async def test_export_json(service_client, report_body):
    await service_client.post("/api/data", json=report_body())

    resp = await service_client.get("/api/data/export?format=json")
    assert resp.status == 200
    assert "application/json" in resp.headers.get("Content-Type", "")
    assert "gps_data.json" in resp.headers["Content-Disposition"]
    data = await resp.json()
    assert data == [
        {"id": "dev1", "longitude": 2587, "latitude": 11325, "battery": 78, "timestamp": "2024-01-01 12:00:00"}
    ]


@pytest.mark.asyncio
async def test_export_rejects_unknown_format(service_client):
    resp = await service_client.get("/api/data/export?format=xml")
    assert resp.status == 400


@pytest.mark.asyncio
async def test_export_unavailable_store(service_client, record_store):
    with pytest.raises(RuntimeError):
        with record_store._lock.write_locked():
            raise RuntimeError("boom")

    resp = await service_client.get("/api/data/export")
    assert resp.status == 500


def test_records_to_csv_follows_snapshot_order():
    records = [
        StoredRecord(id=f"dev{i}", longitude=i, latitude=i + 1, battery=i, timestamp=f"d t{i}")
        for i in range(3)
    ]
    lines = records_to_csv(records).splitlines()
    assert lines[0] == "id,timestamp,longitude,latitude,battery"
    assert lines[1:] == ["dev0,d t0,0,1,0", "dev1,d t1,1,2,1", "dev2,d t2,2,3,2"]


def test_records_to_csv_does_not_quote_fields():
    records = [
        StoredRecord(id='dev"1', longitude=1, latitude=2, battery=3, timestamp="2024-01-01 12:00:00"),
    ]
    assert records_to_csv(records) == (
        "id,timestamp,longitude,latitude,battery\n"
        'dev"1,2024-01-01 12:00:00,1,2,3\n'
    )
