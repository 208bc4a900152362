"""Pytest configuration and fixtures."""
from __future__ import annotations

import pytest

from tracker_service.main import create_app
from tracker_service.repositories.records import RecordStore


@pytest.fixture
def record_store():
    """Fresh store per test; the service never shares one across apps."""
    return RecordStore(lock_timeout=1.0)


@pytest.fixture
async def service_client(aiohttp_client, record_store):
    """Client for calling the service API."""
    app = create_app(record_store)
    return await aiohttp_client(app)


@pytest.fixture
def report_body():
    def _make(
        payload: str = "0A1B2C3D4E",
        *,
        device_id: str = "dev1",
        date: str = "2024-01-01",
        time: str = "12:00:00",
    ) -> dict[str, str]:
        return {"id": device_id, "payload": payload, "date": date, "time": time}

    return _make
