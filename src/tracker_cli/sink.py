from __future__ import annotations

from typing import Any

import httpx

from tracker_cli.models import TrackerReport


class TrackerServiceClient:
    def __init__(self, *, base_url: str, timeout_s: float = 5.0):
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TrackerServiceClient":
        self._client = httpx.AsyncClient(timeout=self._timeout_s)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def send(self, report: TrackerReport) -> dict[str, Any]:
        if not self._client:
            raise RuntimeError("Client is not started; use 'async with TrackerServiceClient(...)'.")

        resp = await self._client.post(
            f"{self._base_url}/api/data",
            json=report.as_ingest_dict(),
            headers={"Content-Type": "application/json"},
        )
        resp.raise_for_status()
        return resp.json()
