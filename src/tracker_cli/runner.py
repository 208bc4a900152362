from __future__ import annotations

import asyncio
import random
from datetime import datetime
from typing import Callable

import httpx
import structlog

from tracker_cli.config import AppConfig
from tracker_cli.models import random_report, within_window
from tracker_cli.sink import TrackerServiceClient

logger = structlog.get_logger(__name__)


async def run_tracker(
    cfg: AppConfig,
    *,
    clock: Callable[[], datetime] = datetime.now,
    rng: random.Random | None = None,
) -> int:
    """Poll every ``interval_s`` and post at most one report per clock hour.

    Reports go out only inside the operational window. A failed send is retried
    on the next poll. Returns the number of reports the server accepted once
    ``max_reports`` is reached; otherwise runs until cancelled.
    """
    schedule = cfg.schedule
    rng = rng or random.Random()
    sent = 0
    last_sent_hour: int | None = None

    async with TrackerServiceClient(
        base_url=str(cfg.server.base_url),
        timeout_s=cfg.server.timeout_s,
    ) as client:
        while True:
            now = clock()
            if not within_window(now.hour, start_hour=schedule.start_hour, end_hour=schedule.end_hour):
                last_sent_hour = None
                logger.info("outside operational window", hour=now.hour)
            elif now.hour == last_sent_hour:
                logger.debug("already sent this hour", hour=now.hour)
            else:
                report = random_report(cfg.device.id, now, rng=rng)
                try:
                    await client.send(report)
                except httpx.HTTPError as exc:
                    logger.warning("transmission failed", device_id=report.device_id, error=str(exc))
                else:
                    sent += 1
                    last_sent_hour = now.hour
                    logger.info("report sent", device_id=report.device_id, payload=report.payload)
                    if schedule.max_reports is not None and sent >= schedule.max_reports:
                        return sent

            await asyncio.sleep(schedule.interval_s)
