from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime

from tracker_service.services.decoder import encode_payload

# Firmware ranges: esp_random() % 0xFFFF for coordinates, % 0x65 for battery percent.
_COORD_MODULUS = 0xFFFF
_BATTERY_MODULUS = 0x65


@dataclass(frozen=True, slots=True)
class TrackerReport:
    """One report as the tracker firmware posts it."""

    device_id: str
    payload: str
    date: str
    time: str

    def as_ingest_dict(self) -> dict[str, str]:
        return {"id": self.device_id, "payload": self.payload, "date": self.date, "time": self.time}


def random_report(device_id: str, now: datetime, *, rng: random.Random | None = None) -> TrackerReport:
    rng = rng or random.Random()
    payload = encode_payload(
        rng.randrange(_COORD_MODULUS),
        rng.randrange(_COORD_MODULUS),
        rng.randrange(_BATTERY_MODULUS),
    )
    return TrackerReport(
        device_id=device_id,
        payload=payload,
        date=now.strftime("%Y-%m-%d"),
        time=now.strftime("%H:%M:%S"),
    )


def within_window(hour: int, *, start_hour: int, end_hour: int) -> bool:
    return start_hour <= hour <= end_hour
