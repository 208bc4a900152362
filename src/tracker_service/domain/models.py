"""Domain models for decoded tracker telemetry."""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

U16_MAX = 0xFFFF
U8_MAX = 0xFF


@dataclass(frozen=True, slots=True)
class DecodedPayload:
    """Raw fields carried by one wire payload. No unit conversion applied."""

    longitude: int
    latitude: int
    battery: int


class StoredRecord(BaseModel):
    """A decoded observation kept by the record store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    longitude: int = Field(ge=0, le=U16_MAX)
    latitude: int = Field(ge=0, le=U16_MAX)
    battery: int = Field(ge=0, le=U8_MAX)
    # Opaque "date time" string as reported by the device.
    timestamp: str

    @classmethod
    def from_report(cls, report_id: str, decoded: DecodedPayload, *, date: str, time: str) -> "StoredRecord":
        return cls(
            id=report_id,
            longitude=decoded.longitude,
            latitude=decoded.latitude,
            battery=decoded.battery,
            timestamp=f"{date} {time}",
        )
