from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, HttpUrl, model_validator


class ServerConfig(BaseModel):
    base_url: HttpUrl = Field(default="http://localhost:8080")
    timeout_s: float = Field(default=5.0, ge=0.1)


class DeviceConfig(BaseModel):
    id: str = Field(default="ESP32_001", min_length=1)


class ScheduleConfig(BaseModel):
    # Polling period; at most one report is sent per clock hour.
    interval_s: float = Field(default=60.0, gt=0.0)
    # Operational window in local hours, both ends inclusive.
    start_hour: int = Field(default=8, ge=0, le=23)
    end_hour: int = Field(default=19, ge=0, le=23)
    max_reports: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_window(self) -> "ScheduleConfig":
        if self.start_hour > self.end_hour:
            raise ValueError("schedule.start_hour must not be after schedule.end_hour")
        return self


class AppConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    device: DeviceConfig = Field(default_factory=DeviceConfig)
    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)


def load_config(path: str | Path) -> AppConfig:
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    return AppConfig.model_validate(data)
