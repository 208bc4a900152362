"""Pydantic DTOs for tracker reports."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class IncomingReportDTO(BaseModel):
    """JSON body posted by the tracker firmware.

    The payload width is checked by the wire decoder, not here, so that the
    rejection can report expected and actual length.
    """

    model_config = ConfigDict(extra="forbid")

    id: str
    payload: str
    date: str
    time: str
