"""Fixed-width hex wire format used by the tracker firmware.

Layout (10 ASCII hex characters, case-insensitive)::

    LLLL AAAA BB
    |    |    +-- battery    (2 hex digits, 0..0xFF)
    |    +------- latitude   (4 hex digits, 0..0xFFFF)
    +------------ longitude  (4 hex digits, 0..0xFFFF)
"""
from __future__ import annotations

import string

from tracker_service.core.exceptions import InvalidHexError, WrongLengthError
from tracker_service.domain.models import U8_MAX, U16_MAX, DecodedPayload

PAYLOAD_LENGTH = 10

# (name, start, end) in payload order.
_SLICES: tuple[tuple[str, int, int], ...] = (
    ("longitude", 0, 4),
    ("latitude", 4, 8),
    ("battery", 8, 10),
)

_HEX_DIGITS = frozenset(string.hexdigits)


def _parse_slice(payload: str, name: str, start: int, end: int) -> int:
    chunk = payload[start:end]
    # int(..., 16) also accepts signs, "0x", "_" and whitespace; the wire does not.
    if any(ch not in _HEX_DIGITS for ch in chunk):
        raise InvalidHexError(slice_name=name, value=chunk)
    return int(chunk, 16)


def decode_payload(payload: str) -> DecodedPayload:
    """Decode a wire payload into its raw fields.

    Raises ``WrongLengthError`` or ``InvalidHexError``; nothing is returned
    unless every slice parsed.
    """
    if len(payload) != PAYLOAD_LENGTH:
        raise WrongLengthError(expected=PAYLOAD_LENGTH, actual=len(payload))
    values = {name: _parse_slice(payload, name, start, end) for name, start, end in _SLICES}
    return DecodedPayload(**values)


def encode_payload(longitude: int, latitude: int, battery: int) -> str:
    """Build the upper-case payload the firmware sends (``%04X%04X%02X``)."""
    if not 0 <= longitude <= U16_MAX:
        raise ValueError(f"longitude out of range: {longitude}")
    if not 0 <= latitude <= U16_MAX:
        raise ValueError(f"latitude out of range: {latitude}")
    if not 0 <= battery <= U8_MAX:
        raise ValueError(f"battery out of range: {battery}")
    return f"{longitude:04X}{latitude:04X}{battery:02X}"
