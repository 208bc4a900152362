"""Common exceptions for the decoder, store and service layers."""
from __future__ import annotations


class TrackerServiceError(Exception):
    """Base error for service layer."""


class PayloadDecodeError(TrackerServiceError):
    """Raised when a wire payload cannot be decoded."""


class WrongLengthError(PayloadDecodeError):
    """Raised when the payload is not exactly the fixed wire width."""

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Payload must be exactly {expected} characters long, got {actual}")


class InvalidHexError(PayloadDecodeError):
    """Raised when a payload slice contains non-hexadecimal characters."""

    def __init__(self, *, slice_name: str, value: str) -> None:
        self.slice_name = slice_name
        self.value = value
        super().__init__(f"Invalid hex in {slice_name} slice: {value!r}")


class StoreUnavailableError(TrackerServiceError):
    """Raised when the record store lock cannot be acquired."""


class IngestError(TrackerServiceError):
    """Raised when a report cannot be ingested."""


class BadPayloadError(IngestError):
    """Raised when the report payload fails to decode. Client fault."""

    def __init__(self, cause: PayloadDecodeError) -> None:
        self.cause = cause
        super().__init__(f"Failed to parse payload: {cause}")


class IngestUnavailableError(IngestError):
    """Raised when the store rejects an append. Server fault."""


class QueryError(TrackerServiceError):
    """Raised when stored records cannot be read."""


class QueryUnavailableError(QueryError):
    """Raised when the store rejects a snapshot. Server fault."""
