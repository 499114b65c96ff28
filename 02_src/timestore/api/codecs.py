"""Wire encodings for the timestamp routes."""

import re
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ValidationError, field_validator

from ..errors import DecodeError
from ..models import TimeStamp, ensure_utc

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class WireFormat(str, Enum):
    """Request/response body formats."""

    TEXT = "text"
    JSON = "json"


class TimePayload(BaseModel):
    """JSON body for both setTime and getTime."""

    time: datetime

    @field_validator("time", mode="before")
    @classmethod
    def numbers_are_unix_seconds(cls, value):
        # pydantic would read large numbers as milliseconds
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return TimeStamp.from_unix_seconds(value).value
        return value

    @field_validator("time")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


def decode_text(body: bytes) -> TimeStamp:
    """Parse decimal ASCII seconds since the epoch."""
    try:
        text = body.decode("ascii").strip()
    except UnicodeDecodeError as e:
        raise DecodeError("Body must be ASCII decimal seconds") from e

    if not _DECIMAL_RE.fullmatch(text):
        raise DecodeError(f"Invalid timestamp {text!r}: expected integer seconds since epoch")

    try:
        return TimeStamp.from_unix_seconds(int(text))
    except ValueError as e:
        raise DecodeError(str(e)) from e


def encode_text(timestamp: TimeStamp) -> str:
    """Decimal seconds since the epoch."""
    return str(timestamp.unix_seconds())


def decode_json(body: bytes) -> TimeStamp:
    """Parse a {"time": ...} object."""
    try:
        payload = TimePayload.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Invalid time payload: {e.errors()[0]['msg']}") from e
    return TimeStamp(payload.time)


def encode_json(timestamp: TimeStamp) -> TimePayload:
    """Wrap a timestamp in the JSON response model."""
    return TimePayload(time=timestamp.value)


def decode(body: bytes, wire_format: WireFormat) -> TimeStamp:
    """Decode a request body in the given format."""
    if wire_format is WireFormat.JSON:
        return decode_json(body)
    return decode_text(body)
