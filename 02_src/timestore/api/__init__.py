"""API module."""

from .app import create_fastapi_app
from .codecs import TimePayload, WireFormat

__all__ = ["create_fastapi_app", "TimePayload", "WireFormat"]
