"""Demo client for the timestamp service."""

from .client import ClientError, ITimeClient, TimeClient

__all__ = ["ClientError", "ITimeClient", "TimeClient"]
