"""Store module."""

from .store import ITimestampStore, StoreState, TimestampStore

__all__ = ["ITimestampStore", "StoreState", "TimestampStore"]
