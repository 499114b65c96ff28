"""Timestore: an in-memory timestamp store served over HTTP."""

from .app import Application, IApplication
from .errors import (
    ApplicationNotStartedError,
    DecodeError,
    InvalidInputError,
    NotInitializedError,
    StoreError,
    StoreStoppedError,
)
from .models import EPOCH, ReadOp, TimeStamp, WriteOp
from .store import ITimestampStore, StoreState, TimestampStore

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "EPOCH",
    "TimeStamp",
    "ReadOp",
    "WriteOp",
    # Store
    "ITimestampStore",
    "StoreState",
    "TimestampStore",
    # Errors
    "ApplicationNotStartedError",
    "StoreError",
    "NotInitializedError",
    "InvalidInputError",
    "StoreStoppedError",
    "DecodeError",
]
