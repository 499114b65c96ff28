"""Core data models for Timestore."""

from .ops import ReadOp, WriteOp
from .timestamp import EPOCH, TimeStamp, ensure_utc

__all__ = [
    # Values
    "EPOCH",
    "TimeStamp",
    "ensure_utc",
    # Store messages
    "ReadOp",
    "WriteOp",
]
