"""Messages exchanged with the store's processing loop."""

import asyncio
from dataclasses import dataclass

from .timestamp import TimeStamp


@dataclass
class ReadOp:
    """Request for the current value. Reply carries a copy of the slot."""

    reply: asyncio.Future[TimeStamp]


@dataclass
class WriteOp:
    """Request to replace the slot. Reply resolves once the write is applied."""

    value: TimeStamp
    reply: asyncio.Future[None]
