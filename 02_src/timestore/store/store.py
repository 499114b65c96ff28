"""Single-slot timestamp store driven by one processing task."""

import asyncio
from datetime import datetime
from enum import Enum
from typing import Protocol

from ..errors import InvalidInputError, NotInitializedError, StoreStoppedError
from ..logging_config import get_logger
from ..models import ReadOp, TimeStamp, WriteOp

logger = get_logger(__name__)


class StoreState(str, Enum):
    """Lifecycle of a TimestampStore."""

    CONSTRUCTED = "constructed"
    RUNNING = "running"
    STOPPED = "stopped"


class ITimestampStore(Protocol):
    """Holder of one timestamp, reachable only through get/set."""

    async def set(self, value: TimeStamp | datetime) -> None:
        """Replace the stored value. Returns once the write is applied."""
        ...

    async def get(self) -> TimeStamp:
        """Return the currently stored value."""
        ...

    async def start(self) -> None:
        """Start the processing loop and wait until it services messages."""
        ...

    async def stop(self) -> None:
        """Stop the processing loop."""
        ...

    def is_initialized(self) -> bool:
        """Whether the store holds a slot."""
        ...

    def is_running(self) -> bool:
        """Whether the processing loop is servicing messages."""
        ...


class TimestampStore:
    """
    Actor-style store for a single timestamp.

    The slot is owned by the processing task started in start(). Callers
    never touch it: get() and set() enqueue a ReadOp/WriteOp carrying a
    single-use reply future and wait on that future. The loop services one
    message at a time, so a read never observes a write in progress.
    """

    def __init__(self, initial: TimeStamp | None = None):
        self._slot: TimeStamp | None = initial if initial is not None else TimeStamp()
        self._reads: asyncio.Queue[ReadOp] = asyncio.Queue()
        self._writes: asyncio.Queue[WriteOp] = asyncio.Queue()
        self._state = StoreState.CONSTRUCTED
        self._ready = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> StoreState:
        """Current lifecycle state."""
        return self._state

    def is_initialized(self) -> bool:
        """True once the slot exists, whether or not the loop runs."""
        return self._slot is not None

    def is_running(self) -> bool:
        """True while the processing loop services messages."""
        return self._state is StoreState.RUNNING

    async def start(self) -> None:
        """Start the processing loop and return once it is servicing messages."""
        if self._state is StoreState.STOPPED:
            raise StoreStoppedError()

        if self._task is None:
            self._task = asyncio.create_task(self._run(), name="timestamp-store")

        ready = asyncio.ensure_future(self._ready.wait())
        try:
            await asyncio.wait({ready, self._task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            ready.cancel()

        if not self.is_running():
            raise NotInitializedError("Store processing loop failed to start")

    async def stop(self) -> None:
        """Stop the processing loop. Pending requests fail with NotInitializedError."""
        if self._task is None:
            self._state = StoreState.STOPPED
            return

        if not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._state = StoreState.STOPPED

    async def set(self, value: TimeStamp | datetime) -> None:
        """Replace the stored value and wait until the loop has applied it."""
        if value is None:
            raise InvalidInputError()
        if isinstance(value, datetime):
            try:
                value = TimeStamp(value)
            except ValueError as e:
                raise InvalidInputError(str(e)) from e
        elif not isinstance(value, TimeStamp):
            raise InvalidInputError(
                f"Expected a TimeStamp or datetime, got {type(value).__name__}"
            )
        self._ensure_running()

        reply: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._writes.put_nowait(WriteOp(value=value, reply=reply))
        await reply

    async def get(self) -> TimeStamp:
        """Return the value held by the slot when the loop serves this request."""
        self._ensure_running()

        reply: asyncio.Future[TimeStamp] = asyncio.get_running_loop().create_future()
        self._reads.put_nowait(ReadOp(reply=reply))
        return await reply

    def _ensure_running(self) -> None:
        if not self.is_initialized() or not self.is_running():
            raise NotInitializedError()

    async def _run(self) -> None:
        """Serve one read or one write per wakeup until cancelled."""
        read_waiter = asyncio.ensure_future(self._reads.get())
        write_waiter = asyncio.ensure_future(self._writes.get())

        self._state = StoreState.RUNNING
        self._ready.set()
        logger.info("Timestamp store started")

        try:
            while True:
                done, _ = await asyncio.wait(
                    {read_waiter, write_waiter},
                    return_when=asyncio.FIRST_COMPLETED,
                )
                # Exactly one message per iteration; an unchosen waiter
                # stays pending and is picked up on the next pass.
                if read_waiter in done:
                    self._serve_read(read_waiter.result())
                    read_waiter = asyncio.ensure_future(self._reads.get())
                else:
                    self._serve_write(write_waiter.result())
                    write_waiter = asyncio.ensure_future(self._writes.get())
        finally:
            self._state = StoreState.STOPPED
            self._abandon(read_waiter, write_waiter)
            logger.info("Timestamp store stopped")

    def _serve_read(self, op: ReadOp) -> None:
        if not op.reply.done():
            op.reply.set_result(self._slot)

    def _serve_write(self, op: WriteOp) -> None:
        self._slot = op.value
        logger.debug("Slot updated", extra={"value": str(op.value)})
        if not op.reply.done():
            op.reply.set_result(None)

    def _abandon(self, *waiters: asyncio.Future) -> None:
        """Fail every request the loop will no longer serve."""
        orphaned: list[ReadOp | WriteOp] = []
        for waiter in waiters:
            if waiter.done() and not waiter.cancelled():
                orphaned.append(waiter.result())
            else:
                waiter.cancel()

        for queue in (self._reads, self._writes):
            while not queue.empty():
                orphaned.append(queue.get_nowait())

        for op in orphaned:
            if not op.reply.done():
                op.reply.set_exception(NotInitializedError("Store stopped before serving request"))
