"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .errors import ApplicationNotStartedError
from .logging_config import get_logger
from .store import ITimestampStore, TimestampStore

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Start the store and wait until it is ready."""
        ...

    async def stop(self) -> None:
        """Stop the store."""
        ...

    @property
    def store(self) -> ITimestampStore:
        """The running store."""
        ...


class Application:
    """Owns the timestamp store for the lifetime of the server."""

    def __init__(self, store: ITimestampStore | None = None):
        self._store: ITimestampStore = store if store is not None else TimestampStore()
        self._started = False

    async def start(self) -> None:
        """Start the store; returns once its processing loop is servicing requests."""
        if self._started:
            return

        logger.info("Starting application")
        await self._store.start()
        self._started = True
        logger.info("Store started")

    async def stop(self) -> None:
        """Stop the store."""
        if not self._started:
            return

        await self._store.stop()
        self._started = False
        logger.info("Store stopped")

    @property
    def started(self) -> bool:
        """Whether start() has completed."""
        return self._started

    @property
    def store(self) -> ITimestampStore:
        """Get store instance."""
        if not self._started:
            raise ApplicationNotStartedError()
        return self._store
