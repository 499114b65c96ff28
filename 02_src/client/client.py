"""Demo client - sets a time on the service and reads it back."""

from typing import Protocol

import httpx

from timestore.api.codecs import WireFormat, decode, encode_json, encode_text
from timestore.errors import DecodeError
from timestore.logging_config import get_logger
from timestore.models import TimeStamp

logger = get_logger(__name__)


class ClientError(Exception):
    """Raised when the service answers with an unexpected status or body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ITimeClient(Protocol):
    """Talks to the setTime/getTime API."""

    async def set_time(self, timestamp: TimeStamp) -> None:
        """Store a timestamp on the service."""
        ...

    async def get_time(self) -> TimeStamp:
        """Read the stored timestamp back."""
        ...


class TimeClient:
    """httpx client for the timestamp service."""

    def __init__(
        self,
        api_url: str = "http://localhost:8080",
        wire_format: WireFormat = WireFormat.TEXT,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self._api_url = api_url
        self._wire_format = wire_format
        self._client = httpx.AsyncClient(
            base_url=api_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "TimeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def set_time(self, timestamp: TimeStamp) -> None:
        """POST /setTime in the configured wire format."""
        if self._wire_format is WireFormat.JSON:
            response = await self._client.post(
                "/setTime",
                content=encode_json(timestamp).model_dump_json(),
                headers={"Content-Type": "application/json"},
            )
        else:
            response = await self._client.post(
                "/setTime",
                content=encode_text(timestamp),
                headers={"Content-Type": "text/plain"},
            )

        if response.status_code != 200:
            raise ClientError(
                f"setTime failed with {response.status_code}: {response.text.strip()}",
                status_code=response.status_code,
            )

    async def get_time(self) -> TimeStamp:
        """GET /getTime and decode the body."""
        response = await self._client.get("/getTime")
        if response.status_code != 200:
            raise ClientError(
                f"getTime failed with {response.status_code}: {response.text.strip()}",
                status_code=response.status_code,
            )

        try:
            return decode(response.content, self._wire_format)
        except DecodeError as e:
            raise ClientError(f"Unreadable getTime body: {e}") from e

    async def run_roundtrip(self, timestamp: TimeStamp | None = None) -> bool:
        """Set a timestamp, read it back and log whether both agree to the second."""
        if timestamp is None:
            timestamp = TimeStamp.now()

        logger.info("Client: setting time to %s", timestamp)
        await self.set_time(timestamp)

        stored = await self.get_time()
        matched = stored.unix_seconds() == timestamp.unix_seconds()
        if matched:
            logger.info("Client: service returned %s", stored)
        else:
            logger.error("Client: expected %s, service returned %s", timestamp, stored)
        return matched
