"""Run one set/get round trip against a running service."""

import asyncio
import sys
from pathlib import Path

import httpx
from dotenv import load_dotenv

from timestore.api.codecs import WireFormat
from timestore.config import load_settings
from timestore.logging_config import get_logger, setup_logging

from .client import ClientError, TimeClient

logger = get_logger(__name__)


async def run(api_url: str, wire_format: WireFormat) -> bool:
    """Run the round trip; False on mismatch or service error."""
    async with TimeClient(api_url=api_url, wire_format=wire_format) as client:
        try:
            return await client.run_roundtrip()
        except (ClientError, httpx.HTTPError) as e:
            logger.error("Client: round trip failed: %s", e)
            return False


def main() -> int:
    """Entry point for `python -m client`."""
    project_root = Path(__file__).resolve().parent.parent.parent
    load_dotenv(project_root / ".env")

    settings = load_settings()
    setup_logging(settings.log_level, log_file="")

    ok = asyncio.run(run(settings.api_url, WireFormat(settings.wire_format)))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
