"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest_asyncio.fixture
async def store():
    """Create a started TimestampStore."""
    from timestore.store import TimestampStore

    st = TimestampStore()
    await st.start()
    yield st
    await st.stop()


@pytest.fixture
def idle_store():
    """Create a TimestampStore whose loop was never started."""
    from timestore.store import TimestampStore

    return TimestampStore()


@pytest.fixture
def failing_store():
    """Create a mock store whose get/set always fail."""
    from timestore.errors import NotInitializedError

    st = Mock()
    st.start = AsyncMock()
    st.stop = AsyncMock()
    st.get = AsyncMock(side_effect=NotInitializedError())
    st.set = AsyncMock(side_effect=NotInitializedError())
    return st


def _http_client(wire_format: str, store=None):
    from timestore.api import create_fastapi_app
    from timestore.app import Application

    app = create_fastapi_app(Application(store), wire_format=wire_format)
    return TestClient(app)


@pytest.fixture
def text_client():
    """TestClient for the decimal text wire format, lifespan running."""
    with _http_client("text") as client:
        yield client


@pytest.fixture
def json_client():
    """TestClient for the JSON wire format, lifespan running."""
    with _http_client("json") as client:
        yield client


@pytest.fixture
def failing_client(failing_store):
    """TestClient backed by a store that always fails."""
    with _http_client("text", failing_store) as client:
        yield client


@pytest_asyncio.fixture
async def application():
    """Create and start an Application."""
    from timestore.app import Application

    app = Application()
    await app.start()
    yield app
    await app.stop()


@pytest.fixture
def asgi_transport_factory(application):
    """Build in-process transports onto a started application."""
    from timestore.api import create_fastapi_app

    def factory(wire_format: str) -> httpx.ASGITransport:
        return httpx.ASGITransport(app=create_fastapi_app(application, wire_format=wire_format))

    return factory
