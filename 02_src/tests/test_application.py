"""Tests for Application."""

import pytest

from timestore.app import Application
from timestore.errors import ApplicationNotStartedError
from timestore.models import TimeStamp
from timestore.store import StoreState, TimestampStore


class TestApplicationStart:
    """Tests for Application.start()."""

    async def test_start_runs_store(self):
        """Test that start leaves the store servicing requests."""
        app = Application()
        await app.start()

        assert app.started
        assert app.store.is_running()
        assert await app.store.get() == TimeStamp()
        await app.stop()

    async def test_start_uses_given_store(self):
        """Test that an explicit store instance is used as-is."""
        store = TimestampStore()
        app = Application(store)
        await app.start()

        assert app.store is store
        await app.stop()

    async def test_start_is_idempotent(self, application):
        """Test that a second start keeps the same store."""
        store = application.store
        await application.start()

        assert application.store is store


class TestApplicationStop:
    """Tests for Application.stop()."""

    async def test_stop_stops_store(self):
        """Test that stop tears the store down."""
        store = TimestampStore()
        app = Application(store)
        await app.start()
        await app.stop()

        assert store.state is StoreState.STOPPED
        assert not app.started

    async def test_stop_without_start(self):
        """Test that stopping an idle application does nothing."""
        app = Application()

        await app.stop()

        assert not app.started


class TestApplicationProperties:
    """Tests for Application properties."""

    async def test_store_property_raises_when_not_started(self):
        """Test that store property raises when not started."""
        app = Application()

        with pytest.raises(ApplicationNotStartedError, match="not started"):
            _ = app.store

    async def test_store_property_raises_after_stop(self, application):
        """Test that store property raises once stopped."""
        await application.stop()

        with pytest.raises(RuntimeError, match="not started"):
            _ = application.store
