"""Tests for application wiring."""

import os
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from main import create_app, create_refresher
from sheet2rss.config import Settings
from sheet2rss.rss.cache import FeedCache
from sheet2rss.rss.refresher import exit_process, keep_running

SAMPLE_CSV = (
    b"date,description,article,activity,branch,detail\n"
    b"1/2/2017,Bill signed,http://x/1,signing,executive,Some detail\n"
)


@pytest.fixture
def settings():
    """Settings that do not read the environment or .env."""
    with patch.dict(os.environ, {}, clear=True):
        return Settings(
            spreadsheet_key="sheet-123",
            max_entries=7,
            feed_title="Custom",
            _env_file=None,
        )


def test_create_refresher_uses_settings(settings):
    """Test that the refresher is wired from configuration."""
    refresher = create_refresher(settings, FeedCache())

    assert refresher.client.url == settings.source_url
    assert refresher.max_entries == 7
    assert refresher.channel.title == "Custom"
    assert refresher._on_failure is exit_process


def test_create_refresher_lenient_policy(settings):
    """Test that disabling exit-on-failure selects the lenient handler."""
    lenient = settings.model_copy(update={"exit_on_refresh_failure": False})

    refresher = create_refresher(lenient, FeedCache())

    assert refresher._on_failure is keep_running


@pytest.mark.asyncio
async def test_lifespan_refreshes_feed(settings):
    """Test that startup runs the refresh and /rss serves the result."""
    app = create_app(settings)
    refresher = app.state.refresher
    refresher.client.fetch_csv = AsyncMock(return_value=SAMPLE_CSV)

    async with app.router.lifespan_context(app):
        assert await app.state.feed_cache.wait_ready(timeout=1) is True

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/rss")

    assert response.status_code == 200
    assert b"<title>Bill signed</title>" in response.content
    assert response.headers["x-content-type-options"] == "nosniff"
