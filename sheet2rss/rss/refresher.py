"""Fetch-and-publish task that fills the feed cache."""

import asyncio
import logging
import os
from typing import Callable

from sheet2rss.sheets.client import SheetClient

from .builder import build_feed
from .cache import CachedFeed, FeedCache
from .models import ChannelInfo
from .serializer import serialize_feed

logger = logging.getLogger(__name__)

FailureHandler = Callable[[BaseException], None]


def exit_process(exc: BaseException) -> None:
    """Terminate the process immediately with exit status 1."""
    for handler in logging.getLogger().handlers:
        handler.flush()
    os._exit(1)


def keep_running(exc: BaseException) -> None:
    """Leave the process up; /rss keeps serving the last good feed, if any."""
    logger.warning("Continuing without a refreshed feed")


class FeedRefresher:
    """Runs the fetch, build, serialize and publish pipeline."""

    def __init__(
        self,
        cache: FeedCache,
        client: SheetClient,
        max_entries: int,
        channel: ChannelInfo | None = None,
        on_failure: FailureHandler = exit_process,
    ):
        self.cache = cache
        self.client = client
        self.max_entries = max_entries
        self.channel = channel or ChannelInfo()
        self._on_failure = on_failure
        self._task: asyncio.Task | None = None

    async def refresh(self) -> CachedFeed:
        """
        Fetch the spreadsheet and publish a freshly rendered feed.

        Returns:
            The snapshot that was published

        Raises:
            FetchError: If the spreadsheet could not be downloaded
            ParseError: If the CSV export is malformed
            EmptyInput: If the export has no data rows
            SerializationError: If the feed could not be rendered
        """
        logger.info(f"Refreshing feed from {self.client.url}")
        raw = await self.client.fetch_csv()
        document = build_feed(raw, self.max_entries, self.channel)
        snapshot = CachedFeed.from_content(serialize_feed(document))
        self.cache.publish(snapshot)
        logger.info(
            f"Published feed with {len(document.entries)} entries "
            f"({len(snapshot.content)} bytes, sha1 {snapshot.digest})"
        )
        return snapshot

    async def run_once(self) -> None:
        """Refresh once, handing any failure to the failure handler."""
        try:
            await self.refresh()
        except Exception as e:
            logger.critical(f"Feed refresh failed: {e}", exc_info=True)
            self._on_failure(e)

    def start(self) -> asyncio.Task:
        """Schedule a single background refresh on the running loop."""
        if self._task is None:
            self._task = asyncio.create_task(self.run_once(), name="feed-refresh")
        return self._task

    async def stop(self) -> None:
        """Cancel the background refresh if it is still running."""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
