"""In-memory cache holding the most recently published feed."""

import asyncio
import hashlib
import threading
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CachedFeed(BaseModel):
    """An immutable snapshot of a rendered feed."""

    model_config = ConfigDict(frozen=True)

    content: bytes
    digest: str
    published_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_content(cls, content: bytes) -> "CachedFeed":
        """Create a snapshot, fingerprinting content with SHA-1."""
        return cls(content=content, digest=hashlib.sha1(content).hexdigest())


class FeedCache:
    """Holds the current CachedFeed behind a lock.

    The cache starts empty and becomes ready on the first publish; it never
    becomes empty again. Publishing replaces the whole snapshot, so readers
    see either the previous feed or the new one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: CachedFeed | None = None
        self._ready = asyncio.Event()

    @property
    def ready(self) -> bool:
        """True once a feed has been published."""
        with self._lock:
            return self._snapshot is not None

    def publish(self, snapshot: CachedFeed) -> None:
        """Replace the current snapshot and mark the cache ready."""
        with self._lock:
            self._snapshot = snapshot
        self._ready.set()

    def read(self) -> CachedFeed | None:
        """Return the current snapshot, or None before the first publish."""
        with self._lock:
            return self._snapshot

    async def wait_ready(self, timeout: float | None = None) -> bool:
        """Wait until a feed is published.

        Returns:
            True if the cache is ready, False if the timeout expired first
        """
        try:
            await asyncio.wait_for(self._ready.wait(), timeout)
        except asyncio.TimeoutError:
            return False
        return True
