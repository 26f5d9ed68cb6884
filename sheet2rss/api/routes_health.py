"""Health check endpoints for sheet2rss."""

from fastapi import APIRouter, Depends

from sheet2rss.api.dependencies import get_feed_cache
from sheet2rss.rss.cache import FeedCache

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check():
    """
    Health check endpoint.

    Returns:
        A simple status object indicating the process is serving requests
    """
    return {"ok": True}


@router.get("/readyz")
async def readiness_check(cache: FeedCache = Depends(get_feed_cache)):
    """
    Readiness check endpoint.

    Returns:
        Whether a feed has been published, and its digest if so
    """
    snapshot = cache.read()
    return {
        "ok": snapshot is not None,
        "digest": snapshot.digest if snapshot else None,
    }
