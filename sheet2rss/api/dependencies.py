"""FastAPI dependencies for API routers."""

from fastapi import Request

from sheet2rss.rss.cache import FeedCache


def get_feed_cache(request: Request) -> FeedCache:
    """Dependency for FastAPI routes to get the application's feed cache.

    The cache is created once per application and stored on ``app.state``.
    """
    return request.app.state.feed_cache
