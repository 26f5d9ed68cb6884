"""RSS feed endpoint for sheet2rss."""

from fastapi import APIRouter, Depends, Response

from sheet2rss.api.dependencies import get_feed_cache
from sheet2rss.rss.cache import FeedCache
from sheet2rss.rss.serializer import XML_DECLARATION

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"

router = APIRouter(tags=["rss"])


@router.get("/rss")
async def get_rss(cache: FeedCache = Depends(get_feed_cache)):
    """
    Serve the cached RSS feed.

    Only GET is routed here, so other methods get 405 from the router.

    Returns:
        200 with the feed document once a refresh has completed,
        404 with an empty body before that
    """
    snapshot = cache.read()
    if snapshot is None:
        return Response(status_code=404)

    return Response(
        content=XML_DECLARATION + snapshot.content, media_type=RSS_MEDIA_TYPE
    )
