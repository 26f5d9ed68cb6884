"""RSS feed generation and caching for sheet2rss."""

from .builder import build_feed
from .cache import CachedFeed, FeedCache
from .models import ChannelInfo, FeedDocument, FeedEntry
from .refresher import FeedRefresher
from .serializer import XML_DECLARATION, parse_feed, serialize_feed

__all__ = [
    "CachedFeed",
    "ChannelInfo",
    "FeedCache",
    "FeedDocument",
    "FeedEntry",
    "FeedRefresher",
    "XML_DECLARATION",
    "build_feed",
    "parse_feed",
    "serialize_feed",
]
