"""API routers for sheet2rss."""

from sheet2rss.api.routes_health import router as health_router
from sheet2rss.api.routes_rss import router as rss_router

__all__ = [
    "health_router",
    "rss_router",
]
