"""sheet2rss - Main application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from sheet2rss.api import health_router, rss_router
from sheet2rss.config import Settings, get_settings
from sheet2rss.rss.cache import FeedCache
from sheet2rss.rss.models import ChannelInfo
from sheet2rss.rss.refresher import FeedRefresher, exit_process, keep_running
from sheet2rss.sheets.client import SheetClient


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        # Prevent MIME type sniffing of the feed
        response.headers["X-Content-Type-Options"] = "nosniff"

        # The feed is never meant to be framed
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the one-shot feed refresh and cancel it on shutdown."""
    refresher: FeedRefresher = app.state.refresher
    refresher.start()
    yield
    await refresher.stop()


def create_refresher(settings: Settings, cache: FeedCache) -> FeedRefresher:
    """Wire the sheet client and feed cache together from settings."""
    return FeedRefresher(
        cache=cache,
        client=SheetClient(settings.source_url, timeout=settings.fetch_timeout_seconds),
        max_entries=settings.max_entries,
        channel=ChannelInfo(
            title=settings.feed_title,
            link=settings.feed_link,
            description=settings.feed_description,
        ),
        on_failure=exit_process if settings.exit_on_refresh_failure else keep_running,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="sheet2rss",
        description="Serve a published spreadsheet as an RSS 2.0 feed",
        version="1.0.0",
        lifespan=lifespan,
    )

    cache = FeedCache()
    app.state.feed_cache = cache
    app.state.refresher = create_refresher(settings, cache)

    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(health_router)
    app.include_router(rss_router)

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    from sheet2rss.logging import setup_logging

    settings = get_settings()
    setup_logging(settings)

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
