"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and starts the task that clears the
rate-limit counters at every window boundary.  On shutdown the task is
cancelled.

Routers
-------
    /          — readiness banner (plain text)
    /extract   — fetch a URL and return its clean article
"""

from __future__ import annotations

import asyncio
import contextlib
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger

from backend.access import ApiKeyValidator, RateLimiter
from backend.config import settings
from backend.logging_config import configure_logging

from backend.api.routers import extract as extract_router

READY_BANNER = "Clean Article Extractor — ready"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start the rate-limit reset schedule; stop it on shutdown."""
    configure_logging()
    reset_task = asyncio.create_task(app.state.rate_limiter.run_reset_loop())
    logger.info("Clean Article Extractor started")
    try:
        yield
    finally:
        reset_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await reset_task


def create_app(
    rate_limiter: RateLimiter | None = None,
    key_validator: ApiKeyValidator | None = None,
) -> FastAPI:
    """Return a fully-configured FastAPI application instance.

    The access-control collaborators default to ones built from
    :data:`backend.config.settings`.
    """
    app = FastAPI(
        title="Clean Article Extractor API",
        description=(
            "Fetches a web page and returns its readable article: title, "
            "author and main body text, without navigation or boilerplate."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.rate_limiter = rate_limiter or RateLimiter(
        settings.rate_limit_requests, settings.rate_limit_window
    )
    app.state.key_validator = key_validator or ApiKeyValidator(
        settings.api_keys, allow_anonymous=settings.allow_anonymous
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def index() -> str:
        return READY_BANNER

    app.include_router(extract_router.router, prefix="/extract", tags=["extract"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
