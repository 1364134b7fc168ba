"""FastAPI application factory."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from triple_browser.core.protocols import TripleSource
from triple_browser.server.config import ServerConfig
from triple_browser.server.dependencies import SessionPool, load_source
from triple_browser.server.errors import EXCEPTION_HANDLERS
from triple_browser.server.rest.middleware import RequestLoggingMiddleware
from triple_browser.server.rest.routers import browser, focus, health, specialized

logger = logging.getLogger(__name__)


def create_app(config: ServerConfig, source: TripleSource | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Server configuration
        source: Triple source to serve; loaded from ``config.data_path`` when omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Startup
        app.state.config = config
        app.state.start_time = time.monotonic()
        app.state.source = source if source is not None else load_source(config)
        app.state.pool = SessionPool(config, app.state.source)
        logger.info("Triple Browser server started (result_limit=%d)", config.browser.result_limit)
        yield

        # Shutdown
        await app.state.pool.close_all()
        logger.info("Triple Browser server stopped")

    app = FastAPI(
        title="Triple Browser",
        description="Lazy tree exploration of read-only RDF graphs",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging
    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers
    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)

    # Routers
    prefix = "/api/v1"
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(browser.router, prefix=prefix, tags=["browser"])
    app.include_router(specialized.router, prefix=prefix, tags=["specialized"])
    app.include_router(focus.router, prefix=prefix, tags=["focus"])

    return app
