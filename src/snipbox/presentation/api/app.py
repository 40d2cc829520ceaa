"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
the session middleware, and exception handlers.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from snipbox.infrastructure.persistence.sqlalchemy.init_db import create_tables
from snipbox.presentation.api.context import AppContext
from snipbox.presentation.api.exception_handlers import setup_exception_handlers
from snipbox.presentation.api.routers import (
    account_router,
    snippets_router,
    users_router,
)
from snipbox.presentation.api.session_middleware import SessionMiddleware
from snipbox_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the snipbox application with:
    - Console output with timestamps and module names
    - Configurable log level for snipbox modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("snipbox").setLevel(log_level)
    logging.getLogger("snipbox_identity").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    context: AppContext = app.state.context

    logger.info("Starting %s v%s...", context.settings.app_name, API_VERSION)
    await _init_database_schema(context.engine)
    yield

    logger.info("Shutting down %s...", context.settings.app_name)
    await context.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_app(
    settings: Settings | None = None,
    context: AppContext | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    context
        Optional pre-built application context (tests inject clocks and
        stores this way). Built from ``settings`` when omitted.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = context.settings if context is not None else get_settings()
    if context is None:
        context = AppContext.from_settings(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Share short-lived text snippets.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_middleware(
        SessionMiddleware,
        session_manager=context.session_manager,
        settings=settings,
    )

    setup_exception_handlers(app)

    app.include_router(snippets_router, tags=["Snippets"])
    app.include_router(users_router, tags=["Users"])
    app.include_router(account_router, tags=["Account"])

    @app.get("/ping", response_class=PlainTextResponse, tags=["Health"])
    async def ping() -> str:
        """Liveness check. No session, no database."""
        return "OK"

    return app
