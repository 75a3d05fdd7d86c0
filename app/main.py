"""Roster API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers honor the configured error mode (legacy / typed)
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory: tests build apps in either error mode;
      module-level `app` is the uvicorn target (uvicorn app.main:app)
    - Settings stored on app.state so handlers read the mode of their own app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import attendees, events, health
from app.config import Settings, get_settings
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info(f"Roster API started (error mode: {settings.error_mode.value})")
    yield
    logger.info("Roster API shutting down")
    await manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ASGI application for the given settings."""
    settings = settings or get_settings()
    application = FastAPI(
        title="Roster API", version="1.0.0", lifespan=lifespan,
    )
    application.state.settings = settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    application.include_router(health.router)
    application.include_router(events.router)
    application.include_router(attendees.router)

    register_error_handlers(application)
    return application


app = create_app()
