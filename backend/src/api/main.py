"""FastAPI application entry point."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.error_handlers import register_error_handlers
from api.routers import bookmarks, health
from core.config import Settings, get_settings
from db.session import build_engine, build_session_factory, create_tables
from services.memory_store import InMemoryBookmarkStore


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    if settings.storage_backend == "sql" and settings.create_tables:
        await create_tables(app.state.engine)
        logger.info("Database tables created")
    logger.info(
        "Bookmarks API started",
        extra={"storage_backend": settings.storage_backend, "api_prefix": settings.api_prefix},
    )
    yield
    await app.state.engine.dispose()
    logger.info("Bookmarks API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings (defaults to the environment)."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Bookmarks API",
        description="Store and retrieve bookmarks with a title, URL, rating and description.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)
    if settings.storage_backend == "memory":
        app.state.bookmark_store = InMemoryBookmarkStore()

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(bookmarks.router, prefix=settings.api_prefix)
    return app


app = create_app()
