"""Ice Breakun API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IceBreakunError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - The database manager is opened in the lifespan, stored on app.state,
      and disposed on shutdown

Design Decisions:
    - create_app() factory: tests build an app around their own database manager
    - Lifespan over @app.on_event
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, messages, users
from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_auto_create:
            await db_manager.create_schema()
        if settings.seed_sample_users:
            await db_manager.seed_sample_users()
        app.state.db_manager = db_manager
        logger.info("Ice Breakun API started")
        yield
        logger.info("Ice Breakun API shutting down")
        await db_manager.close()
        app.state.db_manager = None

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Ice Breakun API", version="1.0.0",
        lifespan=_build_lifespan(settings),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(messages.router)

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
