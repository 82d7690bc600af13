"""Portfolio API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (default /api)
    - Global error handlers map PortfolioError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The database manager is created in the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event
    - create_app() builds a fresh app; the module-level `app` is what uvicorn serves
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio.api.error_handlers import register_error_handlers
from portfolio.api.routes import (
    blog, certifications, contact, education, experience, health, projects,
    services,
)
from portfolio.config import Settings, get_settings
from portfolio.infrastructure.database import DatabaseSessionManager
from portfolio.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

ROUTERS = (
    health.router,
    projects.router,
    blog.router,
    services.router,
    contact.router,
    experience.router,
    education.router,
    certifications.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("Portfolio API started")
    yield
    logger.info("Portfolio API shutting down")
    await app.state.db.dispose()
    app.state.db = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Portfolio API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in ROUTERS:
        app.include_router(router, prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app()
