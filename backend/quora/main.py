"""Quora API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map QuoraError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - run() is the only place the server is started; host/port come from settings

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quora.api.error_handlers import register_error_handlers
from quora.api.routes import health, question
from quora.config import get_settings
from quora.infrastructure import database
from quora.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Quora API started")
    yield
    manager = database.get_db_manager()
    if manager:
        await manager.dispose()
    logger.info("Quora API shutting down")


app = FastAPI(
    title="Quora API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(question.router)

register_error_handlers(app)


def run() -> None:
    """`quora-api` console script: serve this app with uvicorn."""
    uvicorn.run(
        "quora.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )
