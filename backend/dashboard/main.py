"""Invoice Dashboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup of the engine pool
    - Error handlers live in api/error_handlers.py and are registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dashboard.api.error_handlers import register_error_handlers
from dashboard.api.routes import auth, health, invoices
from dashboard.config import get_settings
from dashboard.infrastructure.database import init_db
from dashboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Invoice dashboard API started")
    yield
    await manager.dispose()
    logger.info("Invoice dashboard API shutting down")


app = FastAPI(
    title="Invoice Dashboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(invoices.router)
app.include_router(auth.router)

register_error_handlers(app)
