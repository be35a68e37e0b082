"""
User registry HTTP application.

The lifespan owns the single connection pool: it is opened and migrated
before the first request and closed when the server stops. Routes reach
it through app.state (see src.api.dependencies).
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

tags_metadata = [
    {
        "name": "v1",
        "description": "Create, look up, list and remove registered users",
    },
]


def configure_logging(settings: Settings) -> None:
    """Root logging at the configured level; a no-op if handlers already exist."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def open_pool(settings: Settings) -> ConnectionPool:
    """Open the pool sized from settings and bring the schema up to date."""
    logger.info(
        "Opening connection pool (min=%d, max=%d)",
        settings.pool_min_size,
        settings.pool_max_size,
    )
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=True,
    )
    applied = run_migrations(pool)
    logger.info("Schema ready, %d migration file(s) applied: %s", len(applied), ", ".join(applied))
    return pool


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings)
    logger.info("user-registry starting with log level %s", settings.log_level.upper())

    app.state.pool = open_pool(settings)
    try:
        yield
    finally:
        app.state.pool.close()
        logger.info("user-registry stopped, connection pool closed")


app = FastAPI(
    title="user-registry",
    description="Hexagonal user registration with validated email and national id",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """Liveness plus a round trip to the database; errors surface as 500."""
    with request.app.state.pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}
