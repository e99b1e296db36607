"""Database initialization and dependency injection."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

import fastapi
import structlog
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from components.core import config
from components.core.database import DatabaseManager
from components.core.seed import seed_demo_data
# Import all models to ensure they're registered
import components.income.models
import components.recurring.models
import components.expense.models
import components.debt.models

settings = config.get_settings()
logger = structlog.get_logger(__name__)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    db_manager: DatabaseManager = request.app.state.db_manager
    async with db_manager.get_db() as session:
        yield session


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI) -> AsyncIterator[None]:
    """Prepare the schema on startup and release connections on shutdown."""
    db_manager: DatabaseManager = app.state.db_manager
    if settings.CREATE_TABLES:
        await db_manager.create_tables()
        logger.info("database_tables_ready")
    if settings.SEED_DEMO_DATA:
        async with db_manager.get_db() as session:
            await seed_demo_data(session)
    yield
    await db_manager.dispose()


def init_db(app: fastapi.FastAPI, db_manager: DatabaseManager | None = None) -> None:
    """Initialize database connection."""
    app.state.db_manager = db_manager or DatabaseManager()
