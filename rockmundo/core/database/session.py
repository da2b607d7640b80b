"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
used by the request handlers.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.logging_config import get_logger
from rockmundo.server.core.config import settings

from .utils import create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def check_connection() -> None:
    """Run a trivial query so startup fails loudly on a bad DATABASE_URL."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection verified")
