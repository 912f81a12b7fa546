"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import skycast.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from skycast.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all cache tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    logger.info("Ensuring all cache tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Cache schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all cache tables. Cached data is disposable, nothing else is lost."""
    logger.warning("Dropping all cache tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Cache tables dropped")


async def reset_tables(engine: AsyncEngine) -> None:
    await drop_tables(engine)
    await create_tables(engine)
