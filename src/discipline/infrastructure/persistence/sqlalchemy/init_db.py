"""Engine construction and schema management."""

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Model modules must be imported so their tables land in Base.metadata
import discipline.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import discipline_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from discipline.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str, **kwargs: Any) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    SQLite connections get ``PRAGMA foreign_keys=ON`` so that cascading
    deletes and foreign key violations behave as they do on PostgreSQL.
    """
    if not database_url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)

    engine = create_async_engine(database_url, echo=False, **kwargs)

    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return engine


async def create_tables(engine: AsyncEngine) -> None:
    """Create whatever tables are missing; existing tables are left alone."""
    logger.info("Ensuring tables exist: %s", ", ".join(Base.metadata.tables))

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Schema ready")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every table this project defines, data included."""
    logger.warning("Dropping tables: %s", ", ".join(Base.metadata.tables))

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Tables dropped")
