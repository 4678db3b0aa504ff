"""Engine construction and the connect primitive used by the connection cache."""

from typing import Any

import structlog
from sqlalchemy import make_url, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devevent.config import Settings
from devevent.exceptions import DatabaseConnectionException
from devevent.models import Base

logger = structlog.get_logger(__name__)


class Database:
    """Live database handle: an engine plus its session factory."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.sessionmaker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def session(self) -> AsyncSession:
        return self.sessionmaker()

    async def dispose(self) -> None:
        await self.engine.dispose()


def engine_options(settings: Settings) -> dict[str, Any]:
    """Build create_async_engine keyword arguments from settings."""
    options: dict[str, Any] = {
        "echo": settings.db_echo,
        # Stale pooled connections are revalidated on checkout
        "pool_pre_ping": True,
    }
    if make_url(settings.database_url).get_backend_name() != "sqlite":
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


async def open_database(settings: Settings) -> Database:
    """Create the engine, verify it with a round trip and create tables.

    Raises:
        DatabaseConnectionException: The database is unreachable or rejected us
    """
    engine: AsyncEngine | None = None
    try:
        engine = create_async_engine(settings.database_url, **engine_options(settings))
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        logger.error("database_connect_failed", error=str(e))
        if engine is not None:
            await engine.dispose()
        raise DatabaseConnectionException("Failed to connect to database", details=str(e)) from e

    logger.info("database_connected", backend=engine.url.get_backend_name())
    return Database(engine)
