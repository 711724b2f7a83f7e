"""Engine and per-request sessions for the clinic database."""

import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from petclinic.config import get_settings

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # Per connection; without it SQLite ignores ON DELETE CASCADE / SET NULL
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False, **kwargs: Any) -> AsyncEngine:
    """Create the async engine for ``url``.

    Plain ``sqlite:///`` and ``postgresql://`` URLs are switched to their
    async drivers. On SQLite, foreign keys are enforced so that removing an
    owner, pet or vet cascades to the clinic's visits the same way it does on
    PostgreSQL.
    """
    new_engine = create_async_engine(_get_async_url(url), echo=echo, **kwargs)
    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


settings = get_settings()

engine = build_engine(settings.database_url, echo=settings.sql_echo)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — one session per request, committed when the handler succeeds."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            logger.warning("Rolling back request session after an error", exc_info=True)
            await session.rollback()
            raise
