"""
Database engine, session factory and declarative base.
"""
import logging
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from washbay.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

Base = declarative_base()

_is_sqlite = settings.database_url.startswith("sqlite")

# SQLite connections are opened per session; server databases get a pool.
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **({"poolclass": NullPool} if _is_sqlite else {"pool_pre_ping": True}),
)

if _is_sqlite:
    # SQLite ignores REFERENCES clauses unless asked per connection.
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create all tables."""
    # Import models so they register on Base.metadata
    import washbay.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields one session per request."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
