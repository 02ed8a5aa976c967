"""
Test package.

Points the application at a throwaway SQLite database before anything
imports ``washbay``; settings and the engine are built at import time.
"""
import asyncio
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="washbay-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'washbay.db')}"
os.environ["ADMIN_EMAIL"] = "owner@example.com"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["TIMEZONE"] = "UTC"
os.environ["LOCALE"] = "en"

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]


async def reset_tables():
    """Drop and recreate every table, from inside a running loop."""
    import washbay.models  # noqa: F401
    from washbay.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


def reset_database():
    """Drop and recreate every table."""
    asyncio.run(reset_tables())
