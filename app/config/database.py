# =============================================
# app/config/database.py
# =============================================
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool
from sqlalchemy import MetaData, event, text
from typing import AsyncGenerator
import logging
from app.config.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# SQLite connections are bound to the event loop that opened them
if settings.is_sqlite:
    engine_options = {"poolclass": NullPool}
else:
    engine_options = {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_size": 10,
        "max_overflow": 20,
    }

# Async Engine
engine = create_async_engine(
    settings.get_database_url(),
    echo=settings.DEBUG,
    **engine_options
)

if settings.is_sqlite:
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# Session Factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

metadata = MetaData()

class Base(DeclarativeBase):
    metadata = metadata

# =============================================
# DATABASE FUNCTIONS
# =============================================

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for the duration of a request"""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()

async def create_tables():
    """
    Create any missing tables.

    Production schemas are managed by Alembic; this only fills the gaps
    for local development and tests.
    """
    # Register every model on Base.metadata
    import app.database.models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables verified")
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise

async def drop_all_tables():
    """Drop every table (tests only)"""
    import app.database.models  # noqa: F401

    try:
        logger.warning("Dropping all tables")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    except Exception as e:
        logger.error(f"Error dropping tables: {e}")
        raise

async def check_database_health() -> bool:
    """Check if database is accessible"""
    try:
        async with async_session() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False

async def close_database():
    """Close database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
