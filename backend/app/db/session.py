"""Database engine and session configuration."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Register all models with SQLAlchemy metadata
import app.models  # noqa: F401
from app.config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    """Pool settings for the configured backend.

    SQLite (used for local runs and tests) does not take pool sizing options.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_pre_ping": True,  # Verify connections before use
        "pool_recycle": 300,  # Recycle connections after 5 minutes
    }


engine = create_async_engine(
    settings.database_url,
    echo=False,  # SQL logging controlled via structlog configuration
    **engine_options(settings.database_url),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Dependency that provides an async database session."""
    async with async_session_maker() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose of the engine and release all connections.

    Should be called during application shutdown.
    """
    await engine.dispose()
