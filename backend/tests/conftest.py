import os
from collections.abc import AsyncIterator, Callable
from datetime import UTC, datetime

# Tests run against SQLite; must be set before app.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.db import get_session
from app.main import app
from app.models import SQLModel


@pytest.fixture
async def engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    """Fresh SQLite database file per test (a file, so several connections share it)."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncClient]:
    """HTTP client for the API, bound to the test database."""

    async def override_get_session() -> AsyncIterator[AsyncSession]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test/api/v1") as client:
        yield client
    app.dependency_overrides.clear()


def fixed_clock(*args: int) -> Callable[[], datetime]:
    """Clock frozen at the given UTC date/time, e.g. fixed_clock(2025, 1, 15, 12)."""
    moment = datetime(*args, tzinfo=UTC)
    return lambda: moment


@pytest.fixture
async def make_order(client: AsyncClient):
    """Create an order through the API and return its JSON."""

    async def _make(**fields: object) -> dict:
        payload = {"name": "Ravi Kumar", "phone": "9876543210", **fields}
        response = await client.post("/orders", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
