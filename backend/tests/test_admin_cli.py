import asyncio
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.models import SQLModel
from app.models.sequence_counter import ORDER_COUNTER_KEY, SequenceCounter
from app.models.wages import DEFAULT_WAGE_KEY, DEFAULT_WAGE_RATES, WageConfiguration
from app.scripts import admin

# The commands run their own event loop, so these tests are synchronous and
# the engine is disposed after every command.


@pytest.fixture
def cli_engine(tmp_path, monkeypatch) -> AsyncEngine:
    """Test database the CLI commands are pointed at."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")

    async def create_schema() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        await engine.dispose()

    asyncio.run(create_schema())
    monkeypatch.setattr(admin, "async_session_maker", async_sessionmaker(engine, expire_on_commit=False))
    monkeypatch.setattr(admin, "dispose_engine", engine.dispose)
    return engine


@pytest.fixture
def run_in_db(cli_engine: AsyncEngine) -> Callable[..., Any]:
    """Run ``work(session)`` on a fresh loop and release the connections afterwards."""
    session_maker = async_sessionmaker(cli_engine, class_=AsyncSession, expire_on_commit=False)

    def run(work: Callable[[AsyncSession], Awaitable[Any]]) -> Any:
        async def runner() -> Any:
            try:
                async with session_maker() as session:
                    return await work(session)
            finally:
                await cli_engine.dispose()

        return asyncio.run(runner())

    return run


def test_next_order_id_is_read_only(run_in_db):
    runner = CliRunner()

    first = runner.invoke(admin.cli, ["next-order-id"])
    second = runner.invoke(admin.cli, ["next-order-id"])

    assert first.exit_code == 0, first.output
    assert "Next order id: ORD001" in first.output
    assert "Next order id: ORD001" in second.output
    assert "restarts" not in first.output
    assert run_in_db(lambda s: s.get(SequenceCounter, ORDER_COUNTER_KEY)) is None


def test_next_order_id_reports_new_month(run_in_db):
    async def seed(session):
        session.add(
            SequenceCounter(
                key=ORDER_COUNTER_KEY,
                period_label="2000-01",
                count=5,
                last_reset_at=datetime(2000, 1, 1, tzinfo=UTC),
            )
        )
        await session.commit()

    run_in_db(seed)

    result = CliRunner().invoke(admin.cli, ["next-order-id"])

    assert result.exit_code == 0, result.output
    assert "Next order id: ORD001" in result.output
    assert "Numbering restarts with the next order (new month)." in result.output
    counter = run_in_db(lambda s: s.get(SequenceCounter, ORDER_COUNTER_KEY))
    assert (counter.period_label, counter.count) == ("2000-01", 5)


def test_reset_wages_requires_confirmation(run_in_db):
    async def seed(session):
        session.add(WageConfiguration(key=DEFAULT_WAGE_KEY, pant=200.0))
        await session.commit()

    run_in_db(seed)

    declined = CliRunner().invoke(admin.cli, ["reset-wages"], input="n\n")

    assert declined.exit_code != 0
    config = run_in_db(lambda s: s.get(WageConfiguration, DEFAULT_WAGE_KEY))
    assert config.pant == 200.0


def test_reset_wages_restores_defaults(run_in_db):
    async def seed(session):
        session.add(WageConfiguration(key=DEFAULT_WAGE_KEY, pant=200.0, embroidery=40.0))
        await session.commit()

    run_in_db(seed)

    result = CliRunner().invoke(admin.cli, ["reset-wages"], input="y\n")

    assert result.exit_code == 0, result.output
    assert "pant: 110" in result.output
    config = run_in_db(lambda s: s.get(WageConfiguration, DEFAULT_WAGE_KEY))
    assert config.rates() == DEFAULT_WAGE_RATES
