"""Monthly order identifier sequence.

Order identifiers look like ``ORD001`` and restart at 1 every calendar month
(shop timezone). The counter lives in one ``sequence_counters`` row; it is
created on first use and only changed by :meth:`OrderIdentifierSequencer.issue_next`.

Issuing commits the counter on its own. An identifier handed out for an
order that is then never stored stays consumed: the sequence may have gaps,
it never repeats a value within a month. Deleting orders does not give
identifiers back either.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

import structlog
from sqlalchemy import insert, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt, wait_random

from app.config import settings
from app.models.base import utc_now
from app.models.sequence_counter import ORDER_COUNTER_KEY, SequenceCounter
from app.services.exceptions import StorageUnavailable
from app.services.orders.exceptions import CounterConflict
from app.utils.datetime_utils import to_shop_timezone

logger = structlog.get_logger(__name__)

# Errors meaning the database could not be reached or did not answer
STORAGE_ERRORS = (DBAPIError, PoolTimeoutError, OSError, TimeoutError)


@dataclass(frozen=True, order=True)
class Period:
    """Calendar month; ordered chronologically."""

    year: int
    month: int

    @classmethod
    def parse(cls, label: str) -> "Period":
        """Parse a ``YYYY-MM`` label."""
        year, _, month = label.partition("-")
        return cls(int(year), int(month))

    @classmethod
    def containing(cls, moment: datetime) -> "Period":
        """Month of ``moment`` as seen in the shop."""
        local = to_shop_timezone(moment)
        assert local is not None
        return cls(local.year, local.month)

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class CounterState:
    """Stored counter values as last read."""

    period_label: str
    count: int


@dataclass(frozen=True)
class SequencePlan:
    """Counter values the next issuance will write."""

    period_label: str
    count: int
    period_will_reset: bool


@dataclass(frozen=True)
class OrderIdentifier:
    value: str
    period_label: str
    count: int
    issued_at: datetime

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SequencePreview:
    identifier: str
    period_will_reset: bool
    period_label: str


def plan_next(state: CounterState | None, current: Period) -> SequencePlan:
    """Decide what the next issued count is.

    Used by both the read-only preview and the issuing path, so the preview
    always matches what issuing would do at the same moment.

    - No counter yet: start the current month at 1.
    - Stored month is older than the current one: restart at 1.
    - Otherwise continue the stored month. This includes a clock that went
      backwards across a month boundary: the count is never rolled back.
    """
    if state is None:
        return SequencePlan(period_label=current.label, count=1, period_will_reset=False)

    stored = Period.parse(state.period_label)
    if current > stored:
        return SequencePlan(period_label=current.label, count=1, period_will_reset=True)
    return SequencePlan(period_label=stored.label, count=state.count + 1, period_will_reset=False)


def format_identifier(count: int, *, prefix: str | None = None, width: int | None = None) -> str:
    """Render a count as a display identifier: 7 -> "ORD007", 1000 -> "ORD1000"."""
    prefix = settings.order_id_prefix if prefix is None else prefix
    width = settings.order_id_width if width is None else width
    return f"{prefix}{count:0{width}d}"


class SequenceCounterStore:
    """Reads and conditionally writes one ``sequence_counters`` row."""

    def __init__(self, session: AsyncSession, key: str = ORDER_COUNTER_KEY):
        self.session = session
        self.key = key

    async def load(self, *, for_update: bool = False) -> CounterState | None:
        """Read the counter; ``for_update`` holds a row lock until commit (PostgreSQL)."""
        statement = (
            select(SequenceCounter)
            .where(SequenceCounter.key == self.key)
            .execution_options(populate_existing=True)
        )
        if for_update:
            statement = statement.with_for_update()
        result = await self.session.execute(statement)
        counter = result.scalars().first()
        if counter is None:
            return None
        return CounterState(period_label=counter.period_label, count=counter.count)

    async def create_if_missing(self, period_label: str, now: datetime) -> None:
        """Insert a zero counter unless another caller already created it."""
        values = {"key": self.key, "period_label": period_label, "count": 0, "last_reset_at": now}
        dialect_name = self.session.get_bind().dialect.name

        if dialect_name == "postgresql":
            await self.session.execute(
                postgresql.insert(SequenceCounter).values(**values).on_conflict_do_nothing(index_elements=["key"])
            )
        elif dialect_name == "sqlite":
            await self.session.execute(
                sqlite.insert(SequenceCounter).values(**values).on_conflict_do_nothing(index_elements=["key"])
            )
        else:
            try:
                await self.session.execute(insert(SequenceCounter).values(**values))
            except IntegrityError:
                await self.session.rollback()

    async def compare_and_set(self, expected: CounterState, plan: SequencePlan, now: datetime) -> bool:
        """Write ``plan`` only if the row still holds ``expected``. Returns True on success."""
        values: dict[str, object] = {"period_label": plan.period_label, "count": plan.count}
        if plan.period_will_reset:
            values["last_reset_at"] = now

        statement = (
            update(SequenceCounter)
            .where(
                SequenceCounter.key == self.key,  # type: ignore[arg-type]
                SequenceCounter.period_label == expected.period_label,  # type: ignore[arg-type]
                SequenceCounter.count == expected.count,  # type: ignore[arg-type]
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        return result.rowcount == 1  # type: ignore[attr-defined,no-any-return]


class OrderIdentifierSequencer:
    """Hands out monthly order identifiers, safe across concurrent requests and processes.

    Usage:
        sequencer = OrderIdentifierSequencer(session)
        preview = await sequencer.peek_next()   # no side effects
        identifier = await sequencer.issue_next()  # committed, never reissued

    The session is committed by ``issue_next``; do not hold unrelated pending
    changes in it when calling.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        clock: Callable[[], datetime] = utc_now,
        key: str = ORDER_COUNTER_KEY,
        max_retries: int | None = None,
    ):
        self.session = session
        self.clock = clock
        self.store = SequenceCounterStore(session, key)
        self.max_retries = settings.order_sequence_max_retries if max_retries is None else max_retries

    async def peek_next(self) -> SequencePreview:
        """Report the identifier ``issue_next`` would return now, without consuming it."""
        current = Period.containing(self.clock())
        try:
            state = await self.store.load()
        except STORAGE_ERRORS as e:
            logger.error("Order counter unavailable for preview", error=str(e))
            raise StorageUnavailable("Order counter storage is unavailable") from e

        plan = plan_next(state, current)
        return SequencePreview(
            identifier=format_identifier(plan.count),
            period_will_reset=plan.period_will_reset,
            period_label=plan.period_label,
        )

    async def issue_next(self) -> OrderIdentifier:
        """Consume and return the next identifier of the current month.

        The counter row is locked (``SELECT ... FOR UPDATE``) and then updated
        only if it still holds the values that were read. On backends without
        row locks a concurrent writer makes the update miss and the attempt is
        repeated with fresh values.

        Raises:
            StorageUnavailable: database unreachable, or the update kept
                conflicting for ``max_retries`` attempts.
        """
        now = self.clock()
        current = Period.containing(now)
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(CounterConflict),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_random(min=0, max=0.01),
            before_sleep=self._log_conflict,
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    state, plan = await self._advance(current, now)
        except CounterConflict as e:
            await self.session.rollback()
            raise StorageUnavailable(f"Could not issue an order identifier after {self.max_retries} attempts") from e
        except STORAGE_ERRORS as e:
            logger.error("Order counter unavailable", error=str(e))
            raise StorageUnavailable("Order counter storage is unavailable") from e

        if plan.period_will_reset:
            logger.info(
                "Order counter rolled over to new month",
                previous_period=state.period_label,
                period=plan.period_label,
            )

        identifier = OrderIdentifier(
            value=format_identifier(plan.count),
            period_label=plan.period_label,
            count=plan.count,
            issued_at=now,
        )
        logger.info("Issued order identifier", order_id=identifier.value, period=identifier.period_label)
        return identifier

    async def _advance(self, current: Period, now: datetime) -> tuple[CounterState, SequencePlan]:
        """One read-decide-write round; commits on success, raises CounterConflict otherwise."""
        state = await self.store.load(for_update=True)
        if state is None:
            await self.store.create_if_missing(current.label, now)
            state = await self.store.load(for_update=True)
            if state is None:
                raise StorageUnavailable("Order counter row could not be created")

        plan = plan_next(state, current)
        if not await self.store.compare_and_set(state, plan, now):
            await self.session.rollback()
            raise CounterConflict(f"{self.store.key} changed from {state.period_label}/{state.count}")

        await self.session.commit()
        return state, plan

    def _log_conflict(self, retry_state: RetryCallState) -> None:
        logger.warning(
            "Order counter changed concurrently, retrying",
            attempt=retry_state.attempt_number,
            max_retries=self.max_retries,
        )
