"""Counter row backing the monthly order identifier sequence."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from app.models.base import utc_now

ORDER_COUNTER_KEY = "order_counter"


class SequenceCounter(SQLModel, table=True):
    """Number of identifiers issued in the current calendar month.

    One row per named sequence (``order_counter`` for orders). The row is
    created on first issuance and only changed by
    ``OrderIdentifierSequencer.issue_next`` through a row lock plus a
    compare-and-swap update, so it is safe with several API processes.
    """

    __tablename__ = "sequence_counters"

    key: str = Field(primary_key=True, max_length=64)
    period_label: str = Field(max_length=7)  # "YYYY-MM"
    count: int = Field(default=0)
    last_reset_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
