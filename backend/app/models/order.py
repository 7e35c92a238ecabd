"""Order database model."""

from datetime import date, datetime
from typing import Any

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.base import new_ulid, utc_now
from app.models.enums import OrderStatus
from app.models.types import MeasurementsJSON, ULIDType, label_enum

# Identifiers restart every month, so uniqueness is per period
ORDER_IDENTIFIER_CONSTRAINT = UniqueConstraint("period_label", "order_id", name="uq_orders_period_order_id")


class Order(SQLModel, table=True):
    """Tailoring order, either a civil (walk-in) order or a company employee order."""

    __tablename__ = "orders"
    __table_args__ = (ORDER_IDENTIFIER_CONSTRAINT,)

    # ULID stored as UUID
    id: str = Field(
        default_factory=new_ulid,
        max_length=26,
        sa_column=Column(ULIDType, primary_key=True),
    )

    # Display identifier: "ORD001", restarts every month
    order_id: str = Field(index=True, max_length=32)
    period_label: str = Field(index=True, max_length=7)

    # Company employee orders only
    company_id: int | None = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), index=True, nullable=True),
    )
    position: str | None = None

    name: str
    phone: str
    email: str = ""
    no_of_sets: int = 1
    shirt_amount: float
    pant_amount: float
    total_amount: float
    payment_method: str = "Cash"
    shirt: dict[str, Any] = Field(default_factory=dict, sa_column=Column(MeasurementsJSON, nullable=False))
    pant: dict[str, Any] = Field(default_factory=dict, sa_column=Column(MeasurementsJSON, nullable=False))
    status: OrderStatus = Field(
        default=OrderStatus.PENDING,
        sa_column=Column(label_enum(OrderStatus, "orderstatus"), nullable=False),
    )
    order_date: date
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))

    @property
    def is_civil(self) -> bool:
        return self.company_id is None


def order_total(*, shirt_amount: float, pant_amount: float, no_of_sets: int) -> float:
    """Price of an order: one shirt and one pant per set."""
    return round((shirt_amount + pant_amount) * no_of_sets, 2)
