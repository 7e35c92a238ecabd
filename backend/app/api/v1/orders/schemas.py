"""API schemas for orders endpoints."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_serializer

from app.models.enums import OrderStatus
from app.models.order import Order
from app.services.orders.sequencer import SequencePreview
from app.utils.datetime_utils import to_shop_timezone

# =============================================================================
# Response Schemas
# =============================================================================


class OrderResponse(BaseModel):
    """Order response schema."""

    id: str
    order_id: str
    period_label: str
    company_id: int | None
    position: str | None
    name: str
    phone: str
    email: str
    no_of_sets: int
    shirt_amount: float
    pant_amount: float
    total_amount: float
    payment_method: str
    shirt: dict[str, Any]
    pant: dict[str, Any]
    status: OrderStatus
    order_date: date
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to shop timezone."""
        localized_dt = to_shop_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, order: Order) -> "OrderResponse":
        """Create response from Order model."""
        return cls.model_validate(order, from_attributes=True)


class NextOrderIdResponse(BaseModel):
    """Identifier the next created order would get (not reserved)."""

    next_id: str
    month_reset: bool
    current_month: str

    @classmethod
    def from_preview(cls, preview: SequencePreview) -> "NextOrderIdResponse":
        return cls(
            next_id=preview.identifier,
            month_reset=preview.period_will_reset,
            current_month=preview.period_label,
        )


class StatusResponse(BaseModel):
    """Generic status response."""

    status: str
    message: str


# =============================================================================
# Request Schemas
# =============================================================================


class OrderCreateRequest(BaseModel):
    """Request body for creating an order. The order identifier is assigned by the server."""

    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: str = ""
    no_of_sets: int = Field(default=1, ge=1)
    shirt_amount: float | None = Field(default=None, ge=0)
    pant_amount: float | None = Field(default=None, ge=0)
    payment_method: str = "Cash"
    shirt: dict[str, Any] = Field(default_factory=dict)
    pant: dict[str, Any] = Field(default_factory=dict)
    company_id: int | None = None
    position: str | None = None


class OrderUpdateRequest(BaseModel):
    """Partial order update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    phone: str | None = Field(default=None, min_length=1)
    email: str | None = None
    no_of_sets: int | None = Field(default=None, ge=1)
    shirt_amount: float | None = Field(default=None, ge=0)
    pant_amount: float | None = Field(default=None, ge=0)
    payment_method: str | None = None
    shirt: dict[str, Any] | None = None
    pant: dict[str, Any] | None = None
    status: OrderStatus | None = None
    position: str | None = None


class OrderStatusUpdateRequest(BaseModel):
    status: OrderStatus
