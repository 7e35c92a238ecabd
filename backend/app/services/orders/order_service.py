"""Order management service.

This service handles business logic for civil and company employee orders.
Order identifiers come from :class:`OrderIdentifierSequencer`; an order is
never written without one.
"""

from typing import Any

import structlog
from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select
from ulid import ULID

from app.config import settings
from app.models.base import utc_now
from app.models.company import Company
from app.models.enums import OrderStatus
from app.models.order import Order, order_total
from app.services.companies.exceptions import CompanyNotFound
from app.services.orders.exceptions import OrderNotFound
from app.services.orders.sequencer import OrderIdentifierSequencer, SequencePreview
from app.utils.datetime_utils import shop_date

logger = structlog.get_logger(__name__)

# Fields that may be changed after the order is created
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "phone",
        "email",
        "no_of_sets",
        "shirt_amount",
        "pant_amount",
        "payment_method",
        "shirt",
        "pant",
        "status",
        "position",
    }
)
PRICING_FIELDS = frozenset({"no_of_sets", "shirt_amount", "pant_amount"})


class OrderService:
    """Service for order management operations."""

    def __init__(self, session: AsyncSession, sequencer: OrderIdentifierSequencer | None = None):
        self.session = session
        self.sequencer = sequencer or OrderIdentifierSequencer(session)

    async def list_orders(self, *, civil_only: bool = False) -> list[Order]:
        """List orders, newest first. ``civil_only`` leaves out company orders."""
        statement = select(Order).order_by(col(Order.created_at).desc())
        if civil_only:
            statement = statement.where(col(Order.company_id).is_(None))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_company_orders(self, company_id: int) -> list[Order]:
        """List employee orders of a company, newest first."""
        statement = select(Order).where(Order.company_id == company_id).order_by(col(Order.created_at).desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_order(self, order_id: str) -> Order:
        """Get order by its ULID primary key."""
        try:
            ULID.from_str(order_id)
        except ValueError:
            raise OrderNotFound()

        order = await self.session.get(Order, order_id)
        if not order:
            raise OrderNotFound()
        return order

    async def preview_next_identifier(self) -> SequencePreview:
        """Identifier the next created order would get. Consumes nothing."""
        return await self.sequencer.peek_next()

    async def create_order(
        self,
        *,
        name: str,
        phone: str,
        email: str = "",
        no_of_sets: int = 1,
        shirt_amount: float | None = None,
        pant_amount: float | None = None,
        payment_method: str = "Cash",
        shirt: dict[str, Any] | None = None,
        pant: dict[str, Any] | None = None,
        company_id: int | None = None,
        position: str | None = None,
    ) -> Order:
        """Issue an identifier and store a new order under it.

        Raises StorageUnavailable (from the sequencer) before anything is
        written if no identifier can be issued. If storing the order fails
        afterwards, the identifier stays consumed.

        ``order_date`` is the shop-local date of issuance while ``period_label``
        is the counter month; they differ if the clock went back a month.
        """
        if company_id is not None and await self.session.get(Company, company_id) is None:
            raise CompanyNotFound()

        identifier = await self.sequencer.issue_next()

        shirt_amount = settings.default_shirt_amount if shirt_amount is None else shirt_amount
        pant_amount = settings.default_pant_amount if pant_amount is None else pant_amount
        now = utc_now()

        order = Order(
            order_id=identifier.value,
            period_label=identifier.period_label,
            company_id=company_id,
            position=position,
            name=name,
            phone=phone,
            email=email,
            no_of_sets=no_of_sets,
            shirt_amount=shirt_amount,
            pant_amount=pant_amount,
            total_amount=order_total(shirt_amount=shirt_amount, pant_amount=pant_amount, no_of_sets=no_of_sets),
            payment_method=payment_method,
            shirt=shirt or {},
            pant=pant or {},
            status=OrderStatus.PENDING,
            order_date=shop_date(identifier.issued_at),
            created_at=now,
            updated_at=now,
        )
        self.session.add(order)

        if company_id is not None:
            await self.session.execute(
                update(Company)
                .where(Company.id == company_id)  # type: ignore[arg-type]
                .values(total_orders=Company.total_orders + 1, updated_at=now)
                .execution_options(synchronize_session=False)
            )

        await self.session.commit()

        logger.info(
            "Created order",
            order_pk=order.id,
            order_id=order.order_id,
            period=order.period_label,
            company_id=company_id,
        )
        return order

    async def update_status(self, order_id: str, status: OrderStatus) -> Order:
        order = await self.get_order(order_id)
        previous = order.status
        order.status = status
        order.updated_at = utc_now()
        await self.session.commit()

        logger.info("Order status changed", order_id=order.order_id, previous=previous, status=status)
        return order

    async def update_order(self, order_id: str, changes: dict[str, Any]) -> Order:
        """Apply a partial update. The identifier and company are not editable."""
        order = await self.get_order(order_id)

        for field, value in changes.items():
            if field not in EDITABLE_FIELDS:
                continue
            # Only position may be cleared
            if value is None and field != "position":
                continue
            setattr(order, field, value)

        if PRICING_FIELDS & changes.keys():
            order.total_amount = order_total(
                shirt_amount=order.shirt_amount,
                pant_amount=order.pant_amount,
                no_of_sets=order.no_of_sets,
            )

        order.updated_at = utc_now()
        await self.session.commit()
        return order

    async def delete_order(self, order_id: str) -> None:
        """Delete an order. Its identifier is not reused."""
        order = await self.get_order(order_id)
        await self.session.delete(order)
        await self.session.commit()
        logger.info("Deleted order", order_pk=order_id, order_id=order.order_id)

    async def delete_company_orders(self, company_id: int) -> int:
        """Delete all employee orders of a company (without committing). Returns the count."""
        result = await self.session.execute(
            delete(Order).where(Order.company_id == company_id).execution_options(synchronize_session=False)  # type: ignore[arg-type]
        )
        return result.rowcount or 0  # type: ignore[attr-defined]
