"""Company management service."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from app.models.base import utc_now
from app.models.company import Company
from app.models.enums import FINISHED_ORDER_STATUSES, OPEN_ORDER_STATUSES
from app.services.companies.exceptions import CompanyAlreadyExists, CompanyNotFound
from app.services.orders.order_service import OrderService

logger = structlog.get_logger(__name__)

UNSPECIFIED_POSITION = "Other"


@dataclass
class CompanyStats:
    """Progress of a company's employee orders."""

    total_employees: int = 0
    pending: int = 0
    completed: int = 0
    by_position: dict[str, int] = field(default_factory=dict)


class CompanyService:
    """Service for companies and their employee orders."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.orders = OrderService(session)

    async def list_companies(self) -> list[Company]:
        result = await self.session.execute(select(Company).order_by(col(Company.created_at).desc()))
        return list(result.scalars().all())

    async def get_company(self, company_id: int) -> Company:
        company = await self.session.get(Company, company_id)
        if not company:
            raise CompanyNotFound()
        return company

    async def create_company(self, *, name: str, **fields: Any) -> Company:
        """Create a company; names are unique."""
        await self._ensure_name_available(name)

        company = Company(name=name, **fields)
        self.session.add(company)
        await self.session.commit()

        logger.info("Created company", company_id=company.id, name=name)
        return company

    async def update_company(self, company_id: int, changes: dict[str, Any]) -> Company:
        company = await self.get_company(company_id)

        new_name = changes.get("name")
        if new_name is not None and new_name != company.name:
            await self._ensure_name_available(new_name)

        for key, value in changes.items():
            if key in {"id", "total_orders", "created_at", "updated_at"}:
                continue
            setattr(company, key, value)
        company.updated_at = utc_now()
        await self.session.commit()
        return company

    async def delete_company(self, company_id: int) -> None:
        """Delete a company together with all of its employee orders."""
        company = await self.get_company(company_id)
        deleted_orders = await self.orders.delete_company_orders(company_id)
        await self.session.delete(company)
        await self.session.commit()

        logger.info("Deleted company", company_id=company_id, deleted_orders=deleted_orders)

    async def get_stats(self, company_id: int) -> CompanyStats:
        await self.get_company(company_id)
        orders = await self.orders.list_company_orders(company_id)

        positions = Counter(order.position or UNSPECIFIED_POSITION for order in orders)
        return CompanyStats(
            total_employees=len(orders),
            pending=sum(1 for order in orders if order.status in OPEN_ORDER_STATUSES),
            completed=sum(1 for order in orders if order.status in FINISHED_ORDER_STATUSES),
            by_position=dict(positions),
        )

    async def _ensure_name_available(self, name: str) -> None:
        result = await self.session.execute(select(Company.id).where(Company.name == name))
        if result.first() is not None:
            raise CompanyAlreadyExists(f"Company with name {name!r} already exists")
