"""Labour roster service."""

from datetime import date
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from app.models.base import utc_now
from app.models.enums import LabourCategory, LabourStatus
from app.models.labour import Labour
from app.services.labour.exceptions import LabourNotFound
from app.utils.datetime_utils import shop_date

logger = structlog.get_logger(__name__)


class LabourService:
    """Service for the workforce roster."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_labour(self, *, category: LabourCategory | None = None) -> list[Labour]:
        """List workers, newest first, optionally only one category."""
        statement = select(Labour).order_by(col(Labour.created_at).desc())
        if category is not None:
            statement = statement.where(Labour.category == category)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_labour(self, labour_id: int) -> Labour:
        labour = await self.session.get(Labour, labour_id)
        if not labour:
            raise LabourNotFound()
        return labour

    async def create_labour(
        self,
        *,
        name: str,
        category: LabourCategory,
        specialist: str,
        phone: str,
        age: int | None = None,
        photo: str | None = None,
        join_date: date | None = None,
        status: LabourStatus = LabourStatus.ACTIVE,
    ) -> Labour:
        labour = Labour(
            name=name,
            category=category,
            specialist=specialist,
            phone=phone,
            age=age,
            photo=photo,
            join_date=join_date or shop_date(utc_now()),
            status=status,
        )
        self.session.add(labour)
        await self.session.commit()

        logger.info("Added worker", labour_id=labour.id, category=category)
        return labour

    async def update_labour(self, labour_id: int, changes: dict[str, Any]) -> Labour:
        """Apply a partial update; keys not present are left unchanged."""
        labour = await self.get_labour(labour_id)
        for key, value in changes.items():
            if key in {"id", "created_at", "updated_at"}:
                continue
            setattr(labour, key, value)
        labour.updated_at = utc_now()
        await self.session.commit()
        return labour

    async def delete_labour(self, labour_id: int) -> None:
        labour = await self.get_labour(labour_id)
        await self.session.delete(labour)
        await self.session.commit()
        logger.info("Removed worker", labour_id=labour_id)
