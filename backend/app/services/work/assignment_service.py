"""Work assignment service.

Assigns piece work on orders to workers and prices it with the current
wage configuration at the time of assignment. Later rate changes do not
touch existing assignments.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from app.models.base import utc_now
from app.models.enums import AssignmentStatus, WorkType
from app.models.work_assignment import WorkAssignment
from app.services.labour.labour_service import LabourService
from app.services.orders.order_service import OrderService
from app.services.wages.calculator import calculate_wage
from app.services.wages.wage_service import WageService
from app.services.work.exceptions import WorkAssignmentNotFound
from app.utils.datetime_utils import to_utc

logger = structlog.get_logger(__name__)


@dataclass
class LabourWorkSummary:
    total_assignments: int = 0
    completed_assignments: int = 0
    total_wages: float = 0.0
    total_quantity: int = 0
    assignments: list[WorkAssignment] = field(default_factory=list)


class WorkAssignmentService:
    """Service for assigning and tracking piece work."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.labour = LabourService(session)
        self.orders = OrderService(session)
        self.wages = WageService(session)

    async def create_assignment(
        self,
        *,
        labour_id: int,
        order_id: str,
        work_type: WorkType,
        quantity: int,
        custom_wage: float | None = None,
        order_customer_name: str | None = None,
        order_date: date | None = None,
    ) -> WorkAssignment:
        """Assign work and compute its wage.

        Raises LabourNotFound / OrderNotFound if either side is missing.
        """
        await self.labour.get_labour(labour_id)
        order = await self.orders.get_order(order_id)
        config = await self.wages.get_configuration()

        quote = calculate_wage(work_type, quantity, config.rates(), custom_wage)
        assignment = WorkAssignment(
            labour_id=labour_id,
            order_id=order.id,
            work_type=work_type,
            quantity=quantity,
            wage_per_unit=quote.wage_per_unit,
            total_wages=quote.total_wages,
            custom_wage=float(custom_wage) if custom_wage else None,
            order_customer_name=order_customer_name or order.name,
            order_date=order_date or order.order_date,
            status=AssignmentStatus.ASSIGNED,
            assigned_date=utc_now(),
        )
        self.session.add(assignment)
        await self.session.commit()

        logger.info(
            "Assigned work",
            assignment_id=assignment.id,
            labour_id=labour_id,
            order_id=order.order_id,
            work_type=work_type,
            quantity=quantity,
            total_wages=quote.total_wages,
        )
        return assignment

    async def get_assignment(self, assignment_id: int) -> WorkAssignment:
        assignment = await self.session.get(WorkAssignment, assignment_id)
        if not assignment:
            raise WorkAssignmentNotFound()
        return assignment

    async def list_for_labour(self, labour_id: int) -> list[WorkAssignment]:
        """Assignments of a worker, most recently assigned first."""
        statement = (
            select(WorkAssignment)
            .where(WorkAssignment.labour_id == labour_id)
            .order_by(col(WorkAssignment.assigned_date).desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_for_order(self, order_id: str) -> list[WorkAssignment]:
        """Assignments on an order, most recently assigned first."""
        order = await self.orders.get_order(order_id)
        statement = (
            select(WorkAssignment)
            .where(WorkAssignment.order_id == order.id)
            .order_by(col(WorkAssignment.assigned_date).desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update_status(self, assignment_id: int, status: AssignmentStatus) -> WorkAssignment:
        """Change status; completing stamps the completion time."""
        assignment = await self.get_assignment(assignment_id)
        now = utc_now()
        assignment.status = status
        if status == AssignmentStatus.COMPLETED:
            assignment.completed_date = now
        assignment.updated_at = now
        await self.session.commit()
        return assignment

    async def delete_assignment(self, assignment_id: int) -> None:
        assignment = await self.get_assignment(assignment_id)
        await self.session.delete(assignment)
        await self.session.commit()

    async def summarize_labour(
        self,
        labour_id: int,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> LabourWorkSummary:
        """Totals for a worker. The date range applies only when both bounds are given."""
        statement = select(WorkAssignment).where(WorkAssignment.labour_id == labour_id)
        if start is not None and end is not None:
            statement = statement.where(
                col(WorkAssignment.assigned_date) >= to_utc(start),
                col(WorkAssignment.assigned_date) <= to_utc(end),
            )
        result = await self.session.execute(statement.order_by(col(WorkAssignment.assigned_date).desc()))
        assignments = list(result.scalars().all())

        return LabourWorkSummary(
            total_assignments=len(assignments),
            completed_assignments=sum(1 for a in assignments if a.status == AssignmentStatus.COMPLETED),
            total_wages=round(sum(a.total_wages for a in assignments), 2),
            total_quantity=sum(a.quantity for a in assignments),
            assignments=assignments,
        )
