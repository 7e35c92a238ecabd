"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.services.companies.company_service import CompanyService
from app.services.labour.labour_service import LabourService
from app.services.orders.order_service import OrderService
from app.services.wages.wage_service import WageService
from app.services.work.assignment_service import WorkAssignmentService


async def get_order_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OrderService:
    """Get an OrderService instance with the current session."""
    return OrderService(session)


async def get_company_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CompanyService:
    """Get a CompanyService instance with the current session."""
    return CompanyService(session)


async def get_labour_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> LabourService:
    """Get a LabourService instance with the current session."""
    return LabourService(session)


async def get_wage_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> WageService:
    """Get a WageService instance with the current session."""
    return WageService(session)


async def get_work_assignment_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> WorkAssignmentService:
    """Get a WorkAssignmentService instance with the current session."""
    return WorkAssignmentService(session)


# Type aliases for cleaner endpoint signatures
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
CompanyServiceDep = Annotated[CompanyService, Depends(get_company_service)]
LabourServiceDep = Annotated[LabourService, Depends(get_labour_service)]
WageServiceDep = Annotated[WageService, Depends(get_wage_service)]
WorkAssignmentServiceDep = Annotated[WorkAssignmentService, Depends(get_work_assignment_service)]
