"""Work assignment API endpoints."""

from datetime import date, datetime, time

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_serializer

from app.api.v1.dependencies import WorkAssignmentServiceDep
from app.api.v1.orders.schemas import StatusResponse
from app.models.enums import AssignmentStatus, WorkType
from app.models.work_assignment import WorkAssignment
from app.services.labour.exceptions import LabourNotFound
from app.services.orders.exceptions import OrderNotFound
from app.services.work.exceptions import WorkAssignmentNotFound
from app.utils.datetime_utils import SHOP_TIMEZONE, to_shop_timezone

router = APIRouter(tags=["work-assignments"])


class WorkAssignmentResponse(BaseModel):
    id: int
    labour_id: int
    order_id: str
    work_type: WorkType
    quantity: int
    wage_per_unit: float
    total_wages: float
    custom_wage: float | None
    order_customer_name: str
    order_date: date
    status: AssignmentStatus
    assigned_date: datetime
    completed_date: datetime | None

    @field_serializer("assigned_date", "completed_date")
    def serialize_timestamps(self, dt: datetime | None) -> str | None:
        """Serialize datetime to shop timezone."""
        localized_dt = to_shop_timezone(dt)
        return localized_dt.isoformat() if localized_dt else None

    @classmethod
    def from_model(cls, assignment: WorkAssignment) -> "WorkAssignmentResponse":
        return cls.model_validate(assignment, from_attributes=True)


class LabourWorkSummaryResponse(BaseModel):
    total_assignments: int
    completed_assignments: int
    total_wages: float
    total_quantity: int
    assignments: list[WorkAssignmentResponse]


class WorkAssignmentCreateRequest(BaseModel):
    labour_id: int
    order_id: str = Field(min_length=1, description="Order primary key (ULID)")
    work_type: WorkType
    quantity: int = Field(ge=1)
    custom_wage: float | None = Field(default=None, ge=0)
    order_customer_name: str | None = None
    order_date: date | None = None


class WorkAssignmentStatusRequest(BaseModel):
    status: AssignmentStatus


@router.post(
    "/work-assignments",
    response_model=WorkAssignmentResponse,
    status_code=201,
    operation_id="createWorkAssignment",
)
async def create_work_assignment(
    body: WorkAssignmentCreateRequest,
    service: WorkAssignmentServiceDep,
) -> WorkAssignmentResponse:
    """Assign work to a worker; the wage is priced from the current rates."""
    try:
        assignment = await service.create_assignment(**body.model_dump())
    except LabourNotFound:
        raise HTTPException(status_code=404, detail="Labour not found")
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    return WorkAssignmentResponse.from_model(assignment)


@router.get(
    "/work-assignments/labour/{labour_id}",
    response_model=list[WorkAssignmentResponse],
    operation_id="listLabourWorkAssignments",
)
async def list_labour_assignments(labour_id: int, service: WorkAssignmentServiceDep) -> list[WorkAssignmentResponse]:
    return [WorkAssignmentResponse.from_model(a) for a in await service.list_for_labour(labour_id)]


@router.get(
    "/work-assignments/order/{order_id}",
    response_model=list[WorkAssignmentResponse],
    operation_id="listOrderWorkAssignments",
)
async def list_order_assignments(order_id: str, service: WorkAssignmentServiceDep) -> list[WorkAssignmentResponse]:
    try:
        assignments = await service.list_for_order(order_id)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    return [WorkAssignmentResponse.from_model(a) for a in assignments]


@router.patch(
    "/work-assignments/{assignment_id}/status",
    response_model=WorkAssignmentResponse,
    operation_id="updateWorkAssignmentStatus",
)
async def update_assignment_status(
    assignment_id: int,
    body: WorkAssignmentStatusRequest,
    service: WorkAssignmentServiceDep,
) -> WorkAssignmentResponse:
    try:
        assignment = await service.update_status(assignment_id, body.status)
    except WorkAssignmentNotFound:
        raise HTTPException(status_code=404, detail="Work assignment not found")
    return WorkAssignmentResponse.from_model(assignment)


@router.delete(
    "/work-assignments/{assignment_id}",
    response_model=StatusResponse,
    operation_id="deleteWorkAssignment",
)
async def delete_assignment(assignment_id: int, service: WorkAssignmentServiceDep) -> StatusResponse:
    try:
        await service.delete_assignment(assignment_id)
    except WorkAssignmentNotFound:
        raise HTTPException(status_code=404, detail="Work assignment not found")
    return StatusResponse(status="deleted", message="Work assignment deleted successfully")


@router.get(
    "/work-assignments/summary/labour/{labour_id}",
    response_model=LabourWorkSummaryResponse,
    operation_id="getLabourWorkSummary",
)
async def get_labour_summary(
    labour_id: int,
    service: WorkAssignmentServiceDep,
    start_date: date | None = None,
    end_date: date | None = None,
) -> LabourWorkSummaryResponse:
    """Wage totals for a worker, optionally limited to whole shop days from start_date to end_date."""
    start = end = None
    if start_date is not None and end_date is not None:
        start = datetime.combine(start_date, time.min, tzinfo=SHOP_TIMEZONE)
        end = datetime.combine(end_date, time.max, tzinfo=SHOP_TIMEZONE)

    summary = await service.summarize_labour(labour_id, start=start, end=end)
    return LabourWorkSummaryResponse(
        total_assignments=summary.total_assignments,
        completed_assignments=summary.completed_assignments,
        total_wages=summary.total_wages,
        total_quantity=summary.total_quantity,
        assignments=[WorkAssignmentResponse.from_model(a) for a in summary.assignments],
    )
