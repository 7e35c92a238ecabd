"""Work assignment database model."""

from datetime import date, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlmodel import Field, SQLModel

from app.models.base import utc_now
from app.models.enums import AssignmentStatus, WorkType
from app.models.types import ULIDType, label_enum


class WorkAssignment(SQLModel, table=True):
    """Piece work handed to a worker for one order, with the wage it earns."""

    __tablename__ = "work_assignments"

    id: int | None = Field(default=None, primary_key=True)
    labour_id: int = Field(
        sa_column=Column(Integer, ForeignKey("labour.id", ondelete="CASCADE"), index=True, nullable=False),
    )
    order_id: str = Field(
        max_length=26,
        sa_column=Column(ULIDType, ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False),
    )
    work_type: WorkType = Field(sa_column=Column(label_enum(WorkType, "worktype"), nullable=False))
    quantity: int
    wage_per_unit: float
    total_wages: float
    custom_wage: float | None = None  # Overrides the configured rate when set
    order_customer_name: str = ""
    order_date: date
    status: AssignmentStatus = Field(
        default=AssignmentStatus.ASSIGNED,
        sa_column=Column(label_enum(AssignmentStatus, "assignmentstatus"), nullable=False),
    )
    assigned_date: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    completed_date: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
