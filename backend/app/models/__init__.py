"""Database models."""

from sqlmodel import SQLModel

from app.models.company import Company
from app.models.enums import (
    AssignmentStatus,
    CompanyStatus,
    LabourCategory,
    LabourStatus,
    OrderStatus,
    WorkType,
)
from app.models.labour import Labour
from app.models.order import Order
from app.models.sequence_counter import SequenceCounter
from app.models.wages import WageConfiguration
from app.models.work_assignment import WorkAssignment

__all__ = [
    "SQLModel",
    "AssignmentStatus",
    "Company",
    "CompanyStatus",
    "Labour",
    "LabourCategory",
    "LabourStatus",
    "Order",
    "OrderStatus",
    "SequenceCounter",
    "WageConfiguration",
    "WorkAssignment",
    "WorkType",
]
