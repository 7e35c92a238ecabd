"""Company (bulk customer) database model."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from app.models.base import utc_now
from app.models.enums import CompanyStatus
from app.models.types import label_enum


class Company(SQLModel, table=True):
    """Company ordering uniforms for its employees."""

    __tablename__ = "companies"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    address: str = ""
    gst_number: str = ""
    hr_name: str = ""
    hr_phone: str = ""
    manager_name: str = ""
    manager_phone: str = ""
    landline_number: str = ""
    email: str = ""
    estimated_orders: int = 0
    total_orders: int = 0  # Employee orders created so far
    status: CompanyStatus = Field(
        default=CompanyStatus.ACTIVE,
        sa_column=Column(label_enum(CompanyStatus, "companystatus"), nullable=False),
    )
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
