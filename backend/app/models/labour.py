"""Labour (workforce roster) database model."""

from datetime import date, datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from app.models.base import utc_now
from app.models.enums import LabourCategory, LabourStatus
from app.models.types import label_enum


class Labour(SQLModel, table=True):
    """Worker on the shop floor."""

    __tablename__ = "labour"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    category: LabourCategory = Field(sa_column=Column(label_enum(LabourCategory, "labourcategory"), nullable=False))
    specialist: str  # e.g. "Shirt", "Pant", "Both"
    age: int | None = None
    phone: str
    photo: str | None = None  # URL or data URI
    join_date: date
    status: LabourStatus = Field(
        default=LabourStatus.ACTIVE,
        sa_column=Column(label_enum(LabourStatus, "labourstatus"), nullable=False),
    )
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
