"""Wage rate configuration model."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from app.models.base import utc_now

DEFAULT_WAGE_KEY = "default"

# Per-unit piece rates in rupees
DEFAULT_WAGE_RATES: dict[str, float] = {
    "pant": 110.0,
    "shirt": 100.0,
    "ironing_pant": 12.0,
    "ironing_shirt": 10.0,
    "embroidery": 25.0,
}


class WageConfiguration(SQLModel, table=True):
    """Piece rates paid to workers, one row keyed "default"."""

    __tablename__ = "wage_configurations"

    key: str = Field(default=DEFAULT_WAGE_KEY, primary_key=True, max_length=32)
    pant: float = DEFAULT_WAGE_RATES["pant"]
    shirt: float = DEFAULT_WAGE_RATES["shirt"]
    ironing_pant: float = DEFAULT_WAGE_RATES["ironing_pant"]
    ironing_shirt: float = DEFAULT_WAGE_RATES["ironing_shirt"]
    embroidery: float = DEFAULT_WAGE_RATES["embroidery"]
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))

    def rates(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in DEFAULT_WAGE_RATES}
