"""Piece-rate wage calculation."""

from collections.abc import Mapping
from dataclasses import dataclass

from app.models.enums import WorkType

# Rate field used for each kind of work. Ironing is paid at the pant ironing rate.
RATE_FIELD_BY_WORK_TYPE: dict[WorkType, str] = {
    WorkType.PANT: "pant",
    WorkType.SHIRT: "shirt",
    WorkType.IRONING: "ironing_pant",
    WorkType.EMBROIDERY: "embroidery",
}


@dataclass(frozen=True)
class WageQuote:
    wage_per_unit: float
    total_wages: float


def calculate_wage(
    work_type: WorkType,
    quantity: int,
    rates: Mapping[str, float],
    custom_wage: float | None = None,
) -> WageQuote:
    """Wage for ``quantity`` pieces: a positive custom wage wins over the configured rate."""
    if custom_wage:
        wage_per_unit = float(custom_wage)
    else:
        wage_per_unit = float(rates[RATE_FIELD_BY_WORK_TYPE[work_type]])
    return WageQuote(wage_per_unit=wage_per_unit, total_wages=round(wage_per_unit * quantity, 2))
