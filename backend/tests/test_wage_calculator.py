import pytest

from app.models.enums import WorkType
from app.models.wages import DEFAULT_WAGE_RATES
from app.services.wages.calculator import calculate_wage


@pytest.mark.parametrize(
    ("work_type", "quantity", "expected_rate", "expected_total"),
    [
        (WorkType.PANT, 3, 110.0, 330.0),
        (WorkType.SHIRT, 2, 100.0, 200.0),
        (WorkType.IRONING, 10, 12.0, 120.0),
        (WorkType.EMBROIDERY, 4, 25.0, 100.0),
    ],
)
def test_configured_rates(work_type, quantity, expected_rate, expected_total):
    quote = calculate_wage(work_type, quantity, DEFAULT_WAGE_RATES)

    assert quote.wage_per_unit == expected_rate
    assert quote.total_wages == expected_total


def test_custom_wage_overrides_rate():
    quote = calculate_wage(WorkType.SHIRT, 3, DEFAULT_WAGE_RATES, custom_wage=150)

    assert quote.wage_per_unit == 150.0
    assert quote.total_wages == 450.0


@pytest.mark.parametrize("custom_wage", [None, 0])
def test_missing_or_zero_custom_wage_uses_rate(custom_wage):
    quote = calculate_wage(WorkType.PANT, 1, DEFAULT_WAGE_RATES, custom_wage=custom_wage)

    assert quote.wage_per_unit == 110.0


def test_total_is_rounded_to_paise():
    quote = calculate_wage(WorkType.SHIRT, 3, DEFAULT_WAGE_RATES, custom_wage=10.111)

    assert quote.total_wages == 30.33
