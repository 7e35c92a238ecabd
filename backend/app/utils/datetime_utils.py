"""Datetime utility functions."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from app.config import settings

# Shop timezone (from config); defines calendar days and months
SHOP_TIMEZONE = ZoneInfo(settings.timezone)


def to_shop_timezone(dt: datetime | None) -> datetime | None:
    """Convert a datetime to the shop timezone.

    Args:
        dt: Datetime to convert (can be None)

    Returns:
        Datetime in shop timezone, or None if input was None
    """
    if dt is None:
        return None
    # Ensure datetime is timezone-aware (assume UTC if naive)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(SHOP_TIMEZONE)


def shop_date(dt: datetime) -> date:
    """Calendar date of a moment as seen in the shop."""
    localized = to_shop_timezone(dt)
    assert localized is not None
    return localized.date()


def to_utc(dt: datetime) -> datetime:
    """Normalize to UTC; naive datetimes are taken to be shop-local."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=SHOP_TIMEZONE)
    return dt.astimezone(UTC)
