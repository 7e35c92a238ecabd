"""Shared default factories for table models."""

from datetime import UTC, datetime

from ulid import ULID


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


def new_ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())
