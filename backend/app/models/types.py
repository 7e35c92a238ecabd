"""Custom SQLAlchemy types for the application."""

from enum import StrEnum
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Enum, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import TypeDecorator
from ulid import ULID


class ULIDType(TypeDecorator[str]):
    """SQLAlchemy type that stores ULID as UUID.

    - Database: UUID (native on PostgreSQL, CHAR(32) elsewhere)
    - Python: ULID object or string
    - API: 26-character string
    """

    impl = Uuid
    cache_ok = True

    def process_bind_param(self, value: str | ULID | None, dialect: Any) -> UUID | None:
        """Convert ULID string/object to UUID for storage."""
        if value is None:
            return None
        if isinstance(value, str):
            value = ULID.from_str(value)
        if isinstance(value, ULID):
            return value.to_uuid()
        raise ValueError(f"Cannot convert {type(value)} to ULID")

    def process_result_value(self, value: UUID | None, dialect: Any) -> str | None:
        """Convert UUID back to ULID string."""
        if value is None:
            return None
        return str(ULID.from_uuid(value))


# Free-form measurement maps ({"chest": 40, "length": 29.5, ...})
MeasurementsJSON = JSON().with_variant(JSONB(), "postgresql")


def label_enum(enum_class: type[StrEnum], name: str) -> Enum:
    """Store a StrEnum by its value as a plain VARCHAR.

    Values such as "In Progress" contain spaces, so the member values (not
    names) are persisted. A CHECK constraint is not created; pydantic
    validates values at the API boundary.
    """
    return Enum(
        enum_class,
        name=name,
        native_enum=False,
        length=32,
        values_callable=lambda e: [member.value for member in e],
    )
