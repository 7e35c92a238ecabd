"""Enum definitions for database models.

Values are the labels the shop uses on its dashboards, so they are stored
and returned as-is (including spaces).
"""

from enum import StrEnum


class OrderStatus(StrEnum):
    """Progress of a tailoring order from intake to hand-over."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    READY = "Ready"
    DELIVERED = "Delivered"
    COMPLETED = "Completed"


# Statuses counted as "still open" / "done" in company statistics
OPEN_ORDER_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.IN_PROGRESS})
FINISHED_ORDER_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.COMPLETED})


class CompanyStatus(StrEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class LabourCategory(StrEnum):
    """Trade a worker is employed for."""

    TAILOR = "Tailor"
    IRON_MASTER = "Iron Master"
    EMBROIDER = "Embroider"


class LabourStatus(StrEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class WorkType(StrEnum):
    """Kind of piece work a worker can be assigned on an order."""

    PANT = "Pant"
    SHIRT = "Shirt"
    IRONING = "Ironing"
    EMBROIDERY = "Embroidery"


class AssignmentStatus(StrEnum):
    ASSIGNED = "Assigned"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
