"""Order domain exceptions."""

from app.services.exceptions import ConflictError, NotFoundError


class OrderNotFound(NotFoundError):
    """Order not found."""

    pass


class CounterConflict(ConflictError):
    """The order counter row changed between reading and writing it."""

    pass
