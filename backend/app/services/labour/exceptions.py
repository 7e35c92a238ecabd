"""Labour domain exceptions."""

from app.services.exceptions import NotFoundError


class LabourNotFound(NotFoundError):
    """Labour not found."""

    pass
