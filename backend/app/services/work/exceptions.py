"""Work assignment domain exceptions."""

from app.services.exceptions import NotFoundError


class WorkAssignmentNotFound(NotFoundError):
    """Work assignment not found."""

    pass
