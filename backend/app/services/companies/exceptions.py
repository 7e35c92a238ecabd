"""Company domain exceptions."""

from app.services.exceptions import ConflictError, NotFoundError


class CompanyNotFound(NotFoundError):
    """Company not found."""

    pass


class CompanyAlreadyExists(ConflictError):
    """Another company already uses this name."""

    pass
