"""Base service exceptions.

These exceptions are raised by the service layer and should be caught
by the API layer and converted to appropriate HTTP responses.
"""


class ServiceError(Exception):
    """Base service exception."""

    pass


class NotFoundError(ServiceError):
    """Resource not found."""

    pass


class ValidationError(ServiceError):
    """Validation error."""

    pass


class ConflictError(ServiceError):
    """Resource clashes with an existing one."""

    pass


class StorageUnavailable(ServiceError):
    """The database could not be reached or an atomic update could not be completed.

    Nothing the caller asked for has been persisted when this is raised.
    """

    pass
