"""Status domain exceptions."""

from rentify.core.exceptions import ConflictError, NotFoundError


class StatusNotFoundError(NotFoundError):
    """Raised when no status has the requested id or name."""

    error_type = "status_not_found"

    def __init__(self, message: str = "Status not found"):
        super().__init__(message)


class StatusExistsError(ConflictError):
    """Raised when creating a status whose name is already taken."""

    error_type = "status_exists"

    def __init__(self, message: str = "Status already exists"):
        super().__init__(message)


class InvalidStatusTransitionError(ConflictError):
    """Raised when an account cannot move from its status to the target."""

    error_type = "invalid_status_transition"

    def __init__(self, message: str = "Status transition not allowed"):
        super().__init__(message)
