"""Role domain exceptions."""

from rentify.core.exceptions import NotFoundError


class RoleNotFoundError(NotFoundError):
    """Raised when no role has the requested id or name."""

    error_type = "role_not_found"

    def __init__(self, message: str = "Role not found"):
        super().__init__(message)
