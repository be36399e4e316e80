"""User domain exceptions.

User-related exceptions for not found, conflict and invalid input scenarios.
"""

from rentify.core.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when user cannot be found."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class DuplicateEmailError(ConflictError):
    """Raised when an email is already registered to another user."""

    error_type = "duplicate_email"

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class DuplicateNationalIdError(ConflictError):
    """Raised when a national id (RUT) is already registered."""

    error_type = "duplicate_national_id"

    def __init__(self, message: str = "National id already registered"):
        super().__init__(message)


class UnknownRoleError(ValidationError):
    """Raised when a user references a role that does not exist."""

    error_type = "unknown_role"

    def __init__(self, message: str = "Unknown role"):
        super().__init__(message)


class UnderageUserError(ValidationError):
    """Raised when the applicant is younger than the minimum age."""

    error_type = "underage_user"

    def __init__(self, message: str = "User is under the minimum age"):
        super().__init__(message)


class InsufficientPointsError(ValidationError):
    """Raised when a points change would leave a negative balance."""

    error_type = "insufficient_points"

    def __init__(self, message: str = "Not enough loyalty points"):
        super().__init__(message)


class ReferralCodeNotFoundError(NotFoundError):
    """Raised when a referral code does not belong to any user."""

    error_type = "referral_code_not_found"

    def __init__(self, message: str = "Referral code not found"):
        super().__init__(message)


class ReferralCodeUnavailableError(ConflictError):
    """Raised when no unused referral code could be generated."""

    error_type = "referral_code_unavailable"

    def __init__(self, message: str = "Could not generate a unique referral code"):
        super().__init__(message)
