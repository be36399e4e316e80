"""Error response schemas for consistent API error formatting."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every error response.

    ``type`` is the AppException error_type, e.g. "duplicate_email".
    """

    type: str
    message: str
