"""User domain schemas.

Request and response schemas for account operations.

Security notes:
- password_hash is accepted on registration only and never returned
- id, loyalty_points, status and timestamps are never chosen by the caller
"""

from datetime import UTC, date, datetime

from pydantic import EmailStr, TypeAdapter, field_serializer, field_validator
from sqlmodel import Field, SQLModel

from rentify.role.schemas import RoleRead
from rentify.status.schemas import StatusRead

# Chilean RUT: 7-8 digits, dash, check digit (0-9 or K).
NATIONAL_ID_PATTERN = r"^\d{7,8}-[\dkK]$"

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """Return the stored form of ``email`` (domain lower-cased).

    Raises pydantic's ValidationError when ``email`` is not an address.
    """
    return _email_adapter.validate_python(email)


class UserCreate(SQLModel):
    """Registration draft.

    referral_code is generated when omitted. referred_by is the referral
    code of an existing user who is credited for this registration.
    """

    first_name: str = Field(min_length=1, max_length=60)
    middle_name: str = Field(min_length=1, max_length=60)
    last_name: str = Field(min_length=1, max_length=60)
    birth_date: date
    email: EmailStr = Field(max_length=200)
    national_id: str = Field(max_length=10, schema_extra={"pattern": NATIONAL_ID_PATTERN})
    phone: str = Field(min_length=1, max_length=12)
    password_hash: str = Field(min_length=1, max_length=100)
    loyalty_flag: bool = False
    referral_code: str | None = Field(default=None, min_length=1, max_length=20)
    role_id: int | None = None
    referred_by: str | None = Field(default=None, min_length=1, max_length=20)

    @field_validator("national_id")
    @classmethod
    def upper_check_digit(cls, value: str) -> str:
        # 12345678-k and 12345678-K are the same RUT.
        return value.upper()


class UserUpdate(SQLModel):
    """Partial profile update. Omitted or null fields are left unchanged."""

    first_name: str | None = Field(default=None, min_length=1, max_length=60)
    middle_name: str | None = Field(default=None, min_length=1, max_length=60)
    last_name: str | None = Field(default=None, min_length=1, max_length=60)
    email: EmailStr | None = Field(default=None, max_length=200)
    phone: str | None = Field(default=None, min_length=1, max_length=12)


class RoleAssignment(SQLModel):
    role_id: int


class StatusAssignment(SQLModel):
    status_id: int


class PointsGrant(SQLModel):
    """Points delta; negative values redeem points."""

    points: int


class UserRead(SQLModel):
    """Account as returned by the API."""

    id: int
    first_name: str
    middle_name: str
    last_name: str
    birth_date: date
    email: EmailStr
    national_id: str
    phone: str
    loyalty_flag: bool
    loyalty_points: int
    referral_code: str
    role: RoleRead | None = None
    status: StatusRead | None = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        """Format datetime as ISO 8601 string in UTC.

        Converts datetime to UTC timezone and formats with Z suffix
        (e.g. 2026-01-19T12:34:56Z).
        """
        if value.tzinfo is not None:
            utc_value = value.astimezone(UTC)
        else:
            # SQLite drops tzinfo; stored values are always UTC.
            utc_value = value.replace(tzinfo=UTC)

        return utc_value.replace(microsecond=0).isoformat().replace("+00:00", "Z")
