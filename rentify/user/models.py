"""User domain models.

SQLModel table definition for User.
"""

from datetime import date

from pydantic import EmailStr
from sqlalchemy import CheckConstraint
from sqlmodel import Field, Relationship, SQLModel

from rentify.core.mixins import TimestampMixin
from rentify.role.models import Role
from rentify.status.models import Status


class User(TimestampMixin, SQLModel, table=True):
    """User (account) database model.

    email and national_id are unique at the schema level; the directory
    checks them before inserting as well. password_hash is stored as given
    and must never be exposed in API responses.
    """

    __tablename__: str = "users"
    __table_args__ = (
        CheckConstraint("loyalty_points >= 0", name="ck_users_loyalty_points"),
    )

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=60)
    middle_name: str = Field(max_length=60)
    last_name: str = Field(max_length=60)
    birth_date: date
    email: EmailStr = Field(index=True, unique=True, max_length=200)
    national_id: str = Field(index=True, unique=True, max_length=10)
    phone: str = Field(max_length=12)
    loyalty_flag: bool = Field(default=False, index=True)
    password_hash: str = Field(max_length=100)
    loyalty_points: int = Field(default=0, ge=0)
    referral_code: str = Field(index=True, max_length=20)

    role_id: int | None = Field(default=None, foreign_key="roles.id", index=True)
    status_id: int | None = Field(default=None, foreign_key="statuses.id", index=True)

    role: Role | None = Relationship()
    status: Status | None = Relationship()
