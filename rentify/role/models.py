"""Role domain models.

SQLModel table definition for Role.
"""

from enum import Enum

from sqlmodel import Field, SQLModel


class RoleName(str, Enum):
    """Roles seeded on a fresh database, in id order."""

    ADMIN = "ADMIN"
    PROPIETARIO = "PROPIETARIO"
    ARRIENDATARIO = "ARRIENDATARIO"


class Role(SQLModel, table=True):
    """A role a user may hold.

    Names are not unique: the registry keeps whatever it is given.
    """

    __tablename__: str = "roles"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=60)
