"""Status domain models.

SQLModel table definition for Status.
"""

from sqlmodel import Field, SQLModel


class Status(SQLModel, table=True):
    """An account lifecycle state such as ACTIVO or SUSPENDIDO."""

    __tablename__: str = "statuses"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True, max_length=20)
