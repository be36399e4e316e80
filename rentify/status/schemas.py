"""Status domain schemas."""

from sqlmodel import Field, SQLModel


class StatusCreate(SQLModel):
    name: str = Field(min_length=1, max_length=20)


class StatusRead(SQLModel):
    id: int
    name: str
