"""Role domain schemas."""

from sqlmodel import Field, SQLModel


class RoleCreate(SQLModel):
    name: str = Field(min_length=1, max_length=60)


class RoleRead(SQLModel):
    id: int
    name: str
