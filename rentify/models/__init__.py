"""
Model package.

IMPORTANT (Alembic / SQLModel):
- Alembic autogenerate and ``init_db`` rely on `SQLModel.metadata`, which is
  populated only when the table models are imported.
- `alembic/env.py` imports `rentify.models`, so this module must import all
  SQLModel `table=True` models to register them.
"""

# Import table models so SQLModel registers them in metadata.
from rentify.role.models import Role  # noqa: F401
from rentify.status.models import Status  # noqa: F401
from rentify.user.models import User  # noqa: F401
