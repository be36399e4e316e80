"""Centralized dependency type aliases for FastAPI routes.

Import all dependencies from this single module:
    from rentify.core.deps import SessionDep, SettingsDep, AccountDirectoryDep

Each request gets one Session; every repository built for that request
shares it, so a service call is a single unit of work.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from rentify.core.settings import Settings, get_settings
from rentify.db.engine import get_session
from rentify.db.repository import SqlRepository
from rentify.role.models import Role
from rentify.role.service import RoleRegistry
from rentify.status.models import Status
from rentify.status.service import StatusRegistry
from rentify.user.models import User
from rentify.user.service import AccountDirectory

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_role_registry(session: SessionDep) -> RoleRegistry:
    return RoleRegistry(SqlRepository(session, Role))


def get_status_registry(session: SessionDep) -> StatusRegistry:
    return StatusRegistry(SqlRepository(session, Status))


RoleRegistryDep = Annotated[RoleRegistry, Depends(get_role_registry)]
StatusRegistryDep = Annotated[StatusRegistry, Depends(get_status_registry)]


def get_account_directory(
    session: SessionDep,
    roles: RoleRegistryDep,
    statuses: StatusRegistryDep,
    settings: SettingsDep,
) -> AccountDirectory:
    return AccountDirectory(SqlRepository(session, User), roles, statuses, settings)


AccountDirectoryDep = Annotated[AccountDirectory, Depends(get_account_directory)]
