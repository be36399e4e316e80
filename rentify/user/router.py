"""User domain router.

Thin HTTP layer over the account directory.
"""

from fastapi import APIRouter, status

from rentify.core.constants import CommonResponses, Routes
from rentify.core.deps import AccountDirectoryDep
from rentify.user.schemas import (
    PointsGrant,
    RoleAssignment,
    StatusAssignment,
    UserCreate,
    UserRead,
    UserUpdate,
)

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    responses={**CommonResponses.BAD_REQUEST},
)


@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT, **CommonResponses.NOT_FOUND},
)
async def register_user(user_create: UserCreate, directory: AccountDirectoryDep):
    """Register a new account.

    The account starts ACTIVO with zero points. When referred_by is given,
    the referring user is credited with the referral bonus.
    """
    return directory.register(user_create)


@router.get("/", response_model=list[UserRead])
async def list_users(
    directory: AccountDirectoryDep,
    role_id: int | None = None,
    loyalty: bool = False,
):
    """List accounts, optionally filtered by role and/or the loyalty flag."""
    if role_id is None:
        return directory.list_loyalty_members() if loyalty else directory.list_all()
    users = directory.list_by_role(role_id)
    if loyalty:
        users = [user for user in users if user.loyalty_flag]
    return users


@router.get(
    "/email/{email}",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_user_by_email(email: str, directory: AccountDirectoryDep):
    return directory.get_by_email(email)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_user(user_id: int, directory: AccountDirectoryDep):
    return directory.get_by_id(user_id)


@router.get("/{user_id}/exists", response_model=bool)
async def user_exists(user_id: int, directory: AccountDirectoryDep):
    return directory.exists(user_id)


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.CONFLICT},
)
async def update_user(
    user_id: int, user_update: UserUpdate, directory: AccountDirectoryDep
):
    """Update names, phone or email. A new email must not be taken."""
    return directory.update(user_id, user_update)


@router.put(
    "/{user_id}/role",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def change_user_role(
    user_id: int, assignment: RoleAssignment, directory: AccountDirectoryDep
):
    return directory.change_role(user_id, assignment.role_id)


@router.put(
    "/{user_id}/status",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.CONFLICT},
)
async def change_user_status(
    user_id: int, assignment: StatusAssignment, directory: AccountDirectoryDep
):
    """Move the account through its lifecycle (ACTIVO, INACTIVO, SUSPENDIDO)."""
    return directory.change_status(user_id, assignment.status_id)


@router.post(
    "/{user_id}/points",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def add_user_points(
    user_id: int, grant: PointsGrant, directory: AccountDirectoryDep
):
    """Add loyalty points; a negative amount redeems them."""
    return directory.add_points(user_id, grant.points)
