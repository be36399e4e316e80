"""Role domain router."""

from fastapi import APIRouter, status

from rentify.core.constants import CommonResponses, Routes
from rentify.core.deps import RoleRegistryDep
from rentify.role.schemas import RoleCreate, RoleRead

router = APIRouter(prefix=Routes.ROLE.prefix, tags=[Routes.ROLE.tag])


@router.post("/", response_model=RoleRead, status_code=status.HTTP_201_CREATED)
async def create_role(role_create: RoleCreate, roles: RoleRegistryDep):
    """Register a new role. Duplicate names are accepted."""
    return roles.create(role_create.name)


@router.get("/", response_model=list[RoleRead])
async def list_roles(roles: RoleRegistryDep):
    """List all roles in creation order."""
    return roles.list_all()


@router.get(
    "/name/{name}",
    response_model=RoleRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_role_by_name(name: str, roles: RoleRegistryDep):
    """Exact, case-sensitive lookup; the oldest role wins on duplicates."""
    return roles.get_by_name(name)


@router.get(
    "/{role_id}",
    response_model=RoleRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_role(role_id: int, roles: RoleRegistryDep):
    return roles.get_by_id(role_id)
