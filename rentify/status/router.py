"""Status domain router."""

from fastapi import APIRouter, status

from rentify.core.constants import CommonResponses, Routes
from rentify.core.deps import StatusRegistryDep
from rentify.status.schemas import StatusCreate, StatusRead

router = APIRouter(prefix=Routes.STATUS.prefix, tags=[Routes.STATUS.tag])


@router.post(
    "/",
    response_model=StatusRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
async def create_status(status_create: StatusCreate, statuses: StatusRegistryDep):
    """Register a new account status. Names must be unique."""
    return statuses.create(status_create.name)


@router.get("/", response_model=list[StatusRead])
async def list_statuses(statuses: StatusRegistryDep):
    """List all statuses in creation order."""
    return statuses.list_all()


@router.get(
    "/name/{name}",
    response_model=StatusRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_status_by_name(name: str, statuses: StatusRegistryDep):
    """Get a status by its exact (case-sensitive) name."""
    return statuses.get_by_name(name)


@router.get(
    "/{status_id}",
    response_model=StatusRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_status(status_id: int, statuses: StatusRegistryDep):
    return statuses.get_by_id(status_id)
