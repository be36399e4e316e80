"""Central API router aggregating all domain routers."""

from fastapi import APIRouter

from rentify.health.router import router as health_router
from rentify.role.router import router as role_router
from rentify.status.router import router as status_router
from rentify.user.router import router as user_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(role_router)
api_router.include_router(status_router)
api_router.include_router(user_router)
