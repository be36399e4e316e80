from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import Session

from rentify.core.cors import add_cors_middleware
from rentify.core.exception_handlers import register_exception_handlers
from rentify.core.logging import configure_logging
from rentify.core.request_logging import add_request_logging_middleware
from rentify.core.settings import get_settings
from rentify.db.engine import engine, init_db
from rentify.db.repository import SqlRepository
from rentify.db.seed import seed_reference_data
from rentify.role.models import Role
from rentify.role.service import RoleRegistry
from rentify.router import api_router
from rentify.status.models import Status
from rentify.status.service import StatusRegistry

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    if settings.auto_create_tables:
        init_db()
    if settings.seed_reference_data:
        with Session(engine) as session:
            seed_reference_data(
                RoleRegistry(SqlRepository(session, Role)),
                StatusRegistry(SqlRepository(session, Status)),
            )
    yield


app = FastAPI(title="Rentify Accounts", version="0.1.0", lifespan=lifespan)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)
