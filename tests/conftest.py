import inspect
from datetime import date
from typing import Any

import anyio
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

import rentify.models  # noqa: F401
from rentify.core.settings import Settings, get_settings
from rentify.db.engine import get_session
from rentify.db.memory import InMemoryRepository
from rentify.db.repository import SqlRepository
from rentify.db.seed import seed_reference_data
from rentify.main import app
from rentify.role.models import Role
from rentify.role.service import RoleRegistry
from rentify.status.models import Status
from rentify.status.service import StatusRegistry
from rentify.user.models import User
from rentify.user.service import AccountDirectory

TODAY = date(2026, 10, 19)


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    return Settings(
        env_name="test",
        database_url="sqlite://",
        auto_create_tables=False,
        seed_reference_data=False,
    )


@pytest.fixture(name="roles")
def roles_fixture(session: Session) -> RoleRegistry:
    return RoleRegistry(SqlRepository(session, Role))


@pytest.fixture(name="statuses")
def statuses_fixture(session: Session) -> StatusRegistry:
    return StatusRegistry(SqlRepository(session, Status))


@pytest.fixture(name="seeded")
def seeded_fixture(roles: RoleRegistry, statuses: StatusRegistry) -> None:
    """Default roles (ADMIN=1, PROPIETARIO=2, ARRIENDATARIO=3) and statuses
    (ACTIVO=1, INACTIVO=2, SUSPENDIDO=3)."""
    seed_reference_data(roles, statuses)


@pytest.fixture(name="directory")
def directory_fixture(
    session: Session,
    roles: RoleRegistry,
    statuses: StatusRegistry,
    settings: Settings,
    seeded: None,
) -> AccountDirectory:
    """Account directory backed by the SQLite test session."""
    return AccountDirectory(
        SqlRepository(session, User), roles, statuses, settings, today=lambda: TODAY
    )


@pytest.fixture(name="memory_directory")
def memory_directory_fixture(settings: Settings) -> AccountDirectory:
    """Account directory backed entirely by in-memory repositories."""
    roles = RoleRegistry(InMemoryRepository())
    statuses = StatusRegistry(InMemoryRepository(unique=("name",)))
    seed_reference_data(roles, statuses)
    return AccountDirectory(
        InMemoryRepository(unique=("email", "national_id")),
        roles,
        statuses,
        settings,
        today=lambda: TODAY,
    )


@pytest.fixture(name="user_payload")
def user_payload_fixture():
    """Factory for valid registration payloads; keyword args override fields."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "first_name": "Ana",
            "middle_name": "Maria",
            "last_name": "Rojas",
            "birth_date": "1995-04-12",
            "email": "ana@example.com",
            "national_id": "11111111-1",
            "phone": "987654321",
            "password_hash": "hashed-secret",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture(name="client")
def client_fixture(session: Session, settings: Settings, seeded: None):
    """Create a test client bound to the seeded test session."""

    def get_session_override():
        return session

    def get_settings_override():
        return settings

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
