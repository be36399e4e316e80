from collections.abc import Generator

from sqlmodel import Session, SQLModel, create_engine

from rentify.core.settings import get_settings

_settings = get_settings()

connect_args: dict[str, object] = {}
if _settings.is_sqlite:
    # Required for SQLite when used with FastAPI across threads.
    connect_args = {"check_same_thread": False}

engine = create_engine(_settings.database_url, echo=False, connect_args=connect_args)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def init_db() -> None:
    """Create any missing tables. Existing tables are left alone."""
    # Registers every table model on SQLModel.metadata.
    import rentify.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
