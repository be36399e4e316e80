"""Storage interface consumed by the account services.

Services never touch a Session directly: they receive a ``Repository`` for
each entity. ``SqlRepository`` is the production implementation backed by a
SQLModel session; ``rentify.db.memory.InMemoryRepository`` honours the same
contract without a database.
"""

import logging
from typing import Any, Protocol

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

logger = logging.getLogger(__name__)


class DuplicateKeyError(Exception):
    """Raised by a repository when a write violates a unique key.

    ``field`` names the violated column when it can be determined.
    """

    def __init__(self, field: str | None = None):
        self.field = field
        super().__init__(f"Duplicate value for unique key {field or '<unknown>'}")


class Repository[M: SQLModel](Protocol):
    """Minimal persistence contract for one entity type.

    Records are ordered by id (insertion order) wherever a sequence or a
    "first match" is returned.
    """

    def insert(self, record: M) -> M:
        """Store a new record and assign its id.

        Raises DuplicateKeyError when a unique key is already taken; in that
        case nothing from the current unit of work is kept.
        """
        ...

    def update(self, record: M) -> M:
        """Persist changes to an existing record (same failure mode as insert)."""
        ...

    def find_by_id(self, record_id: int) -> M | None: ...

    def find_all(self) -> list[M]: ...

    def find_by(self, field: str, value: Any) -> M | None:
        """Return the first record whose ``field`` equals ``value``."""
        ...

    def find_all_by(self, field: str, value: Any) -> list[M]: ...

    def commit(self) -> None:
        """Make every write since the last commit durable."""
        ...


class SqlRepository[M: SQLModel]:
    """Repository over a SQLModel session.

    Writes are flushed immediately so ids are assigned and unique
    constraints are checked by the database inside the current transaction.
    Several repositories sharing one session share one unit of work.
    """

    def __init__(self, session: Session, model: type[M]) -> None:
        self.session = session
        self.model = model

    def insert(self, record: M) -> M:
        self.session.add(record)
        self._flush()
        return record

    def update(self, record: M) -> M:
        self.session.add(record)
        self._flush()
        return record

    def find_by_id(self, record_id: int) -> M | None:
        return self.session.get(self.model, record_id)

    def find_all(self) -> list[M]:
        statement = select(self.model).order_by(self._column("id"))
        return list(self.session.exec(statement).all())

    def find_by(self, field: str, value: Any) -> M | None:
        statement = (
            select(self.model)
            .where(self._column(field) == value)
            .order_by(self._column("id"))
        )
        return self.session.exec(statement).first()

    def find_all_by(self, field: str, value: Any) -> list[M]:
        statement = (
            select(self.model)
            .where(self._column(field) == value)
            .order_by(self._column("id"))
        )
        return list(self.session.exec(statement).all())

    def commit(self) -> None:
        self.session.commit()

    def _column(self, field: str) -> Any:
        return getattr(self.model, field)

    def _flush(self) -> None:
        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            field = self._violated_field(exc)
            if field is None:
                # Not a unique key (e.g. a CHECK constraint): let it surface.
                raise
            logger.debug("Unique key violation on %s.%s", self.model.__name__, field)
            raise DuplicateKeyError(field) from exc

    def _violated_field(self, exc: IntegrityError) -> str | None:
        # SQLite: "UNIQUE constraint failed: users.email"
        # PostgreSQL: 'Key (email)=(...) already exists.'
        detail = str(exc.orig)
        table = self.model.__table__  # type: ignore[attr-defined]
        for column in table.columns:
            if column.unique and column.name in detail:
                return column.name
        return None
