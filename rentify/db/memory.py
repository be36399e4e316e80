"""In-memory repository implementing the same contract as SqlRepository."""

from collections.abc import Iterable
from typing import Any

from sqlmodel import SQLModel

from rentify.db.repository import DuplicateKeyError


class InMemoryRepository[M: SQLModel]:
    """Dict-backed repository for tests and scripting.

    Unique keys are declared explicitly since there is no schema to read
    them from. Ids are sequential integers starting at 1. A failed write
    leaves the store untouched; there is no rollback of earlier writes.
    """

    def __init__(self, unique: Iterable[str] = ()) -> None:
        self.unique = tuple(unique)
        self.commits = 0
        self._records: dict[int, M] = {}
        self._next_id = 1

    def insert(self, record: M) -> M:
        self._check_unique(record)
        record.id = self._next_id  # type: ignore[attr-defined]
        self._next_id += 1
        self._records[record.id] = record  # type: ignore[attr-defined]
        return record

    def update(self, record: M) -> M:
        self._check_unique(record)
        self._records[record.id] = record  # type: ignore[attr-defined]
        return record

    def find_by_id(self, record_id: int) -> M | None:
        return self._records.get(record_id)

    def find_all(self) -> list[M]:
        return [self._records[key] for key in sorted(self._records)]

    def find_by(self, field: str, value: Any) -> M | None:
        for record in self.find_all():
            if getattr(record, field) == value:
                return record
        return None

    def find_all_by(self, field: str, value: Any) -> list[M]:
        return [r for r in self.find_all() if getattr(r, field) == value]

    def commit(self) -> None:
        self.commits += 1

    def _check_unique(self, record: M) -> None:
        record_id = getattr(record, "id", None)
        for field in self.unique:
            value = getattr(record, field)
            for other in self._records.values():
                if other is record or (record_id is not None and other.id == record_id):  # type: ignore[attr-defined]
                    continue
                if getattr(other, field) == value:
                    raise DuplicateKeyError(field)
