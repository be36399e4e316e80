"""Tests for rentify/status/service.py - Status registry."""

import pytest

from rentify.core.exceptions import ValidationError
from rentify.db.memory import InMemoryRepository
from rentify.status.exceptions import StatusExistsError, StatusNotFoundError
from rentify.status.models import Status
from rentify.status.service import StatusRegistry


def test_create_assigns_id(statuses: StatusRegistry):
    status = statuses.create("ACTIVO")

    assert status.id is not None
    assert status.name == "ACTIVO"


def test_get_by_name_returns_exact_match(statuses: StatusRegistry):
    activo = statuses.create("ACTIVO")
    statuses.create("INACTIVO")

    found = statuses.get_by_name("ACTIVO")

    assert found.id == activo.id
    assert found.name == "ACTIVO"


def test_get_by_name_is_case_sensitive(statuses: StatusRegistry):
    statuses.create("ACTIVO")

    with pytest.raises(StatusNotFoundError, match="Status activo not found"):
        statuses.get_by_name("activo")


def test_find_by_name_missing_returns_none(statuses: StatusRegistry):
    assert statuses.find_by_name("SUSPENDIDO") is None


def test_create_rejects_duplicate_name(statuses: StatusRegistry):
    statuses.create("ACTIVO")

    with pytest.raises(StatusExistsError):
        statuses.create("ACTIVO")

    assert len(statuses.list_all()) == 1


def test_get_by_id(statuses: StatusRegistry):
    created = statuses.create("SUSPENDIDO")

    assert statuses.get_by_id(created.id) == created


def test_get_by_id_not_found(statuses: StatusRegistry):
    with pytest.raises(StatusNotFoundError):
        statuses.get_by_id(7)


def test_create_rejects_long_name(statuses: StatusRegistry):
    with pytest.raises(ValidationError):
        statuses.create("S" * 21)


def test_list_all_is_stable(statuses: StatusRegistry):
    for name in ("ACTIVO", "INACTIVO", "SUSPENDIDO"):
        statuses.create(name)

    first = {(s.id, s.name) for s in statuses.list_all()}
    second = {(s.id, s.name) for s in statuses.list_all()}

    assert first == second
    assert len(first) == 3


def test_get_by_name_first_created_wins_over_legacy_duplicates():
    # Rows inserted before the unique constraint existed.
    repository = InMemoryRepository()
    oldest = repository.insert(Status(name="ACTIVO"))
    repository.insert(Status(name="ACTIVO"))

    assert StatusRegistry(repository).get_by_name("ACTIVO").id == oldest.id


def test_create_maps_storage_conflict():
    repository = InMemoryRepository(unique=("name",))
    repository.insert(Status(name="ACTIVO"))
    registry = StatusRegistry(repository)
    # Simulate a concurrent writer that slipped past the pre-check.
    registry.find_by_name = lambda name: None  # type: ignore[method-assign]

    with pytest.raises(StatusExistsError):
        registry.create("ACTIVO")
