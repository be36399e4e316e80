"""Tests for rentify/db/seed.py - Reference data seeding."""

from rentify.db.seed import seed_reference_data
from rentify.role.service import RoleRegistry
from rentify.status.service import StatusRegistry


def test_seed_populates_empty_registries(roles: RoleRegistry, statuses: StatusRegistry):
    seed_reference_data(roles, statuses)

    assert [r.name for r in roles.list_all()] == ["ADMIN", "PROPIETARIO", "ARRIENDATARIO"]
    assert [s.name for s in statuses.list_all()] == ["ACTIVO", "INACTIVO", "SUSPENDIDO"]


def test_seed_is_idempotent(roles: RoleRegistry, statuses: StatusRegistry):
    seed_reference_data(roles, statuses)
    seed_reference_data(roles, statuses)

    assert len(roles.list_all()) == 3
    assert len(statuses.list_all()) == 3


def test_seed_leaves_existing_data_alone(roles: RoleRegistry, statuses: StatusRegistry):
    roles.create("MODERADOR")

    seed_reference_data(roles, statuses)

    assert [r.name for r in roles.list_all()] == ["MODERADOR"]
    assert len(statuses.list_all()) == 3
