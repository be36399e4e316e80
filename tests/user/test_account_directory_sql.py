"""Tests for the account directory against SQLite storage."""

import pytest
from sqlmodel import Session

from rentify.user.exceptions import (
    DuplicateEmailError,
    DuplicateNationalIdError,
    InsufficientPointsError,
)
from rentify.user.models import User
from rentify.user.service import AccountDirectory


def test_register_persists_relationships(directory: AccountDirectory, user_payload):
    user = directory.register(user_payload(role_id=3))

    stored = directory.get_by_id(user.id)

    assert stored.role is not None
    assert stored.role.name == "ARRIENDATARIO"
    assert stored.status is not None
    assert stored.status.name == "ACTIVO"


def test_register_commits(directory: AccountDirectory, session: Session, user_payload):
    user = directory.register(user_payload())
    session.expire_all()

    assert session.get(User, user.id) is not None


def test_email_race_maps_storage_conflict(
    directory: AccountDirectory, monkeypatch: pytest.MonkeyPatch, user_payload
):
    directory.register(user_payload())
    # A concurrent writer that passed the pre-checks.
    monkeypatch.setattr(directory.users, "find_by", lambda field, value: None)

    with pytest.raises(DuplicateEmailError):
        directory.register(user_payload(national_id="22222222-2"))

    monkeypatch.undo()
    assert len(directory.list_all()) == 1


def test_national_id_race_maps_storage_conflict(
    directory: AccountDirectory, monkeypatch: pytest.MonkeyPatch, user_payload
):
    directory.register(user_payload())
    monkeypatch.setattr(directory.users, "find_by", lambda field, value: None)

    with pytest.raises(DuplicateNationalIdError):
        directory.register(user_payload(email="otra@example.com"))

    monkeypatch.undo()
    assert len(directory.list_all()) == 1


def test_failed_registration_does_not_credit_referrer(
    directory: AccountDirectory, user_payload
):
    referrer = directory.register(user_payload(referral_code="ANAREF"))

    with pytest.raises(DuplicateEmailError):
        directory.register(user_payload(national_id="22222222-2", referred_by="ANAREF"))

    assert directory.get_by_id(referrer.id).loyalty_points == 0


def test_update_email_conflict_keeps_row(directory: AccountDirectory, user_payload):
    directory.register(user_payload())
    other = directory.register(
        user_payload(email="beto@example.com", national_id="22222222-2")
    )

    with pytest.raises(DuplicateEmailError):
        directory.update(other.id, {"email": "ana@example.com"})

    assert directory.get_by_email("beto@example.com").id == other.id


def test_points_survive_reload(
    directory: AccountDirectory, session: Session, user_payload
):
    user = directory.register(user_payload())
    directory.add_points(user.id, 40)
    session.expire_all()

    assert directory.get_by_id(user.id).loyalty_points == 40

    with pytest.raises(InsufficientPointsError):
        directory.add_points(user.id, -41)


def test_list_by_role_and_loyalty(directory: AccountDirectory, user_payload):
    owner = directory.register(user_payload(role_id=2, email="ana@duoc.cl"))
    directory.register(
        user_payload(role_id=3, email="beto@example.com", national_id="22222222-2")
    )

    assert [u.id for u in directory.list_by_role(2)] == [owner.id]
    assert [u.id for u in directory.list_loyalty_members()] == [owner.id]
