"""Tests for the exception hierarchy and the global exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from hypothesis import given
from hypothesis import strategies as st

from rentify.core.exception_handlers import register_exception_handlers
from rentify.core.exceptions import (
    AppException,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from rentify.role.exceptions import RoleNotFoundError
from rentify.status.exceptions import (
    InvalidStatusTransitionError,
    StatusExistsError,
    StatusNotFoundError,
)
from rentify.user.exceptions import (
    DuplicateEmailError,
    DuplicateNationalIdError,
    InsufficientPointsError,
    ReferralCodeNotFoundError,
    ReferralCodeUnavailableError,
    UnderageUserError,
    UnknownRoleError,
    UserNotFoundError,
)


@pytest.mark.parametrize(
    ("exc_class", "base", "status_code"),
    [
        (RoleNotFoundError, NotFoundError, 404),
        (StatusNotFoundError, NotFoundError, 404),
        (UserNotFoundError, NotFoundError, 404),
        (ReferralCodeNotFoundError, NotFoundError, 404),
        (StatusExistsError, ConflictError, 409),
        (InvalidStatusTransitionError, ConflictError, 409),
        (DuplicateEmailError, ConflictError, 409),
        (DuplicateNationalIdError, ConflictError, 409),
        (ReferralCodeUnavailableError, ConflictError, 409),
        (UnknownRoleError, ValidationError, 400),
        (UnderageUserError, ValidationError, 400),
        (InsufficientPointsError, ValidationError, 400),
    ],
)
def test_domain_errors_map_to_status_codes(exc_class, base, status_code):
    exc = exc_class()

    assert isinstance(exc, base)
    assert isinstance(exc, AppException)
    assert exc.status_code == status_code
    assert exc.error_type
    assert exc.message


@given(message=st.text())
def test_message_is_preserved(message: str):
    exc = DuplicateEmailError(message)

    assert exc.message == message
    assert str(exc) == message


def _app_raising(exc: Exception) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    return TestClient(app, raise_server_exceptions=False)


def test_app_exception_rendered_as_json():
    client = _app_raising(UserNotFoundError("User with id 7 not found"))

    response = client.get("/boom")

    assert response.status_code == 404
    assert response.json() == {
        "type": "user_not_found",
        "message": "User with id 7 not found",
    }


def test_unhandled_exception_hides_details():
    client = _app_raising(RuntimeError("secret stack detail"))

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "type": "internal_error",
        "message": "An unexpected error occurred",
    }
