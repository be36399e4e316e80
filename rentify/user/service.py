"""Account directory.

Registration, lookups and the account lifecycle (role, status, loyalty
points). This is the only place that enforces the account invariants:

- no two users share an email
- no two users share a national id
- loyalty points never drop below zero
- ids are assigned by storage, never by the caller

Uniqueness is pre-checked here and backed by the storage unique keys, so a
concurrent duplicate that slips past the pre-check still surfaces as the same
typed error. Nothing is stored when registration fails.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from rentify.core.exceptions import ConflictError
from rentify.core.mixins import utc_now
from rentify.core.settings import Settings
from rentify.core.validation import validate_input
from rentify.db.repository import DuplicateKeyError, Repository
from rentify.role.exceptions import RoleNotFoundError
from rentify.role.models import Role
from rentify.role.service import RoleRegistry
from rentify.status.exceptions import InvalidStatusTransitionError
from rentify.status.lifecycle import INITIAL_STATUS, can_transition
from rentify.status.models import Status
from rentify.status.service import StatusRegistry
from rentify.user.exceptions import (
    DuplicateEmailError,
    DuplicateNationalIdError,
    InsufficientPointsError,
    ReferralCodeNotFoundError,
    UnderageUserError,
    UnknownRoleError,
    UserNotFoundError,
)
from rentify.user.models import User
from rentify.user.referral import generate_referral_code, is_loyalty_email
from rentify.user.schemas import UserCreate, UserUpdate, normalize_email

logger = logging.getLogger(__name__)


def age_on(birth_date: date, today: date) -> int:
    """Whole years elapsed between ``birth_date`` and ``today``."""
    had_birthday = (today.month, today.day) >= (birth_date.month, birth_date.day)
    return today.year - birth_date.year - (0 if had_birthday else 1)


class AccountDirectory:
    def __init__(
        self,
        users: Repository[User],
        roles: RoleRegistry,
        statuses: StatusRegistry,
        settings: Settings,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.users = users
        self.roles = roles
        self.statuses = statuses
        self.settings = settings
        self.today = today

    # --- registration ---

    def register(self, draft: UserCreate | Mapping[str, Any]) -> User:
        """Validate and store a new account.

        Raises:
            ValidationError: If a field is missing or out of bounds
            UnderageUserError: If the applicant is under the minimum age
            DuplicateEmailError: If the email is already registered
            DuplicateNationalIdError: If the national id is already registered
            UnknownRoleError: If role_id does not match a role
            ReferralCodeNotFoundError: If referred_by matches no user
        """
        data = validate_input(UserCreate, draft)
        logger.info("Registering user: %s", data.email)

        self._check_age(data.birth_date)
        self._check_email_free(data.email)
        if self.users.find_by("national_id", data.national_id) is not None:
            raise DuplicateNationalIdError(
                f"National id {data.national_id} is already registered"
            )

        role = self._resolve_role(data.role_id) if data.role_id is not None else None
        referrer = self._resolve_referrer(data.referred_by) if data.referred_by else None
        status = self._initial_status()
        referral_code = data.referral_code or generate_referral_code(
            self.settings.referral_code_length,
            lambda code: self.users.find_by("referral_code", code) is not None,
        )

        now = utc_now()
        user = User(
            first_name=data.first_name,
            middle_name=data.middle_name,
            last_name=data.last_name,
            birth_date=data.birth_date,
            email=data.email,
            national_id=data.national_id,
            phone=data.phone,
            password_hash=data.password_hash,
            loyalty_flag=data.loyalty_flag
            or is_loyalty_email(data.email, self.settings.loyalty_email_domain),
            loyalty_points=0,
            referral_code=referral_code,
            role_id=role.id if role else None,
            role=role,
            status_id=status.id if status else None,
            status=status,
            created_at=now,
            updated_at=now,
        )

        try:
            user = self.users.insert(user)
        except DuplicateKeyError as exc:
            raise self._duplicate_error(exc, data.email, data.national_id) from exc

        if referrer is not None:
            referrer.loyalty_points += self.settings.referral_bonus_points
            referrer.touch()
            self.users.update(referrer)
            logger.info(
                "Credited %d referral points to user %s",
                self.settings.referral_bonus_points,
                referrer.id,
            )

        self.users.commit()
        logger.info(
            "User registered with id %s (loyalty: %s)",
            user.id,
            user.loyalty_flag,
            extra={"user_id": user.id},
        )
        return user

    # --- lookups ---

    def list_all(self) -> list[User]:
        logger.debug("Listing users")
        return self.users.find_all()

    def get_by_id(self, user_id: int) -> User:
        logger.debug("Fetching user %s", user_id)
        user = self.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User with id {user_id} not found")
        return user

    def get_by_email(self, email: str) -> User:
        logger.debug("Fetching user by email %s", email)
        try:
            key = normalize_email(email)
        except PydanticValidationError as exc:
            raise UserNotFoundError(f"User with email {email} not found") from exc
        user = self.users.find_by("email", key)
        if user is None:
            raise UserNotFoundError(f"User with email {email} not found")
        return user

    def list_by_role(self, role_id: int) -> list[User]:
        self.roles.get_by_id(role_id)
        return self.users.find_all_by("role_id", role_id)

    def list_loyalty_members(self) -> list[User]:
        return self.users.find_all_by("loyalty_flag", True)

    def exists(self, user_id: int) -> bool:
        return self.users.find_by_id(user_id) is not None

    # --- mutations ---

    def update(self, user_id: int, changes: UserUpdate | Mapping[str, Any]) -> User:
        """Apply a partial profile update.

        A new email must be free; the loyalty flag follows the new email.
        """
        user = self.get_by_id(user_id)
        data = validate_input(UserUpdate, changes).model_dump(exclude_unset=True)
        updates = {key: value for key, value in data.items() if value is not None}
        logger.info("Updating user %s: %s", user_id, sorted(updates))

        new_email = updates.get("email")
        if new_email is not None and new_email != user.email:
            self._check_email_free(new_email, exclude_id=user.id)
            user.loyalty_flag = is_loyalty_email(
                new_email, self.settings.loyalty_email_domain
            )

        for key, value in updates.items():
            setattr(user, key, value)
        return self._save(user)

    def change_role(self, user_id: int, role_id: int) -> User:
        user = self.get_by_id(user_id)
        role = self._resolve_role(role_id)
        logger.info("Changing role of user %s to %s", user_id, role.name)
        user.role_id = role.id
        user.role = role
        return self._save(user)

    def change_status(self, user_id: int, status_id: int) -> User:
        """Move an account to another status.

        Raises:
            StatusNotFoundError: If the target status does not exist
            InvalidStatusTransitionError: If the lifecycle forbids the move
        """
        user = self.get_by_id(user_id)
        target = self.statuses.get_by_id(status_id)
        current = user.status.name if user.status is not None else None
        if not can_transition(current, target.name):
            raise InvalidStatusTransitionError(
                f"Cannot change status from {current} to {target.name}"
            )
        logger.info("Changing status of user %s: %s -> %s", user_id, current, target.name)
        user.status_id = target.id
        user.status = target
        return self._save(user)

    def add_points(self, user_id: int, points: int) -> User:
        """Add ``points`` (negative to redeem) to the user's balance."""
        user = self.get_by_id(user_id)
        balance = user.loyalty_points + points
        if balance < 0:
            raise InsufficientPointsError(
                f"User {user_id} has {user.loyalty_points} points, cannot apply {points}"
            )
        user.loyalty_points = balance
        logger.info("Points for user %s: %+d, total %d", user_id, points, balance)
        return self._save(user)

    # --- helpers ---

    def _save(self, user: User) -> User:
        user.touch()
        try:
            self.users.update(user)
        except DuplicateKeyError as exc:
            raise self._duplicate_error(exc, user.email, user.national_id) from exc
        self.users.commit()
        return user

    def _check_age(self, birth_date: date) -> None:
        minimum = self.settings.min_user_age
        if age_on(birth_date, self.today()) < minimum:
            raise UnderageUserError(f"Must be at least {minimum} years old to register")

    def _check_email_free(self, email: str, exclude_id: int | None = None) -> None:
        existing = self.users.find_by("email", email)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEmailError(f"Email {email} is already registered")

    def _resolve_role(self, role_id: int) -> Role:
        try:
            return self.roles.get_by_id(role_id)
        except RoleNotFoundError as exc:
            raise UnknownRoleError(f"Role with id {role_id} does not exist") from exc

    def _resolve_referrer(self, code: str) -> User:
        referrer = self.users.find_by("referral_code", code)
        if referrer is None:
            raise ReferralCodeNotFoundError(f"Referral code {code} not found")
        return referrer

    def _initial_status(self) -> Status | None:
        status = self.statuses.find_by_name(INITIAL_STATUS.value)
        if status is None:
            logger.warning(
                "Status %s is not registered; account created without status",
                INITIAL_STATUS.value,
            )
        return status

    def _duplicate_error(
        self, exc: DuplicateKeyError, email: str, national_id: str
    ) -> ConflictError:
        if exc.field == "national_id":
            return DuplicateNationalIdError(
                f"National id {national_id} is already registered"
            )
        if exc.field == "email":
            return DuplicateEmailError(f"Email {email} is already registered")
        return ConflictError("Account conflicts with an existing record")
