"""Role registry.

Append-only store of the roles a user may hold.
"""

import logging

from rentify.core.validation import validate_input
from rentify.db.repository import Repository
from rentify.role.exceptions import RoleNotFoundError
from rentify.role.models import Role
from rentify.role.schemas import RoleCreate

logger = logging.getLogger(__name__)


class RoleRegistry:
    def __init__(self, roles: Repository[Role]) -> None:
        self.roles = roles

    def create(self, name: str) -> Role:
        """Store a new role. Duplicate names are allowed."""
        data = validate_input(RoleCreate, {"name": name})
        logger.info("Creating role: %s", data.name)
        role = self.roles.insert(Role(name=data.name))
        self.roles.commit()
        logger.info("Role created with id %s", role.id)
        return role

    def list_all(self) -> list[Role]:
        logger.debug("Listing roles")
        return self.roles.find_all()

    def get_by_id(self, role_id: int) -> Role:
        logger.debug("Fetching role %s", role_id)
        role = self.roles.find_by_id(role_id)
        if role is None:
            raise RoleNotFoundError(f"Role with id {role_id} not found")
        return role

    def get_by_name(self, name: str) -> Role:
        """Exact, case-sensitive match; the oldest role wins on duplicates."""
        role = self.roles.find_by("name", name)
        if role is None:
            raise RoleNotFoundError(f"Role {name} not found")
        return role
