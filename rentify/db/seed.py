"""Reference data seeding.

Populates the role and status registries on a fresh database. Each registry
is seeded only when it is empty, so restarts never add duplicates.
"""

import logging

from rentify.role.models import RoleName
from rentify.role.service import RoleRegistry
from rentify.status.lifecycle import StatusName
from rentify.status.service import StatusRegistry

logger = logging.getLogger(__name__)


def seed_reference_data(roles: RoleRegistry, statuses: StatusRegistry) -> None:
    if roles.list_all():
        logger.info("Roles already present, skipping seed")
    else:
        for role_name in RoleName:
            roles.create(role_name.value)
        logger.info("Seeded %d roles", len(RoleName))

    if statuses.list_all():
        logger.info("Statuses already present, skipping seed")
    else:
        for status_name in StatusName:
            statuses.create(status_name.value)
        logger.info("Seeded %d statuses", len(StatusName))
