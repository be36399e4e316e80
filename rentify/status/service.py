"""Status registry.

Append-only store of account statuses, looked up by id or by name.
"""

import logging

from rentify.core.validation import validate_input
from rentify.db.repository import DuplicateKeyError, Repository
from rentify.status.exceptions import StatusExistsError, StatusNotFoundError
from rentify.status.models import Status
from rentify.status.schemas import StatusCreate

logger = logging.getLogger(__name__)


class StatusRegistry:
    def __init__(self, statuses: Repository[Status]) -> None:
        self.statuses = statuses

    def create(self, name: str) -> Status:
        """Store a new status.

        Raises:
            ValidationError: If the name is empty or longer than 20 chars
            StatusExistsError: If a status with this name already exists
        """
        data = validate_input(StatusCreate, {"name": name})
        logger.info("Creating status: %s", data.name)
        if self.find_by_name(data.name) is not None:
            raise StatusExistsError(f"Status {data.name} already exists")
        try:
            status = self.statuses.insert(Status(name=data.name))
        except DuplicateKeyError as exc:
            raise StatusExistsError(f"Status {data.name} already exists") from exc
        self.statuses.commit()
        logger.info("Status created with id %s", status.id)
        return status

    def list_all(self) -> list[Status]:
        logger.debug("Listing statuses")
        return self.statuses.find_all()

    def get_by_id(self, status_id: int) -> Status:
        logger.debug("Fetching status %s", status_id)
        status = self.statuses.find_by_id(status_id)
        if status is None:
            raise StatusNotFoundError(f"Status with id {status_id} not found")
        return status

    def find_by_name(self, name: str) -> Status | None:
        """Case-sensitive exact match; the oldest status wins on duplicates."""
        return self.statuses.find_by("name", name)

    def get_by_name(self, name: str) -> Status:
        logger.debug("Fetching status %s", name)
        status = self.find_by_name(name)
        if status is None:
            raise StatusNotFoundError(f"Status {name} not found")
        return status
