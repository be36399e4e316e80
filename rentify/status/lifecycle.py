"""Account status state machine.

    ACTIVO     -> INACTIVO, SUSPENDIDO
    INACTIVO   -> ACTIVO
    SUSPENDIDO -> ACTIVO, INACTIVO

An account without a status may enter any known status. Staying in the
current status is always allowed. Status names outside StatusName have no
transitions.
"""

from enum import Enum


class StatusName(str, Enum):
    """Known account statuses, in seeding (id) order."""

    ACTIVO = "ACTIVO"
    INACTIVO = "INACTIVO"
    SUSPENDIDO = "SUSPENDIDO"


INITIAL_STATUS = StatusName.ACTIVO

ALLOWED_TRANSITIONS: dict[StatusName, frozenset[StatusName]] = {
    StatusName.ACTIVO: frozenset({StatusName.INACTIVO, StatusName.SUSPENDIDO}),
    StatusName.INACTIVO: frozenset({StatusName.ACTIVO}),
    StatusName.SUSPENDIDO: frozenset({StatusName.ACTIVO, StatusName.INACTIVO}),
}


def _known(name: str) -> StatusName | None:
    try:
        return StatusName(name)
    except ValueError:
        return None


def can_transition(current: str | None, target: str) -> bool:
    """Return True if an account in ``current`` may move to ``target``."""
    if current == target:
        return True
    target_status = _known(target)
    if target_status is None:
        return False
    if current is None:
        return True
    current_status = _known(current)
    if current_status is None:
        return False
    return target_status in ALLOWED_TRANSITIONS[current_status]
