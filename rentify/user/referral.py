"""Referral code generation and loyalty helpers."""

import logging
import secrets
import string
from collections.abc import Callable

from rentify.user.exceptions import ReferralCodeUnavailableError

logger = logging.getLogger(__name__)

REFERRAL_ALPHABET = string.ascii_uppercase + string.digits
MAX_GENERATION_ATTEMPTS = 10


def generate_referral_code(
    length: int,
    is_taken: Callable[[str], bool],
    attempts: int = MAX_GENERATION_ATTEMPTS,
) -> str:
    """Generate an unused upper-case alphanumeric code.

    Args:
        length: Number of characters in the code
        is_taken: Returns True when a candidate is already assigned
        attempts: Candidates to try before giving up

    Raises:
        ReferralCodeUnavailableError: If every candidate was taken
    """
    for _ in range(attempts):
        code = "".join(secrets.choice(REFERRAL_ALPHABET) for _ in range(length))
        if not is_taken(code):
            return code
    logger.error("No unique referral code after %d attempts", attempts)
    raise ReferralCodeUnavailableError()


def is_loyalty_email(email: str, domain: str) -> bool:
    """True when ``email`` belongs to the loyalty domain (case-insensitive)."""
    return bool(domain) and email.lower().endswith(domain.lower())
