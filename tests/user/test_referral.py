"""Tests for rentify/user/referral.py - Referral codes and loyalty domain."""

import pytest

from rentify.user.exceptions import ReferralCodeUnavailableError
from rentify.user.referral import (
    REFERRAL_ALPHABET,
    generate_referral_code,
    is_loyalty_email,
)


def test_generate_referral_code_length_and_alphabet():
    code = generate_referral_code(12, lambda code: False)

    assert len(code) == 12
    assert set(code) <= set(REFERRAL_ALPHABET)


def test_generate_referral_code_skips_taken_codes():
    seen: list[str] = []

    def is_taken(code: str) -> bool:
        seen.append(code)
        return len(seen) < 3

    code = generate_referral_code(9, is_taken)

    assert code == seen[-1]
    assert len(seen) == 3


def test_generate_referral_code_gives_up():
    with pytest.raises(ReferralCodeUnavailableError):
        generate_referral_code(9, lambda code: True, attempts=4)


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("ana@duoc.cl", True),
        ("ANA@DUOC.CL", True),
        ("ana@profesor.duoc.cl", False),
        ("ana@example.com", False),
    ],
)
def test_is_loyalty_email(email: str, expected: bool):
    assert is_loyalty_email(email, "@duoc.cl") is expected


def test_empty_loyalty_domain_matches_nothing():
    assert is_loyalty_email("ana@duoc.cl", "") is False
