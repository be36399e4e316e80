"""Tests for rentify/db/engine.py - Database engine and session management."""

import contextlib

from sqlmodel import Session

from rentify.db.engine import get_session


def test_get_session():
    """Test get_session() yields a database session."""
    gen = get_session()
    session = next(gen)

    assert isinstance(session, Session)

    with contextlib.suppress(StopIteration):
        next(gen)
