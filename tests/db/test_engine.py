"""Tests for mentor_match/db/engine.py - Database engine and session management."""

import contextlib

from sqlalchemy import inspect, text
from sqlmodel import Session, create_engine

from mentor_match.db.engine import enable_sqlite_foreign_keys, get_session, init_db


def test_get_session():
    """Test get_session() yields a database session."""
    gen = get_session()
    session = next(gen)

    assert isinstance(session, Session)

    with contextlib.suppress(StopIteration):
        next(gen)


def test_enable_sqlite_foreign_keys():
    engine = create_engine("sqlite://")
    enable_sqlite_foreign_keys(engine)

    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_init_db_creates_tables(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'init.db'}")

    init_db(engine)

    inspector = inspect(engine)
    assert {"users", "match_requests"} <= set(inspector.get_table_names())
    index_names = {ix["name"] for ix in inspector.get_indexes("match_requests")}
    assert "uq_match_requests_pending_pair" in index_names
