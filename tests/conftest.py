# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets database environment variables before any application import (the
# module-level app validates them at import time) and provides a SQLite
# stand-in for the PostgreSQL users table.
# =============================================================================

import os

os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_NAME", "users_test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from users_api.app.core import db
from users_api.app.main import create_app


USERS_DDL = "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL)"


def make_users_engine(rows=(), ddl=USERS_DDL):
    """In-memory SQLite engine holding a ``users`` table with ``rows``."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        conn.execute(text(ddl))
        for user_id, name in rows:
            conn.execute(
                text("INSERT INTO users (id, name) VALUES (:id, :name)"),
                {"id": user_id, "name": name},
            )
    return engine


@pytest.fixture
def sample_rows():
    return [(1, "Alice"), (2, "Bob")]


@pytest.fixture
def users_engine(sample_rows):
    engine = make_users_engine(sample_rows)
    yield engine
    engine.dispose()


@pytest.fixture
def unreachable_engine(tmp_path):
    """Engine whose database file lives in a directory that does not exist."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def api_client(users_engine):
    with TestClient(create_app(engine=users_engine)) as client:
        yield client


@pytest.fixture(autouse=True)
def reset_engine():
    yield
    db.dispose_engine()
