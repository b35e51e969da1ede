# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Backs every test with a fresh in-memory SQLite database
# - Provides a TestClient wired to that database
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.dependencies import get_engine
from app.main import app


SCHEMA = [
    "CREATE TABLE person (id INTEGER PRIMARY KEY, name TEXT, age INTEGER)",
    "CREATE TABLE role (username TEXT, password TEXT)",
]


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """In-memory SQLite engine with the person and role tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        for statement in SCHEMA:
            conn.execute(text(statement))
    yield engine
    engine.dispose()


@pytest.fixture
def broken_engine():
    """Engine stand-in whose every connection attempt fails."""
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    mock = MagicMock()
    mock.connect.side_effect = error
    mock.begin.side_effect = error
    return mock


@pytest.fixture
def seed_person(engine):
    """Insert a person directly and return its id."""
    def _seed(name: str, age: int) -> int:
        with engine.begin() as conn:
            return conn.execute(
                text("INSERT INTO person (name, age) VALUES (:name, :age) RETURNING id"),
                {"name": name, "age": age},
            ).scalar_one()
    return _seed


@pytest.fixture
def seed_credential(engine):
    """Insert a username/password row."""
    def _seed(username: str, password: str) -> None:
        with engine.begin() as conn:
            conn.execute(
                text("INSERT INTO role (username, password) VALUES (:u, :p)"),
                {"u": username, "p": password},
            )
    return _seed


@pytest.fixture
def read_person(engine):
    """Read a person row straight from storage, bypassing the API."""
    def _read(person_id: int):
        with engine.connect() as conn:
            row = conn.execute(
                text("SELECT id, name, age FROM person WHERE id = :id"),
                {"id": person_id},
            ).mappings().first()
        return dict(row) if row else None
    return _read


@pytest.fixture
def count_persons(engine):
    """Number of rows in the person table."""
    def _count() -> int:
        with engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM person")).scalar_one()
    return _count


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def client(engine):
    """TestClient whose requests hit the in-memory database."""
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_engine):
    """TestClient whose database is unreachable."""
    app.dependency_overrides[get_engine] = lambda: broken_engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def compat_mode(monkeypatch):
    """Restore the silent-success behaviour for unknown ids."""
    monkeypatch.setattr(settings, "MISSING_PERSON_IS_NOT_FOUND", False)
