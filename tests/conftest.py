# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Gives every test its own SQLite database file
# - Provides a raw connection (task store tests) and a TestClient (API tests)
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DB_POOL_SIZE", "2")
os.environ.setdefault("DB_POOL_TIMEOUT", "5")

import pytest
from fastapi.testclient import TestClient

from lib.database import Database


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite file for one test."""
    return f"sqlite:///{tmp_path / 'tasks.db'}"


@pytest.fixture
def engine(database_url):
    """Engine pointed at the test database, with the schema created."""
    engine = Database.configure(database_url)
    Database.init_schema()
    yield engine
    Database.dispose()


@pytest.fixture
def connection(engine):
    """A pooled connection with no open transaction."""
    with engine.connect() as conn:
        yield conn


@pytest.fixture
def client(engine):
    """TestClient for the app, backed by the test database."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def sample_descriptions():
    """Task descriptions in insertion order."""
    return ["buy milk", "walk the dog", "write report"]
