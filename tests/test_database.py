# =============================================================================
# tests/test_database.py - Engine, Pool and Settings Tests
# =============================================================================
# Tests for lib/database.py, the per-request connection dependency and the
# pool-related settings.
# =============================================================================

import pytest
from pydantic import ValidationError
from sqlalchemy import inspect

from app.config import Settings
from app.dependencies import get_connection
from app.exceptions import StorageError
from lib.database import Database, DatabaseError


class TestDatabase:
    """Tests for the engine singleton."""

    def test_configure_creates_schema(self, engine):
        """Test that init_schema creates the tasks table."""
        columns = {c["name"] for c in inspect(engine).get_columns("tasks")}

        assert columns == {"id", "description", "completed"}

    def test_get_engine_returns_singleton(self, engine):
        """Test that the configured engine is reused."""
        assert Database.get_engine() is engine

    def test_pool_policy_from_settings(self, engine):
        """Test that pool size and timeout come from settings."""
        assert engine.pool.size() == 2
        assert engine.pool.timeout() == 5

    def test_in_memory_sqlite_rejected(self):
        """Test that a pooled in-memory database is refused."""
        with pytest.raises(DatabaseError) as exc_info:
            Database.configure("sqlite://")

        assert exc_info.value.code == "UNSUPPORTED_DATABASE_URL"

    def test_invalid_url_rejected(self):
        """Test that a malformed URL gives an actionable error."""
        with pytest.raises(DatabaseError) as exc_info:
            Database.configure("not a url")

        assert exc_info.value.code == "INVALID_DATABASE_URL"
        assert "DATABASE_URL" in str(exc_info.value)

    def test_dispose_forgets_engine(self, database_url):
        """Test that dispose drops the singleton."""
        Database.configure(database_url)
        Database.dispose()

        assert Database._engine is None


class TestGetConnection:
    """Tests for the per-request connection dependency."""

    def test_yields_and_closes(self, engine):
        """Test that the connection is returned after the request."""
        dependency = get_connection()
        conn = next(dependency)

        assert not conn.closed
        dependency.close()
        assert conn.closed

    def test_pool_timeout_is_503(self, database_url):
        """Test that an exhausted pool fails fast with 503."""
        engine = Database.configure(database_url, pool_size=1, max_overflow=0, pool_timeout=0.1)
        try:
            with engine.connect():
                with pytest.raises(StorageError) as exc_info:
                    next(get_connection())
        finally:
            Database.dispose()

        assert exc_info.value.status_code == 503
        assert exc_info.value.operation == "connect"


class TestSettings:
    """Tests for database settings validation."""

    def test_defaults(self, monkeypatch):
        """Test the development defaults."""
        for name in ("DATABASE_URL", "DB_POOL_SIZE", "DB_POOL_TIMEOUT", "DEBUG"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL == "sqlite:///./tasks.db"
        assert settings.DB_POOL_SIZE == 5
        assert settings.DB_POOL_TIMEOUT == 30.0
        assert settings.is_sqlite
        assert settings.is_development

    def test_pool_timeout_must_be_positive(self):
        """Test that a zero checkout timeout is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DB_POOL_TIMEOUT=0)

    def test_cors_origins_list(self):
        """Test comma-separated CORS origins parsing."""
        settings = Settings(
            _env_file=None,
            CORS_ORIGINS="http://localhost:3000, https://example.com,",
        )

        assert settings.cors_origins_list == ["http://localhost:3000", "https://example.com"]
