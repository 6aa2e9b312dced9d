# =============================================================================
# lib/database.py - SQLAlchemy Engine and Schema
# =============================================================================
# This module owns the relational store the Task Store talks to:
# - A singleton SQLAlchemy engine with an explicit connection pool policy
# - The `tasks` table definition (SQLAlchemy Core)
# - Schema creation and engine disposal for the app lifespan
#
# Connections are checked out per request (see app/dependencies.py) and
# returned to the pool when the request finishes.
#
# Usage:
#   from lib.database import Database, tasks
#   with Database.get_engine().connect() as conn:
#       rows = conn.execute(select(tasks)).all()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import (
    Boolean,
    Column,
    Engine,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    false,
)
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import QueuePool

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Schema
# =============================================================================

metadata = MetaData()

tasks = Table(
    "tasks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", Text, nullable=False),
    Column("completed", Boolean, nullable=False, default=False, server_default=false()),
)


# =============================================================================
# Errors
# =============================================================================

class DatabaseError(Exception):
    """
    Error while setting up the database engine.

    Carries a suggestion telling the operator how to fix the configuration.
    """

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


# =============================================================================
# Engine Singleton
# =============================================================================

class Database:
    """
    Holder for the process-wide SQLAlchemy engine.

    All methods are class methods: the engine is created lazily from
    settings on first use, or explicitly with `configure()` (tests point it
    at a temporary SQLite file this way).

    Example:
        Database.configure("sqlite:///./tasks.db")
        Database.init_schema()
        with Database.get_engine().connect() as conn:
            ...
        Database.dispose()
    """

    _engine: Engine | None = None

    @classmethod
    def configure(cls, url: str | None = None, **overrides: Any) -> Engine:
        """
        Build a new engine, replacing (and disposing) any existing one.

        Args:
            url: SQLAlchemy database URL (defaults to settings.DATABASE_URL)
            **overrides: Extra create_engine keyword arguments

        Returns:
            Engine: The new engine

        Raises:
            DatabaseError: If the URL is invalid or the driver is missing
        """
        cls.dispose()

        url = url or settings.DATABASE_URL
        try:
            parsed = make_url(url)
        except ArgumentError as e:
            raise DatabaseError(
                message=f"Invalid database URL: {e}",
                code="INVALID_DATABASE_URL",
                suggestion="Set DATABASE_URL to a SQLAlchemy URL, e.g. sqlite:///./tasks.db",
                details={"url": url},
            )

        options: dict[str, Any] = {
            "poolclass": QueuePool,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_pre_ping": settings.DB_POOL_PRE_PING,
            "echo": settings.DB_ECHO,
        }
        if parsed.get_backend_name() == "sqlite":
            if parsed.database in (None, "", ":memory:"):
                raise DatabaseError(
                    message="In-memory SQLite cannot be shared through a connection pool",
                    code="UNSUPPORTED_DATABASE_URL",
                    suggestion="Use a file database such as sqlite:///./tasks.db",
                    details={"url": url},
                )
            # Pooled connections are used from FastAPI's worker threads
            options["connect_args"] = {"check_same_thread": False}
        options.update(overrides)

        try:
            cls._engine = create_engine(parsed, **options)
        except Exception as e:
            raise DatabaseError(
                message=f"Failed to create database engine: {e}",
                code="ENGINE_INIT_FAILED",
                suggestion="Check DATABASE_URL and that the database driver is installed",
                details={"url": parsed.render_as_string(hide_password=True)},
            )

        logger.info(
            f"Database engine initialized: {parsed.render_as_string(hide_password=True)} "
            f"(pool_size={options['pool_size']}, timeout={options['pool_timeout']}s)"
        )
        return cls._engine

    @classmethod
    def get_engine(cls) -> Engine:
        """
        Get or create the singleton engine.

        Returns:
            Engine: SQLAlchemy engine bound to settings.DATABASE_URL
        """
        if cls._engine is None:
            cls.configure()
        return cls._engine

    @classmethod
    def init_schema(cls) -> None:
        """Create the `tasks` table if it does not exist yet."""
        metadata.create_all(cls.get_engine())
        logger.debug("Database schema ensured")

    @classmethod
    def dispose(cls) -> None:
        """Close all pooled connections and forget the engine."""
        if cls._engine is not None:
            cls._engine.dispose()
            cls._engine = None
            logger.debug("Database engine disposed")
