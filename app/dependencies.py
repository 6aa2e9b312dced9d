# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import logging
from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from app.exceptions import StorageError
from lib.database import Database

logger = logging.getLogger(__name__)


def get_connection() -> Iterator[Connection]:
    """
    Check out a pooled connection for the duration of one request.

    Waits at most DB_POOL_TIMEOUT seconds for a free connection; the
    connection goes back to the pool once the response has been produced.

    Raises:
        StorageError: 503 if the pool is exhausted, 500 if connecting fails
    """
    try:
        conn = Database.get_engine().connect()
    except SQLAlchemyError as e:
        logger.error(f"Could not check out a database connection: {e}")
        status_code = 503 if isinstance(e, PoolTimeoutError) else 500
        raise StorageError("connect", e, status_code=status_code)

    try:
        yield conn
    finally:
        conn.close()


# Type alias for dependency injection
ConnectionDep = Annotated[Connection, Depends(get_connection)]
