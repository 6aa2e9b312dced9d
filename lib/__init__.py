# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable infrastructure:
# - database.py: SQLAlchemy engine singleton, pool policy, tasks table
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Database, DatabaseError, metadata, tasks

__all__ = [
    "Database",
    "DatabaseError",
    "metadata",
    "tasks",
]
