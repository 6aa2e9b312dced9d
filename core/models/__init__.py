# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - task.py: Task (persisted row) and Todo (creation payload)
#
# These models define the "contract" between API and clients.
# =============================================================================

from .task import Task, Todo

__all__ = [
    "Task",
    "Todo",
]
