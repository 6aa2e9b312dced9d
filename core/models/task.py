# =============================================================================
# core/models/task.py - Task Schemas
# =============================================================================
# These models define the API contract for the to-do resource:
# - Task: A persisted row of the `tasks` table
# - Todo: The creation payload (description only)
#
# Tasks are created from a Todo, flipped with toggle, and deleted.
# There is no way to change a description after creation.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """
    Schema for a persisted task.

    Returned by every read, insert and toggle operation.

    Example:
        {
            "id": 1,
            "description": "buy milk",
            "completed": false
        }
    """

    # Assigned by the database on insert, never changed afterwards
    id: int = Field(
        ...,
        description="Unique task identifier"
    )

    description: str = Field(
        ...,
        description="What needs to be done"
    )

    completed: bool = Field(
        default=False,
        description="Whether the task has been done"
    )

    # Rows come back from SQLAlchemy as Row objects with attribute access
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {"id": 1, "description": "buy milk", "completed": False}
        },
    )


class Todo(BaseModel):
    """
    Schema for creating a task.

    Only the description is supplied; the id is assigned by storage and
    `completed` always starts out false.

    Example:
        {
            "description": "buy milk"
        }
    """

    description: str = Field(
        ...,
        description="What needs to be done"
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"description": "buy milk"}},
    )
