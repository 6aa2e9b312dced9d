# =============================================================================
# core/services/task_service.py - Task Store
# =============================================================================
# All reads and writes of the `tasks` table go through this module.
# Every operation runs against a connection handed in by the caller (one per
# HTTP request) and opens its own transaction on it, so the connection must
# not already be inside a transaction.
#
# Outcomes:
#   found / done      -> Task, list[Task] or True
#   no such row       -> None or False
#   database failure  -> StorageError (transaction rolled back)
# =============================================================================

import logging

from sqlalchemy import Connection, delete, insert, not_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from app.exceptions import StorageError
from core.models.task import Task, Todo
from lib.database import tasks

logger = logging.getLogger(__name__)


def _storage_error(operation: str, error: Exception) -> StorageError:
    logger.error(f"Task store {operation} failed: {error}")
    # Pool exhaustion is transient, everything else is a server fault
    status_code = 503 if isinstance(error, PoolTimeoutError) else 500
    return StorageError(operation, error, status_code=status_code)


class TaskService:
    """
    Task store operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def _fetch(task_id: int, conn: Connection) -> Task | None:
        row = conn.execute(select(tasks).where(tasks.c.id == task_id)).first()
        return Task.model_validate(row) if row is not None else None

    @staticmethod
    def list_tasks(conn: Connection) -> list[Task]:
        """
        List every task, newest first.

        Args:
            conn: Connection with no open transaction

        Returns:
            All tasks ordered by id descending (empty list if none)

        Raises:
            StorageError: If the query fails
        """
        try:
            with conn.begin():
                rows = conn.execute(select(tasks).order_by(tasks.c.id.desc())).all()
        except SQLAlchemyError as e:
            raise _storage_error("list", e)

        return [Task.model_validate(row) for row in rows]

    @staticmethod
    def get_task(task_id: int, conn: Connection) -> Task | None:
        """
        Get a task by ID.

        Returns:
            The task, or None if no row has this id

        Raises:
            StorageError: If the query fails
        """
        try:
            with conn.begin():
                return TaskService._fetch(task_id, conn)
        except SQLAlchemyError as e:
            raise _storage_error("get", e)

    @staticmethod
    def insert_task(todo: Todo, conn: Connection) -> Task:
        """
        Create a task from a Todo.

        The insert and the read-back share one transaction. The new id comes
        from the insert itself (the driver's last-insert-id on this
        connection), so concurrent inserts on other connections can't be
        picked up by mistake.

        Args:
            todo: Creation payload
            conn: Connection with no open transaction

        Returns:
            The newly created task (completed=False)

        Raises:
            StorageError: If either statement fails
        """
        try:
            with conn.begin():
                result = conn.execute(
                    insert(tasks).values(description=todo.description, completed=False)
                )
                task_id = result.inserted_primary_key[0]
                task = TaskService._fetch(task_id, conn)
                if task is None:
                    raise _storage_error("insert", LookupError(f"row {task_id} vanished after insert"))
        except SQLAlchemyError as e:
            raise _storage_error("insert", e)

        logger.info(f"Created task: {task.id}")
        return task

    @staticmethod
    def toggle_task(task_id: int, conn: Connection) -> Task | None:
        """
        Flip the completed flag of a task.

        Read, update and re-read happen in a single transaction.

        Returns:
            The task in its new state, or None if no row has this id
            (nothing is written in that case)

        Raises:
            StorageError: If any statement fails
        """
        try:
            with conn.begin():
                current = TaskService._fetch(task_id, conn)
                if current is None:
                    return None

                conn.execute(
                    update(tasks)
                    .where(tasks.c.id == task_id)
                    .values(completed=not_(tasks.c.completed))
                )
                task = TaskService._fetch(task_id, conn)
        except SQLAlchemyError as e:
            raise _storage_error("toggle", e)

        logger.info(f"Toggled task {task_id}: completed={task.completed}")
        return task

    @staticmethod
    def delete_task(task_id: int, conn: Connection) -> bool:
        """
        Delete a task by ID.

        Returns:
            True if a row was removed, False if no row had this id

        Raises:
            StorageError: If the statement fails
        """
        try:
            with conn.begin():
                result = conn.execute(delete(tasks).where(tasks.c.id == task_id))
        except SQLAlchemyError as e:
            raise _storage_error("delete", e)

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted task: {task_id}")
        return deleted
