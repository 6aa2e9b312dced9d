# =============================================================================
# app/routers/todos.py - Task CRUD Endpoints
# =============================================================================
# JSON resource over the task store. Every handler holds one pooled
# connection for the request (ConnectionDep).
#
#   GET    /api/todos        list, newest first
#   GET    /api/todos/{id}   one task
#   POST   /api/todos        create (201 + Location)
#   PUT    /api/todos/{id}   toggle completed
#   DELETE /api/todos/{id}   delete (204)
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.dependencies import ConnectionDep
from app.exceptions import ApiError, TaskNotFoundError
from app.routers.params import TaskId, require_json_body
from core.models.task import Task, Todo
from core.services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(
    responses={
        404: {"model": ApiError, "description": "No task with this id"},
        500: {"model": ApiError, "description": "Storage failure"},
    }
)


@router.get("", response_model=list[Task])
def list_tasks(conn: ConnectionDep):
    """
    List all tasks.

    Newest tasks (highest id) come first. No pagination.
    """
    return TaskService.list_tasks(conn)


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: TaskId, conn: ConnectionDep):
    """Get a single task."""
    task = TaskService.get_task(task_id, conn)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_body)],
    responses={422: {"model": ApiError, "description": "Malformed Todo"}},
)
def create_task(todo: Todo, request: Request, conn: ConnectionDep):
    """
    Create a task.

    Only JSON bodies match this route. Returns the new task with a
    Location header pointing at it.
    """
    task = TaskService.insert_task(todo, conn)
    location = request.url_for("get_task", task_id=str(task.id)).path
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=task.model_dump(),
        headers={"Location": location},
    )


@router.put("/{task_id}", response_model=Task)
def toggle_task(task_id: TaskId, conn: ConnectionDep):
    """Flip a task between done and not done."""
    task = TaskService.toggle_task(task_id, conn)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_task(task_id: TaskId, conn: ConnectionDep):
    """Delete a task."""
    if not TaskService.delete_task(task_id, conn):
        raise TaskNotFoundError(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
