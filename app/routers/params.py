# =============================================================================
# app/routers/params.py - Route Matching Helpers
# =============================================================================
# Integer path segments are parsed by hand rather than declared as `int`,
# and request bodies are matched on their Content-Type:
# a segment that isn't an integer or a body that isn't JSON means the route
# doesn't match (404), not that the request is malformed (422).
# =============================================================================

import re
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Path, Request

# Path integers are 32-bit signed, written as plain decimal digits
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


def parse_int_param(raw: str) -> Optional[int]:
    """Parse a path segment as a 32-bit integer, None if it isn't one."""
    if not _INT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def no_match() -> HTTPException:
    """The exception raised when no rank of a route accepts the request."""
    return HTTPException(status_code=404)


def task_id_param(
    task_id: Annotated[str, Path(description="Task id")]
) -> int:
    """Resolve the {task_id} path segment, 404 if it isn't an integer."""
    value = parse_int_param(task_id)
    if value is None:
        raise no_match()
    return value


# Type alias for dependency injection
TaskId = Annotated[int, Depends(task_id_param)]


def require_json_body(request: Request) -> None:
    """
    Match only JSON request bodies.

    Any other Content-Type means the route doesn't match (404), the same
    as a path that doesn't match.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        raise no_match()
