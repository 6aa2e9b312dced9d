# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - greetings.py: Plain-text hello routes (path params, ranked routes)
# - todos.py: Task CRUD endpoints backed by the task store
# - health.py: Health check endpoints
# - params.py: Shared path parameter parsing
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import greetings
from . import health
from . import todos

__all__ = [
    "greetings",
    "health",
    "todos",
]
