# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Taskboard API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   taskboard                      # console script, see run()
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import (
    TaskboardException,
    http_exception_handler,
    taskboard_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import greetings, health, todos
from lib.database import Database

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: create the engine and the tasks table
    - Shutdown: close every pooled connection
    """
    logger.info(f"Starting Taskboard API in {settings.ENVIRONMENT} mode")
    Database.init_schema()

    yield

    logger.info("Shutting down Taskboard API")
    Database.dispose()


# Create FastAPI application
app = FastAPI(
    title="Taskboard API",
    description="""
## A small tour of a web framework

| Area | Routes |
|------|--------|
| **Routing** | `GET /`, `GET /hello/{name}/{age}`, `GET /hello/{age}` (ranked) |
| **Request guards** | `GET /admin` (admin, user, or redirect to login) |
| **Templates** | `GET /login`, `POST /login` |
| **CRUD** | `/api/todos` |

### Quick Start

```bash
# Create a task
curl -X POST http://localhost:8000/api/todos \\
  -H "Content-Type: application/json" \\
  -d '{"description": "buy milk"}'

# Mark it done
curl -X PUT http://localhost:8000/api/todos/1

# Get a token and use it
curl -X POST http://localhost:8000/login -d "email=me@example.com&password=admin"
curl http://localhost:8000/admin -H "Authorization: Bearer admin"
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Greetings",
            "description": "Static, dynamic and ranked routes",
        },
        {
            "name": "Auth",
            "description": "Request guards and the login page",
        },
        {
            "name": "Todos",
            "description": "Create, list, toggle and delete tasks",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers (error catchers)
# =============================================================================

app.add_exception_handler(TaskboardException, taskboard_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Hello routes
app.include_router(
    greetings.router,
    tags=["Greetings"]
)

# Guarded dashboard and login
app.include_router(
    auth_routes.router,
    tags=["Auth"]
)

# Task CRUD endpoints
app.include_router(
    todos.router,
    prefix="/api/todos",
    tags=["Todos"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)


def run() -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG and settings.is_development,
    )


if __name__ == "__main__":
    run()
