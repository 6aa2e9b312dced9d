# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Taskboard API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_task_service.py: Task store operations against SQLite
# - test_database.py: Engine, pool policy and settings
# - test_routes.py: Greeting, guard and login routes
# - test_todos_api.py: Task API and JSON error catchers
#
# Run tests with: pytest
# =============================================================================
