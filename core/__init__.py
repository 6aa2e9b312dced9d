# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for data validation
# - services/: The task store (all reads/writes of the tasks table)
#
# Code in this package never touches requests or responses directly.
# It works on plain connections so it can be tested without a server.
# =============================================================================
