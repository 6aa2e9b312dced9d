# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - auth/: Request guards and the login page
# - routers/: API endpoint definitions organized by feature
# - templates/: Jinja2 templates
#
# The app layer is thin - it handles HTTP concerns and delegates
# persistence to the core/ package.
# =============================================================================
