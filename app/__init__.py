# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, lifespan, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Per-request collaborators for Depends()
# - views.py + templates/: Jinja2 HTML rendering
# - routers/: Page and endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
