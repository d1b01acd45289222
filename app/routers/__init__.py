# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by page:
# - home.py: Department list (/)
# - search.py: Filtered search (/search) and full listing (/results)
# - objects.py: Additional-images JSON endpoint
# - health.py: Health check endpoint
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import home
from . import objects
from . import search

__all__ = [
    "health",
    "home",
    "objects",
    "search",
]
