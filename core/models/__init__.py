# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - collection.py: Records read from the collection API (Department, ArtObject)
# - page.py: Per-request search filters and rendered page data
#
# None of these are persisted; the collection API owns the data.
# =============================================================================

# -----------------------------------------------------------------------------
# Collection Models - Records from the collection API
# -----------------------------------------------------------------------------
from .collection import (
    TRANSLATABLE_FIELDS,
    ArtObject,
    Department,
    SearchHits,
)

# -----------------------------------------------------------------------------
# Page Models - Search filters and page results
# -----------------------------------------------------------------------------
from .page import (
    PageResult,
    SearchQuery,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Collection
    "TRANSLATABLE_FIELDS",
    "ArtObject",
    "Department",
    "SearchHits",
    # Page
    "PageResult",
    "SearchQuery",
]
