# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .catalog_service import CatalogService
from .pagination import page_offset, page_slice, total_pages

__all__ = [
    "CatalogService",
    "page_offset",
    "page_slice",
    "total_pages",
]
