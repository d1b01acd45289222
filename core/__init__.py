# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the request-scoped business logic:
# - models/: Pydantic schemas for collection records and result pages
# - services/: Catalogue aggregation (fan-out fetch + translate) and paging
#
# Routes stay thin and delegate here.
# =============================================================================
