# =============================================================================
# core/models/page.py - Search & Page Schemas
# =============================================================================
# Per-request value objects for the search/results flow:
# - SearchQuery: Filters + page number parsed from the query string
# - PageResult: What the results template renders
#
# Neither is ever persisted; both live for exactly one request.
# =============================================================================

from pydantic import BaseModel, Field

from .collection import ArtObject


class SearchQuery(BaseModel):
    """
    Filters for GET /search.

    Every filter is optional. Absent filters are left out of the upstream
    request entirely (never sent as an empty wildcard).

    Example:
        SearchQuery(department_id=11, keyword="sunflowers", page=2)
    """

    department_id: int | None = Field(
        default=None,
        description="Restrict to one department"
    )
    keyword: str | None = Field(
        default=None,
        description="Free-text search term (upstream 'q')"
    )
    location: str | None = Field(
        default=None,
        description="Geographic location (upstream 'geoLocation')"
    )
    page: int = Field(
        default=1,
        ge=1,
        description="1-based page number"
    )

    def to_upstream_params(self) -> dict[str, str]:
        """
        Build the query parameters for the collection API search endpoint.

        ``hasImages=true`` is always sent; the filters only when present.
        """
        params = {"hasImages": "true"}
        if self.department_id is not None:
            params["departmentId"] = str(self.department_id)
        if self.keyword:
            params["q"] = self.keyword
        if self.location:
            params["geoLocation"] = self.location
        return params


class PageResult(BaseModel):
    """
    One rendered page of objects.

    Filters from the SearchQuery are echoed back so the template can build
    pagination links that keep them.
    """

    objects: list[ArtObject] = Field(default_factory=list)
    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=0, ge=0)

    department_id: int | None = None
    keyword: str | None = None
    location: str | None = None

    # Shown instead of the result grid (e.g. "no results")
    message: str | None = None

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def filter_params(self) -> dict[str, str]:
        """Query-string parameters that reproduce the current filters."""
        params = {}
        if self.department_id is not None:
            params["departmentId"] = str(self.department_id)
        if self.keyword:
            params["keyword"] = self.keyword
        if self.location:
            params["location"] = self.location
        return params
