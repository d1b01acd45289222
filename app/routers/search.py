# =============================================================================
# app/routers/search.py - Search & Results Pages
# =============================================================================
# Two paginated HTML listings:
# - /search:  filtered search, 20 per page, titles/cultures/dynasties translated
# - /results: the whole catalogue, 10 per page, untranslated
#
# Query parameters are parsed leniently: a bad page number means page 1,
# blank filters mean "no filter".
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from app.dependencies import CatalogDep
from app.views import render
from core.models.page import SearchQuery
from lib.utils import clean_optional, parse_positive_int

router = APIRouter()


def build_search_query(
    department_id: str | None,
    keyword: str | None,
    location: str | None,
    page: str | None,
) -> SearchQuery:
    """Turn raw query-string values into a SearchQuery."""
    return SearchQuery(
        department_id=parse_positive_int(clean_optional(department_id), default=0) or None,
        keyword=clean_optional(keyword),
        location=clean_optional(location),
        page=parse_positive_int(page),
    )


@router.get("/search", response_class=HTMLResponse)
async def search(
    request: Request,
    catalog: CatalogDep,
    department_id: Annotated[str | None, Query(alias="departmentId", description="Department filter")] = None,
    keyword: Annotated[str | None, Query(description="Free-text search")] = None,
    location: Annotated[str | None, Query(description="Geographic location")] = None,
    page: Annotated[str | None, Query(description="Page number (default 1)")] = None,
):
    """
    Search objects with images.

    Renders one page of results, or a "no results" message when the search
    matches nothing.
    """
    query = build_search_query(department_id, keyword, location, page)
    result = await catalog.search(query)

    return render(request, "results.html", {"result": result, "base_path": "/search"})


@router.get("/results", response_class=HTMLResponse)
async def results(
    request: Request,
    catalog: CatalogDep,
    page: Annotated[str | None, Query(description="Page number (default 1)")] = None,
):
    """Page through the full catalogue listing."""
    result = await catalog.results(parse_positive_int(page))

    return render(request, "results.html", {"result": result, "base_path": "/results"})
