# =============================================================================
# app/routers/home.py - Home Page
# =============================================================================
# Renders the department list (names translated) and the search form.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.dependencies import CatalogDep
from app.views import render

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, catalog: CatalogDep):
    """
    Home page.

    Lists every department with its translated name. Departments whose
    translation fails are shown with their English name.
    """
    departments = await catalog.departments()
    logger.debug(f"Rendering {len(departments)} departments")

    return render(request, "index.html", {"departments": departments})
