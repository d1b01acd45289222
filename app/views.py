# =============================================================================
# app/views.py - HTML Rendering
# =============================================================================
# Jinja2 templates live in app/templates/. Rendering is a pure function of
# (template name, data): no business logic happens here.
# =============================================================================

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(request: Request, template_name: str, data: dict[str, Any]) -> HTMLResponse:
    """Render ``template_name`` with ``data`` as the template context."""
    return templates.TemplateResponse(request, template_name, data)
