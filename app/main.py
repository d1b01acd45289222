# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Met Explorer web front-end.
# It configures the FastAPI application with the shared HTTP client,
# static files, routers and exception handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 3000
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.exceptions import (
    MetExplorerException,
    met_explorer_exception_handler,
    unexpected_exception_handler,
)
from app.routers import health, home, objects, search
from app.views import STATIC_DIR
from lib.http_client import build_async_client

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Open the pooled HTTP client shared by all requests
    - Shutdown: Close it
    """
    logger.info(f"Starting Met Explorer in {settings.ENVIRONMENT} mode")
    logger.info(f"Collection API: {settings.MET_API_BASE_URL}")

    app.state.http_client = build_async_client(
        settings.HTTP_TIMEOUT_SECONDS,
        settings.USER_AGENT,
    )

    yield

    logger.info("Shutting down Met Explorer")
    await app.state.http_client.aclose()


# Create FastAPI application
app = FastAPI(
    title="Met Explorer",
    description="Explorador de la colección del Metropolitan Museum of Art, traducido al español.",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(MetExplorerException)
async def handle_met_explorer_exception(request: Request, exc: MetExplorerException):
    """Handle custom Met Explorer exceptions."""
    return await met_explorer_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(home.router, tags=["Pages"])
app.include_router(search.router, tags=["Pages"])
app.include_router(objects.router, tags=["Objects"])
app.include_router(health.router, tags=["Health"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
