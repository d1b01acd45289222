# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for per-request collaborators.
# These are injected into route handlers using Depends().
#
# The only long-lived object is the pooled httpx.AsyncClient, created in the
# app lifespan and stored on app.state. Everything built on top of it
# (collection client, translator, catalog service) is constructed per
# request. Tests swap upstreams by overriding get_http_client.
# =============================================================================

from typing import Annotated

import httpx
from fastapi import Depends, Request

from app.config import Settings, get_settings
from core.services.catalog_service import CatalogService
from lib.collection_client import CollectionClient
from lib.translator import Translator


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the shared httpx client opened at startup."""
    return request.app.state.http_client


HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_collection_client(http_client: HttpClientDep, settings: SettingsDep) -> CollectionClient:
    return CollectionClient(http_client, settings.MET_API_BASE_URL)


def get_translator(http_client: HttpClientDep, settings: SettingsDep) -> Translator:
    return Translator(
        http_client,
        settings.TRANSLATE_URL,
        source=settings.SOURCE_LANGUAGE,
        target=settings.TARGET_LANGUAGE,
    )


def get_catalog_service(
    collection: Annotated[CollectionClient, Depends(get_collection_client)],
    translator: Annotated[Translator, Depends(get_translator)],
    settings: SettingsDep,
) -> CatalogService:
    """
    Build the catalog service for one request.

    Page sizes come from settings (20 for search, 10 for results by default).
    """
    return CatalogService(
        collection,
        translator,
        search_page_size=settings.SEARCH_PAGE_SIZE,
        results_page_size=settings.RESULTS_PAGE_SIZE,
    )


# Type alias for dependency injection
CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]
