# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets test environment variables before any imports
# - FakeUpstream: an in-memory stand-in for the collection API and the
#   translation endpoint, served through httpx.MockTransport (no network)
# - Fixtures wiring real clients/services on top of it
# =============================================================================

import asyncio
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

COLLECTION_URL = "https://collection.test/v1"
TRANSLATE_URL = "https://translate.test/translate_a/single"

os.environ.setdefault("MET_API_BASE_URL", COLLECTION_URL)
os.environ.setdefault("TRANSLATE_URL", TRANSLATE_URL)
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import httpx
import pytest

from core.services.catalog_service import CatalogService
from lib.collection_client import CollectionClient
from lib.http_client import build_async_client
from lib.translator import Translator


# =============================================================================
# Fake upstream services
# =============================================================================

class FakeUpstream:
    """
    Routes requests for both upstream services and records every call.

    Tests mutate the public attributes to shape responses:
    - departments / search_body / catalog_ids / objects: response data
    - *_status / object_status: force HTTP error codes
    - object_delays: per-object latency, to make completions arrive out of order
    - translate_fails: make every translation request fail
    """

    def __init__(self):
        self.departments: list[dict] = []
        self.departments_status = 200
        self.search_body: dict = {"total": 0, "objectIDs": None}
        self.search_status = 200
        self.catalog_ids: list[int] = []
        self.catalog_status = 200
        self.objects: dict[int, dict] = {}
        self.object_status: dict[int, int] = {}
        self.object_delays: dict[int, float] = {}
        self.translate_fails = False
        self.translate_failures: set[str] = set()
        self.requests: list[httpx.Request] = []

    # -------------------------------------------------------------------------
    # Call inspection
    # -------------------------------------------------------------------------

    def _paths(self, prefix: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith(prefix)]

    @property
    def object_requests(self) -> list[httpx.Request]:
        return self._paths("/v1/objects/")

    @property
    def search_requests(self) -> list[httpx.Request]:
        return self._paths("/v1/search")

    @property
    def translate_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "translate.test"]

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == "translate.test":
            return self._translate(request)

        path = request.url.path
        if path == "/v1/departments":
            if self.departments_status != 200:
                return httpx.Response(self.departments_status, json={"message": "error"})
            return httpx.Response(200, json={"departments": self.departments})

        if path == "/v1/search":
            if self.search_status != 200:
                return httpx.Response(self.search_status, json={"message": "error"})
            return httpx.Response(200, json=self.search_body)

        if path == "/v1/objects":
            if self.catalog_status != 200:
                return httpx.Response(self.catalog_status, json={"message": "error"})
            return httpx.Response(
                200,
                json={"total": len(self.catalog_ids), "objectIDs": self.catalog_ids},
            )

        if path.startswith("/v1/objects/"):
            object_id = int(path.rsplit("/", 1)[-1])
            delay = self.object_delays.get(object_id)
            if delay:
                await asyncio.sleep(delay)
            status = self.object_status.get(object_id)
            if status:
                return httpx.Response(status, json={"message": "error"})
            if object_id not in self.objects:
                return httpx.Response(404, json={"message": "ObjectID not found"})
            return httpx.Response(200, json=self.objects[object_id])

        return httpx.Response(404)

    def _translate(self, request: httpx.Request) -> httpx.Response:
        text = request.url.params["q"]
        if self.translate_fails or text in self.translate_failures:
            return httpx.Response(503, text="quota exceeded")
        return httpx.Response(
            200,
            json=[[[spanish(text), text, None, None, 10]], None, "en"],
        )


def spanish(text: str) -> str:
    """The fake translation of ``text``."""
    return f"ES:{text}"


def make_object(object_id: int, **overrides) -> dict:
    """An object record shaped like the collection API's."""
    record = {
        "objectID": object_id,
        "title": f"Object {object_id}",
        "culture": "",
        "dynasty": "",
        "primaryImage": f"https://images.test/{object_id}.jpg",
        "primaryImageSmall": f"https://images.test/{object_id}-small.jpg",
        "additionalImages": [],
        "artistDisplayName": "",
        "objectDate": "1890",
    }
    record.update(overrides)
    return record


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def upstream():
    """Fresh fake upstream per test."""
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    """httpx client whose every request goes to the fake upstream."""
    return build_async_client(5.0, "met-explorer-tests", transport=upstream.transport())


@pytest.fixture
def collection(http_client):
    return CollectionClient(http_client, COLLECTION_URL)


@pytest.fixture
def translator(http_client):
    return Translator(http_client, TRANSLATE_URL)


@pytest.fixture
def catalog(collection, translator):
    return CatalogService(collection, translator, search_page_size=20, results_page_size=10)


@pytest.fixture
def client(http_client):
    """FastAPI TestClient with the shared HTTP client overridden."""
    from fastapi.testclient import TestClient

    from app.dependencies import get_http_client
    from app.main import app

    app.dependency_overrides[get_http_client] = lambda: http_client
    yield TestClient(app)
    app.dependency_overrides.clear()
