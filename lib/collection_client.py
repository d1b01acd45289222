# =============================================================================
# lib/collection_client.py - Met Collection API Client
# =============================================================================
# Thin async wrapper around the public Met collection REST API:
# - GET /departments      -> list of departments
# - GET /search           -> ids matching filters (+ upstream total)
# - GET /objects          -> every object id in the catalogue
# - GET /objects/{id}     -> a single object record
#
# The client owns no state beyond the base URL and the shared httpx client.
# No retries: a failed call raises CollectionClientError and the caller
# decides whether that is fatal.
#
# Usage:
#   client = CollectionClient(http_client, settings.MET_API_BASE_URL)
#   hits = await client.search_objects(SearchQuery(keyword="cat"))
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from core.models.collection import ArtObject, Department, SearchHits
from core.models.page import SearchQuery
from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


class CollectionClientError(ApplicationError):
    """
    Error while talking to the collection API.

    ``status_code`` is the upstream HTTP status when one was received,
    or None for network failures and unreadable bodies.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code="COLLECTION_API_ERROR",
            suggestion=suggestion or "Check MET_API_BASE_URL and that the collection API is reachable",
            details=details,
        )
        self.status_code = status_code


class CollectionClient:
    """
    Async client for the Met collection API.

    Example:
        departments = await client.list_departments()
        obj = await client.get_object(436535)
        if obj is None:
            ...  # 404, object doesn't exist
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """
        GET a path and decode its JSON body.

        Raises:
            CollectionClientError: On network failure, non-2xx status or bad JSON
        """
        url = self._url(path)
        logger.debug(f"GET {url} params={params}")

        try:
            response = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            raise CollectionClientError(
                message=f"Request to {url} failed: {e}",
                details={"url": url},
            ) from e

        if response.is_error:
            raise CollectionClientError(
                message=f"Collection API returned {response.status_code} for {url}",
                status_code=response.status_code,
                details={"url": url},
            )

        try:
            return response.json()
        except ValueError as e:
            raise CollectionClientError(
                message=f"Collection API returned invalid JSON for {url}",
                status_code=response.status_code,
                details={"url": url},
            ) from e

    # -------------------------------------------------------------------------
    # Departments
    # -------------------------------------------------------------------------

    async def list_departments(self) -> list[Department]:
        """
        List all museum departments.

        Returns:
            Departments in upstream order

        Raises:
            CollectionClientError: If the request fails or the body is malformed
        """
        data = await self._get_json("departments")

        try:
            return [Department.model_validate(d) for d in data.get("departments") or []]
        except (AttributeError, ValidationError) as e:
            raise CollectionClientError(
                message=f"Unexpected departments payload: {e}",
            ) from e

    # -------------------------------------------------------------------------
    # Search / Listing
    # -------------------------------------------------------------------------

    async def search_objects(self, query: SearchQuery) -> SearchHits:
        """
        Search for object ids matching the query filters.

        Only objects with images are searched. Filters that are not set on
        the query are omitted from the request.

        Returns:
            SearchHits; empty (not an error) when nothing matches

        Raises:
            CollectionClientError: If the request fails
        """
        data = await self._get_json("search", params=query.to_upstream_params())
        return self._parse_hits(data)

    async def list_object_ids(self) -> SearchHits:
        """
        List every object id in the catalogue.

        The response is large (hundreds of thousands of ids); it is fetched
        once per /results request.
        """
        data = await self._get_json("objects")
        return self._parse_hits(data)

    @staticmethod
    def _parse_hits(data: Any) -> SearchHits:
        if not data:
            return SearchHits()
        try:
            return SearchHits.model_validate(data)
        except ValidationError as e:
            raise CollectionClientError(
                message=f"Unexpected search payload: {e}",
            ) from e

    # -------------------------------------------------------------------------
    # Objects
    # -------------------------------------------------------------------------

    async def get_object(self, object_id: int) -> ArtObject | None:
        """
        Fetch a single object record.

        Args:
            object_id: Upstream object id

        Returns:
            The ArtObject, or None if the API answered 404

        Raises:
            CollectionClientError: For any failure other than 404
        """
        try:
            data = await self._get_json(f"objects/{object_id}")
        except CollectionClientError as e:
            if e.status_code == 404:
                logger.warning(f"Object {object_id} not found (404)")
                return None
            raise

        try:
            return ArtObject.model_validate(data)
        except ValidationError as e:
            raise CollectionClientError(
                message=f"Unexpected payload for object {object_id}: {e}",
                details={"object_id": object_id},
            ) from e
