# =============================================================================
# core/services/catalog_service.py - Catalogue Aggregation
# =============================================================================
# Per-request orchestration between the collection API and the translator:
# - departments(): list departments, translate every name
# - search(): search ids, fetch + translate one page of objects
# - results(): page through the full catalogue listing
# - additional_images(): extra image URLs for one object
#
# Concurrency is fan-out/fan-in only: every object on a page is fetched in
# parallel, and every translatable field of an object is translated in
# parallel. asyncio.gather keeps results in input order, so the page order
# always matches the upstream id order regardless of completion order.
#
# Partial-failure policy for object batches:
# - 404 on one object      -> that object is dropped, the page still renders
# - any other error        -> the whole page fails (ObjectFetchError)
# =============================================================================

import asyncio
import logging

from app.exceptions import ObjectFetchError, ObjectNotFoundError, UpstreamUnavailableError
from core.models.collection import ArtObject, Department
from core.models.page import PageResult, SearchQuery
from core.services.pagination import page_slice, total_pages
from lib.collection_client import CollectionClient, CollectionClientError
from lib.translator import Translator

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No se encontraron resultados para los filtros aplicados."

DEPARTMENTS_ERROR = "Error al cargar departamentos."
SEARCH_ERROR = "Error al recuperar los objetos de arte"
RESULTS_ERROR = "Error al obtener resultados"
IMAGES_ERROR = "Error al recuperar las imágenes adicionales."


class CatalogService:
    """
    Aggregates collection API data into renderable pages.

    Holds no state between requests: a new instance is cheap and is built
    per request from the shared collaborators.
    """

    def __init__(
        self,
        collection: CollectionClient,
        translator: Translator,
        search_page_size: int = 20,
        results_page_size: int = 10,
    ):
        self.collection = collection
        self.translator = translator
        self.search_page_size = search_page_size
        self.results_page_size = results_page_size

    # -------------------------------------------------------------------------
    # Departments
    # -------------------------------------------------------------------------

    async def departments(self) -> list[Department]:
        """
        List departments with translated display names.

        The department count always matches upstream. A name whose
        translation fails keeps its English original.

        Raises:
            UpstreamUnavailableError: If the department list can't be fetched
        """
        try:
            departments = await self.collection.list_departments()
        except CollectionClientError as e:
            logger.error(f"Failed to load departments: {e}")
            raise UpstreamUnavailableError(DEPARTMENTS_ERROR, error=e.message) from e

        names = await asyncio.gather(
            *(self.translator.translate(d.display_name) for d in departments)
        )

        return [
            department.model_copy(update={"display_name": name})
            for department, name in zip(departments, names)
        ]

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    async def search(self, query: SearchQuery) -> PageResult:
        """
        Run a filtered search and build one page of translated objects.

        Steps:
        1. Search upstream for matching ids
        2. Slice out the requested page
        3. Fetch + translate every object on the page concurrently
        4. Drop 404s and objects without a primary image

        total_pages is computed from the upstream-reported total.

        Raises:
            UpstreamUnavailableError: If the search call fails
            ObjectFetchError: If any object fails with a non-404 error
        """
        try:
            hits = await self.collection.search_objects(query)
        except CollectionClientError as e:
            logger.error(f"Search failed for {query.to_upstream_params()}: {e}")
            raise UpstreamUnavailableError(f"{SEARCH_ERROR}: {e.message}", error=e.message) from e

        if hits.is_empty:
            logger.info(f"No search results for {query.to_upstream_params()}")
            return PageResult(
                objects=[],
                current_page=query.page,
                total_pages=0,
                department_id=query.department_id,
                keyword=query.keyword,
                location=query.location,
                message=NO_RESULTS_MESSAGE,
            )

        ids = page_slice(hits.object_ids, query.page, self.search_page_size)
        objects = await self._load_objects(ids, translate=True, error_prefix=SEARCH_ERROR)
        objects = [obj for obj in objects if obj.has_primary_image]

        return PageResult(
            objects=objects,
            current_page=query.page,
            total_pages=total_pages(hits.total, self.search_page_size),
            department_id=query.department_id,
            keyword=query.keyword,
            location=query.location,
        )

    # -------------------------------------------------------------------------
    # Full catalogue listing
    # -------------------------------------------------------------------------

    async def results(self, page: int) -> PageResult:
        """
        Build one page of the full catalogue listing.

        Unlike search(), total_pages is recomputed from the length of the
        full id listing rather than the upstream total, and objects are
        shown untranslated.

        Raises:
            UpstreamUnavailableError: If the id listing can't be fetched
            ObjectFetchError: If any object fails with a non-404 error
        """
        try:
            listing = await self.collection.list_object_ids()
        except CollectionClientError as e:
            logger.error(f"Failed to list catalogue ids: {e}")
            raise UpstreamUnavailableError(RESULTS_ERROR, error=e.message) from e

        ids = page_slice(listing.object_ids, page, self.results_page_size)
        objects = await self._load_objects(ids, translate=False, error_prefix=RESULTS_ERROR)

        return PageResult(
            objects=objects,
            current_page=page,
            total_pages=total_pages(len(listing.object_ids), self.results_page_size),
        )

    # -------------------------------------------------------------------------
    # Additional images
    # -------------------------------------------------------------------------

    async def additional_images(self, object_id: int) -> list[str]:
        """
        Return the additional image URLs of one object.

        An object without additional images yields an empty list.

        Raises:
            ObjectNotFoundError: If the object id doesn't exist
            UpstreamUnavailableError: For any other upstream failure
        """
        try:
            obj = await self.collection.get_object(object_id)
        except CollectionClientError as e:
            logger.error(f"Failed to load additional images for {object_id}: {e}")
            raise UpstreamUnavailableError(IMAGES_ERROR, error=e.message) from e

        if obj is None:
            raise ObjectNotFoundError(object_id)

        return list(obj.additional_images)

    # -------------------------------------------------------------------------
    # Fan-out helpers
    # -------------------------------------------------------------------------

    async def _load_objects(
        self,
        object_ids: list[int],
        translate: bool,
        error_prefix: str,
    ) -> list[ArtObject]:
        """Fetch objects concurrently, dropping 404s, keeping input order."""
        loaded = await asyncio.gather(
            *(self._load_object(object_id, translate, error_prefix) for object_id in object_ids)
        )
        return [obj for obj in loaded if obj is not None]

    async def _load_object(
        self,
        object_id: int,
        translate: bool,
        error_prefix: str,
    ) -> ArtObject | None:
        try:
            obj = await self.collection.get_object(object_id)
        except CollectionClientError as e:
            logger.error(f"Failed to fetch object {object_id}: {e}")
            raise ObjectFetchError(
                f"{error_prefix}: {e.message}",
                object_id=object_id,
                error=e.message,
            ) from e

        if obj is None or not translate:
            return obj
        return await self._translate_object(obj)

    async def _translate_object(self, obj: ArtObject) -> ArtObject:
        """Translate title/culture/dynasty concurrently; absent fields are skipped."""
        values = obj.translatable_values()
        if not values:
            return obj

        names = list(values)
        translations = await asyncio.gather(
            *(self.translator.translate(values[name]) for name in names)
        )
        return obj.model_copy(update=dict(zip(names, translations)))
