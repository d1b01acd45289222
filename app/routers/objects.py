# =============================================================================
# app/routers/objects.py - Object Endpoints
# =============================================================================
# JSON endpoints used by the results page's image viewer.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import CatalogDep

router = APIRouter()


@router.get("/object/{object_id}/additional-images", response_model=list[str])
async def additional_images(
    object_id: Annotated[int, Path(description="Collection object id")],
    catalog: CatalogDep,
):
    """
    List an object's additional image URLs.

    Returns an empty list when the object has none.
    """
    return await catalog.additional_images(object_id)
