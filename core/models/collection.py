# =============================================================================
# core/models/collection.py - Collection API Schemas
# =============================================================================
# These models mirror the records returned by the Met collection API:
# - Department: One museum department (id + display name)
# - ArtObject: One object record from /objects/{id}
# - SearchHits: The id listing returned by /search and /objects
#
# The remote API owns these records. We only read them, optionally replace
# a few text fields with their translation, and render them.
# Remote camelCase names are accepted as aliases; Python code uses snake_case.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Fields of an ArtObject that get machine-translated before rendering
TRANSLATABLE_FIELDS: tuple[str, ...] = ("title", "culture", "dynasty")


class Department(BaseModel):
    """
    A museum department as listed by GET /departments.

    Example:
        {"departmentId": 11, "displayName": "European Paintings"}
    """

    model_config = ConfigDict(populate_by_name=True)

    # Upstream id, passed through untouched (also used as the search filter)
    department_id: int = Field(
        ...,
        alias="departmentId",
        description="Department id assigned by the collection API"
    )

    # Human-readable name; replaced by its translation on the home page
    display_name: str = Field(
        ...,
        alias="displayName",
        description="Department display name"
    )


class ArtObject(BaseModel):
    """
    An object record as returned by GET /objects/{id}.

    The upstream record carries dozens of fields. The ones the UI relies on
    are declared here; everything else is kept as extra attributes so that
    templates can still reach them.

    Blank strings are normalized to None, so "has a title" is simply
    ``obj.title is not None``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    object_id: int = Field(..., alias="objectID", description="Upstream object id")

    title: str | None = Field(default=None, description="Object title")
    culture: str | None = Field(default=None, description="Culture of origin")
    dynasty: str | None = Field(default=None, description="Dynasty, if any")

    primary_image: str | None = Field(
        default=None,
        alias="primaryImage",
        description="Full-size image URL; objects without one are not listed in search results"
    )
    primary_image_small: str | None = Field(
        default=None,
        alias="primaryImageSmall",
        description="Thumbnail image URL"
    )
    additional_images: list[str] = Field(
        default_factory=list,
        alias="additionalImages",
        description="Extra image URLs"
    )

    artist_display_name: str | None = Field(default=None, alias="artistDisplayName")
    object_date: str | None = Field(default=None, alias="objectDate")
    department: str | None = Field(default=None)
    object_url: str | None = Field(default=None, alias="objectURL")

    @field_validator(
        "title",
        "culture",
        "dynasty",
        "primary_image",
        "primary_image_small",
        "artist_display_name",
        "object_date",
        "department",
        "object_url",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """The API uses "" for missing text fields."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("additional_images", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        """additionalImages may be null or missing."""
        if value is None:
            return []
        return value

    @property
    def has_primary_image(self) -> bool:
        """Whether the object can be shown as a result card."""
        return self.primary_image is not None

    def translatable_values(self) -> dict[str, str]:
        """Return the translatable fields that are present, keyed by name."""
        values = {}
        for name in TRANSLATABLE_FIELDS:
            value = getattr(self, name)
            if value:
                values[name] = value
        return values


class SearchHits(BaseModel):
    """
    Parsed body of GET /search and GET /objects.

    The API reports zero matches as ``{"total": 0, "objectIDs": null}``;
    that is normalized to an empty list here.
    """

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(default=0, ge=0, description="Upstream-reported number of matches")
    object_ids: list[int] = Field(
        default_factory=list,
        alias="objectIDs",
        description="Matching object ids, in upstream order"
    )

    @field_validator("total", mode="before")
    @classmethod
    def null_total(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("object_ids", mode="before")
    @classmethod
    def null_ids(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def is_empty(self) -> bool:
        return not self.object_ids
