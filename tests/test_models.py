# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the collection and page models to ensure:
# - Upstream camelCase payloads parse into snake_case fields
# - Blank/null upstream values normalize to "absent"
# - Search filters only reach the upstream request when present
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    TRANSLATABLE_FIELDS,
    ArtObject,
    Department,
    PageResult,
    SearchHits,
    SearchQuery,
)


# =============================================================================
# Collection Model Tests
# =============================================================================

class TestDepartment:
    """Tests for Department model."""

    def test_parses_upstream_payload(self):
        """Test creating a Department from the API's camelCase payload."""
        department = Department.model_validate(
            {"departmentId": 11, "displayName": "European Paintings"}
        )

        assert department.department_id == 11
        assert department.display_name == "European Paintings"

    def test_requires_id(self):
        """A department without an id is rejected."""
        with pytest.raises(ValidationError):
            Department.model_validate({"displayName": "Arms and Armor"})


class TestArtObject:
    """Tests for ArtObject model."""

    def test_blank_strings_become_none(self):
        """The API sends "" for missing text fields."""
        obj = ArtObject.model_validate(
            {"objectID": 1, "title": "Cat", "culture": "", "dynasty": "  ", "primaryImage": ""}
        )

        assert obj.title == "Cat"
        assert obj.culture is None
        assert obj.dynasty is None
        assert obj.primary_image is None
        assert not obj.has_primary_image

    def test_null_additional_images(self):
        """additionalImages may be null."""
        obj = ArtObject.model_validate({"objectID": 1, "additionalImages": None})
        assert obj.additional_images == []

    def test_missing_additional_images(self):
        obj = ArtObject.model_validate({"objectID": 1})
        assert obj.additional_images == []

    def test_keeps_unknown_fields(self):
        """Fields we don't declare are still available to templates."""
        obj = ArtObject.model_validate({"objectID": 1, "medium": "Oil on canvas"})
        assert obj.medium == "Oil on canvas"

    def test_translatable_values_only_present_fields(self):
        obj = ArtObject.model_validate(
            {"objectID": 1, "title": "Vase", "culture": "Greek", "dynasty": ""}
        )

        assert obj.translatable_values() == {"title": "Vase", "culture": "Greek"}
        assert set(obj.translatable_values()) <= set(TRANSLATABLE_FIELDS)


class TestSearchHits:
    """Tests for SearchHits model."""

    def test_null_ids_is_empty(self):
        """Zero matches come back as objectIDs: null."""
        hits = SearchHits.model_validate({"total": 0, "objectIDs": None})

        assert hits.object_ids == []
        assert hits.is_empty

    def test_missing_total_defaults_to_zero(self):
        hits = SearchHits.model_validate({"objectIDs": [1, 2]})

        assert hits.total == 0
        assert hits.object_ids == [1, 2]
        assert not hits.is_empty


# =============================================================================
# Page Model Tests
# =============================================================================

class TestSearchQuery:
    """Tests for SearchQuery model."""

    def test_no_filters(self):
        """Only hasImages is sent when no filter is set."""
        assert SearchQuery().to_upstream_params() == {"hasImages": "true"}

    def test_all_filters(self):
        query = SearchQuery(department_id=11, keyword="sunflowers", location="France", page=3)

        assert query.to_upstream_params() == {
            "hasImages": "true",
            "departmentId": "11",
            "q": "sunflowers",
            "geoLocation": "France",
        }

    def test_partial_filters_are_omitted(self):
        """Absent filters are left out, not sent empty."""
        params = SearchQuery(keyword="cat").to_upstream_params()

        assert params == {"hasImages": "true", "q": "cat"}
        assert "departmentId" not in params
        assert "geoLocation" not in params

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            SearchQuery(page=0)


class TestPageResult:
    """Tests for PageResult model."""

    def test_navigation_flags(self):
        result = PageResult(current_page=2, total_pages=3)

        assert result.has_previous
        assert result.has_next

    def test_last_page(self):
        result = PageResult(current_page=3, total_pages=3)

        assert result.has_previous
        assert not result.has_next

    def test_filter_params_echo_query(self):
        result = PageResult(department_id=5, keyword="armor")
        assert result.filter_params() == {"departmentId": "5", "keyword": "armor"}
