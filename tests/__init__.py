# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for Met Explorer:
# - test_models.py: Pydantic model parsing and helpers
# - test_pagination.py / test_utils.py: Small pure helpers
# - test_collection_client.py / test_translator.py: Upstream adapters
# - test_catalog_service.py: Fan-out, filtering and error policy
# - test_routes.py: HTTP routes end to end
#
# Upstream services are faked with httpx.MockTransport (see conftest.py).
#
# Run tests with: pytest
# =============================================================================
