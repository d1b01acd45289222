# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains the outbound service adapters:
# - http_client.py: Shared httpx.AsyncClient builder
# - collection_client.py: Met collection API client
# - translator.py: Fail-open translation adapter
# - utils.py: Shared utilities (error base class, query parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.collection_client import CollectionClient, CollectionClientError
from lib.http_client import build_async_client
from lib.translator import Translator, TranslationError
from lib.utils import ApplicationError, clean_optional, parse_positive_int

__all__ = [
    # Collection API
    "CollectionClient",
    "CollectionClientError",
    # HTTP
    "build_async_client",
    # Translation
    "Translator",
    "TranslationError",
    # Utils
    "ApplicationError",
    "clean_optional",
    "parse_positive_int",
]
