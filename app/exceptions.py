# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the web front-end.
# Failures are shown to the browser as a plain-text page with a short,
# human-readable message (the UI is in Spanish). There is no structured
# error body.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class MetExplorerException(Exception):
    """
    Base exception for the Met Explorer front-end.

    All custom exceptions inherit from this class. ``message`` is what the
    user sees; ``details`` is only logged.
    """

    def __init__(
        self,
        message: str,
        code: str = "MET_EXPLORER_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict (used for logging)."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Upstream Exceptions
# =============================================================================

class UpstreamUnavailableError(MetExplorerException):
    """Raised when a list/search/listing call to the collection API fails."""

    def __init__(self, message: str, error: str | None = None):
        super().__init__(
            message=message,
            code="UPSTREAM_UNAVAILABLE",
            status_code=500,
            details={"error": error} if error else None,
        )


class ObjectFetchError(MetExplorerException):
    """
    Raised when one object in a batch fails with anything other than 404.

    A single such failure fails the whole page; 404s are dropped instead.
    """

    def __init__(self, message: str, object_id: int, error: str | None = None):
        details: dict[str, Any] = {"object_id": object_id}
        if error:
            details["error"] = error
        super().__init__(
            message=message,
            code="OBJECT_FETCH_FAILED",
            status_code=500,
            details=details,
        )


class ObjectNotFoundError(MetExplorerException):
    """Raised when a single-object lookup hits an id the API doesn't know."""

    def __init__(self, object_id: int):
        super().__init__(
            message=f"Objeto no encontrado: {object_id}",
            code="OBJECT_NOT_FOUND",
            status_code=404,
            details={"object_id": object_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def met_explorer_exception_handler(
    request: Request,
    exc: MetExplorerException
) -> PlainTextResponse:
    """
    Convert MetExplorerException to a plain-text response.

    The message is shown as-is; code and details go to the log.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.to_dict()}")
    else:
        logger.info(f"{request.method} {request.url.path}: {exc.to_dict()}")

    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """Last-resort handler for anything not raised on purpose."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return PlainTextResponse("Error interno del servidor.", status_code=500)
