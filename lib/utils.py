# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any


# =============================================================================
# Text Utilities
# =============================================================================

def clean_optional(value: str | None) -> str | None:
    """
    Normalize an optional text value coming from a query string or API body.

    Blank strings are treated the same as a missing value so that filters
    like ``?keyword=`` are omitted instead of sent upstream empty.

    Args:
        value: Raw string or None

    Returns:
        The stripped string, or None if nothing is left

    Example:
        clean_optional("  Rembrandt ")  # "Rembrandt"
        clean_optional("")              # None
    """
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_positive_int(value: Any, default: int = 1) -> int:
    """
    Leniently parse a page number.

    Anything that isn't a positive integer falls back to ``default``.
    Leading digits are honored ("3abc" -> 3), matching how browsers and
    older clients tend to send pagination parameters.
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value if value > 0 else default

    text = str(value).strip()
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char

    if not digits:
        return default
    number = int(digits)
    return number if number > 0 else default


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }
