# =============================================================================
# lib/http_client.py - Shared httpx Client Builder
# =============================================================================
# Builds the single httpx.AsyncClient used for every outbound call:
# - Met collection API (departments, search, objects)
# - Translation endpoint
#
# One pooled client is created at application startup and closed at shutdown.
# Tests build their own client around an httpx.MockTransport instead.
# =============================================================================

import httpx


def build_async_client(
    timeout_seconds: float,
    user_agent: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """
    Create an httpx.AsyncClient with the application's defaults.

    Args:
        timeout_seconds: Per-request timeout
        user_agent: User-Agent header sent upstream
        transport: Optional transport override (e.g. MockTransport in tests)
        extra_headers: Headers merged on top of the defaults

    Returns:
        A configured, not-yet-used AsyncClient
    """
    headers = {
        "User-Agent": user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
