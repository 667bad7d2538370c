"""Shared persistent httpx client for archive API calls.

Reusing one client keeps connections pooled across the many small requests an
edit session makes (record fetch, save, one upload per staged file).
"""

import httpx

from filmarchive.constants import API_TIMEOUT_DEFAULT

# Connection pool limits
_POOL_LIMITS = httpx.Limits(
    max_connections=10,
    max_keepalive_connections=5,
    keepalive_expiry=30,
)

_archive_client: httpx.AsyncClient | None = None


def get_archive_http_client(timeout: float = API_TIMEOUT_DEFAULT) -> httpx.AsyncClient:
    """Get persistent httpx client for archive API calls."""
    global _archive_client
    if _archive_client is None:
        _archive_client = httpx.AsyncClient(
            timeout=timeout,
            limits=_POOL_LIMITS,
            http2=False,
        )
    return _archive_client


async def close_all_clients() -> None:
    """Close the persistent httpx client. Call during shutdown."""
    global _archive_client
    if _archive_client is not None:
        await _archive_client.aclose()
        _archive_client = None
