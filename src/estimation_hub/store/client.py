"""Async record store client singleton.

Creates a cached httpx.AsyncClient pointed at the Supabase REST endpoint
(PostgREST) on first use, and reuses it for the process lifetime.
Credentials are resolved lazily so importing the app never needs them.
"""

import httpx

from estimation_hub.config import get_settings, is_configured
from estimation_hub.errors import ConfigurationError

_client: httpx.AsyncClient | None = None


async def get_store_client() -> httpx.AsyncClient:
    """Return a cached async client for the record store.

    Creates the client on first call using supabase_url and supabase_key
    from settings. Subsequent calls return the cached instance.

    Raises ConfigurationError if the URL or key is unset or a placeholder.
    """
    global _client
    if _client is None:
        settings = get_settings()
        if not is_configured(settings.supabase_url) or not is_configured(settings.supabase_key):
            raise ConfigurationError(
                "Record store is not configured. "
                "Please add SUPABASE_URL and SUPABASE_KEY to your environment."
            )
        _client = httpx.AsyncClient(
            base_url=f"{settings.supabase_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": settings.supabase_key,
                "Authorization": f"Bearer {settings.supabase_key}",
            },
            timeout=httpx.Timeout(10.0),
        )
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
