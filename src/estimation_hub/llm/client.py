"""Gemini client singleton with async support.

Creates a cached genai.Client instance configured with the API key from
application settings. Uses a 60-second HTTP timeout. No retry options are
configured: a failed extraction is surfaced to the operator immediately.
"""

from google import genai
from google.genai import types

from estimation_hub.config import get_settings, is_configured
from estimation_hub.errors import ConfigurationError

_client: genai.Client | None = None


def get_gemini_client() -> genai.Client:
    """Return a cached Gemini client instance.

    Creates the client on first call using gemini_api_key from settings.
    Subsequent calls return the cached instance.

    Raises ConfigurationError if the API key is unset or a placeholder.
    """
    global _client
    if _client is None:
        settings = get_settings()
        if not is_configured(settings.gemini_api_key):
            raise ConfigurationError(
                "Gemini API key is not configured. Please add GEMINI_API_KEY to your environment."
            )
        _client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=60_000),
        )
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
