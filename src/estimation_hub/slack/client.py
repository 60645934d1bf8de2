"""Async Slack client singleton.

Creates a cached AsyncWebClient instance configured with the bot token from
application settings. Follows the same lazy-init pattern as llm/client.py
and store/client.py.
"""

from slack_sdk.web.async_client import AsyncWebClient

from estimation_hub.config import get_settings, is_configured
from estimation_hub.errors import ConfigurationError

_client: AsyncWebClient | None = None


async def get_slack_client() -> AsyncWebClient:
    """Return a cached async Slack client instance.

    Creates the client on first call using slack_bot_token from settings.
    Subsequent calls return the cached instance.

    Raises ConfigurationError if the bot token is unset or a placeholder.
    """
    global _client
    if _client is None:
        settings = get_settings()
        if not is_configured(settings.slack_bot_token):
            raise ConfigurationError(
                "Slack Bot Token is not configured. "
                "Please add SLACK_BOT_TOKEN to your environment or .env file."
            )
        _client = AsyncWebClient(token=settings.slack_bot_token)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
