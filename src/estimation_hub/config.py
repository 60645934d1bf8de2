"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in the .env template; treated the same as unset.
PLACEHOLDER_VALUES = frozenset(
    {
        "your-signing-secret-here",
        "your-slack-bot-token-here",
        "your-gemini-api-key-here",
        "https://placeholder.supabase.co",
        "placeholder-anon-key",
    }
)

DEFAULT_TRIGGER_EMOJI = "chart_increasing"


def is_configured(value: str | None) -> bool:
    """Return True if a credential is set to a real (non-placeholder) value."""
    if not value or not value.strip():
        return False
    return value.strip() not in PLACEHOLDER_VALUES


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""
    slack_authorized_user_ids: str = ""
    slack_trigger_emoji: str = DEFAULT_TRIGGER_EMOJI

    # Gemini
    gemini_api_key: str = ""

    # Record store (Supabase)
    supabase_url: str = ""
    supabase_key: str = ""

    # App
    log_level: str = "INFO"

    @property
    def authorized_user_ids(self) -> list[str]:
        """Allow-listed Slack user IDs parsed from the comma-separated setting."""
        return [
            user_id.strip()
            for user_id in self.slack_authorized_user_ids.split(",")
            if user_id.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
