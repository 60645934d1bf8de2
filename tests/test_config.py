"""Tests for settings parsing and credential checks."""

import pytest

from estimation_hub.config import DEFAULT_TRIGGER_EMOJI, Settings, is_configured


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults():
    settings = _settings()
    assert settings.slack_trigger_emoji == DEFAULT_TRIGGER_EMOJI
    assert settings.log_level == "INFO"


def test_authorized_user_ids_split_and_trimmed():
    settings = _settings(slack_authorized_user_ids=" U123 ,U456,, ,U789 ")
    assert settings.authorized_user_ids == ["U123", "U456", "U789"]


def test_authorized_user_ids_empty():
    assert _settings(slack_authorized_user_ids="").authorized_user_ids == []


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "your-signing-secret-here", "https://placeholder.supabase.co"],
)
def test_unset_or_placeholder_is_not_configured(value):
    assert is_configured(value) is False


def test_real_value_is_configured():
    assert is_configured("8f742231b10e8888abcd99yyyzzz85a5") is True


def test_unused_keys_in_env_file_are_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=8080\nENVIRONMENT=production\nLOG_LEVEL=DEBUG\n")

    settings = Settings(_env_file=env_file)

    assert settings.log_level == "DEBUG"
    assert not hasattr(settings, "port")
