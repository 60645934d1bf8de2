"""Tests for the JSON logging configuration."""

from unittest.mock import patch

from estimation_hub.logging_config import LOGGING_CONFIG, build_logging_config, configure_logging


def test_build_sets_root_level_without_mutating_base():
    config = build_logging_config("debug")
    assert config["root"]["level"] == "DEBUG"
    assert LOGGING_CONFIG["root"]["level"] == "INFO"


def test_json_formatter_maps_gcp_fields():
    formatter = build_logging_config()["formatters"]["json"]
    assert formatter["()"] == "pythonjsonlogger.json.JsonFormatter"
    assert formatter["rename_fields"]["levelname"] == "severity"
    assert formatter["static_fields"] == {"service": "estimation-hub"}


def test_configure_logging_applies_dict_config():
    with patch("estimation_hub.logging_config.logging.config.dictConfig") as mock_dict_config:
        configure_logging("WARNING")
    mock_dict_config.assert_called_once()
    assert mock_dict_config.call_args.args[0]["root"]["level"] == "WARNING"
