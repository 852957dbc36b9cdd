"""
Tests for settings validation and logging setup.
"""

import logging

import pytest
import structlog

from steam_age.config import Settings
from steam_age.logging_config import configure_logging, get_log_level


def test_defaults_are_valid():
    settings = Settings()
    assert settings.upstream_timeout > 0
    assert settings.cache_key_prefix


def test_rejects_non_positive_timeout():
    with pytest.raises(ValueError, match="UPSTREAM_TIMEOUT"):
        Settings(upstream_timeout=0)


def test_rejects_bad_port():
    with pytest.raises(ValueError, match="API_PORT"):
        Settings(api_port=70000)


def test_rejects_unknown_log_format():
    with pytest.raises(ValueError, match="LOG_FORMAT"):
        Settings(log_format="xml")


def test_has_steam_api_key():
    assert Settings(steam_api_key="abc").has_steam_api_key
    assert not Settings(steam_api_key="").has_steam_api_key


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nonsense", logging.INFO)],
)
def test_log_level(level, expected):
    assert get_log_level(Settings(log_level=level)) == expected


def test_configure_logging_json():
    configure_logging(Settings(log_format="json"))
    assert structlog.is_configured()
