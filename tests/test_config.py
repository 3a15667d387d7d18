"""Tests for configuration, logging and HTTP client setup."""

import importlib
import os
from unittest.mock import patch

import httpx
import pytest
import structlog
from pydantic import ValidationError

import rsst
from rsst.config import settings as settings_module
from rsst.config.settings import Settings, get_settings
from rsst.exceptions import ConfigurationError, RssError
from rsst.utils.http_client import create_http_client
from rsst.utils.logger import configure_logging, get_logger


def test_settings_defaults():
    """Test that settings use sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.http_timeout == 30.0
        assert settings.user_agent is None
        assert settings.max_redirects == 10


def test_settings_env_override():
    """Test that RSST_ environment variables override defaults."""
    with patch.dict(
        os.environ,
        {
            "RSST_LOG_LEVEL": "DEBUG",
            "RSST_LOG_JSON": "true",
            "RSST_HTTP_TIMEOUT": "5.5",
            "RSST_USER_AGENT": "feed-reader/2.0",
            "RSST_MAX_REDIRECTS": "3",
        },
        clear=True,
    ):
        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.http_timeout == 5.5
        assert settings.user_agent == "feed-reader/2.0"
        assert settings.max_redirects == 3


def test_settings_reject_negative_redirect_limit():
    """Test that max_redirects must not be negative."""
    with patch.dict(os.environ, {"RSST_MAX_REDIRECTS": "-1"}, clear=True):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_is_cached(monkeypatch):
    """Test that settings load once and are shared afterwards."""
    monkeypatch.setattr(settings_module, "_settings", None)

    assert get_settings() is get_settings()


def test_invalid_env_does_not_break_import(monkeypatch):
    """Test that bad RSST_ values surface as ConfigurationError on first use."""
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.setenv("RSST_MAX_REDIRECTS", "many")

    importlib.reload(rsst)

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()

    assert isinstance(exc_info.value, RssError)
    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert "max_redirects" in str(exc_info.value)

    with pytest.raises(ConfigurationError):
        create_http_client()


@pytest.mark.asyncio
async def test_http_client_does_not_follow_redirects():
    """Test the library client leaves redirects to the caller."""
    async with create_http_client(timeout=3) as client:
        assert client.follow_redirects is False
        assert client.timeout == httpx.Timeout(3)


@pytest.mark.asyncio
async def test_http_client_user_agent():
    """Test an explicit User-Agent replaces the transport default."""
    async with create_http_client(user_agent="feed-reader/2.0") as client:
        assert client.headers["User-Agent"] == "feed-reader/2.0"


@pytest.mark.asyncio
async def test_http_client_keeps_default_user_agent():
    """Test that without configuration the httpx User-Agent is kept."""
    async with create_http_client() as client:
        assert client.headers["User-Agent"].startswith("python-httpx/")


@pytest.mark.parametrize("json_format", [True, False])
def test_configure_logging(json_format, capsys):
    """Test that both renderers emit the event."""
    configure_logging("DEBUG", json_format=json_format)
    try:
        get_logger("tests").info("Feed fetched", item_count=2)
    finally:
        structlog.reset_defaults()

    output = capsys.readouterr().out
    assert "Feed fetched" in output
    assert "item_count" in output
