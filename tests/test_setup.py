"""
Tests for configuration, logging and package wiring
Run this to test: python -m pytest tests/test_setup.py -v
"""

import logging

import pytest
from pydantic import ValidationError

from sherlock.utils.config import (
    CREATE_RECORD_DEFAULTS,
    UPDATE_RECORD_DEFAULTS,
    RecordDefaults,
    Settings,
    get_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("SHERLOCK_API_URL", "SHERLOCK_ACCESS_TOKEN", "SHERLOCK_LOG_LEVEL",
                "SHERLOCK_REQUEST_TIMEOUT", "SHERLOCK_API_PREFIX"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_settings_defaults():
    """Settings need no environment at all"""
    settings = Settings(_env_file=None)
    assert settings.api_url == "https://api.sherlockdomains.com"
    assert settings.base_url == "https://api.sherlockdomains.com/api/v0"
    assert settings.access_token is None
    assert settings.request_timeout is None
    assert settings.log_level == "WARNING"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SHERLOCK_API_URL", "http://localhost:8000")
    monkeypatch.setenv("SHERLOCK_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("SHERLOCK_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHERLOCK_REQUEST_TIMEOUT", "5")

    settings = Settings(_env_file=None)

    assert settings.base_url == "http://localhost:8000/api/v0"
    assert settings.access_token == "env-token"
    assert settings.log_level == "DEBUG"
    assert settings.request_timeout == 5.0


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")


@pytest.mark.parametrize("prefix, expected", [
    ("api/v1", "/api/v1"),
    ("/api/v1/", "/api/v1"),
    ("", ""),
])
def test_api_prefix_is_normalised(prefix, expected):
    assert Settings(_env_file=None, api_prefix=prefix).api_prefix == expected


def test_get_settings_is_a_singleton():
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_record_default_tables():
    assert CREATE_RECORD_DEFAULTS.apply() == {"type": "TXT", "name": "test", "value": "test-1", "ttl": 3600}
    assert UPDATE_RECORD_DEFAULTS.apply() == {"type": "TXT", "name": "test-2", "value": "test-2", "ttl": 3600}


def test_record_defaults_keep_explicit_values():
    defaults = RecordDefaults(type="CNAME", name="www", value="example.com", ttl=600)
    assert defaults.apply(value="other.example.com") == {
        "type": "CNAME", "name": "www", "value": "other.example.com", "ttl": 600
    }


def test_logger_is_namespaced():
    """Module loggers live under the sherlock namespace"""
    from sherlock.utils.logger import get_logger

    assert get_logger("sherlock.api.client").name == "sherlock.api.client"
    assert get_logger("scripts").name == "sherlock.scripts"


def test_configure_logging_attaches_handlers(tmp_path):
    from sherlock.utils.logger import configure_logging, LOGGER_ROOT

    root = logging.getLogger(LOGGER_ROOT)
    saved = list(root.handlers)
    for handler in saved:
        root.removeHandler(handler)

    try:
        log_file = tmp_path / "logs" / "sherlock.log"
        logger = configure_logging("INFO", log_file=str(log_file))
        assert logger.name == LOGGER_ROOT
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2
        assert log_file.parent.is_dir()
    finally:
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)
        for handler in saved:
            root.addHandler(handler)


def test_package_exports():
    import sherlock

    assert sherlock.SherlockClient is not None
    assert callable(sherlock.build_tools)
    assert issubclass(sherlock.IncompleteContactError, sherlock.APIError)


def test_client_without_config_follows_environment(monkeypatch):
    """A bare SherlockClient picks its host from SHERLOCK_API_URL"""
    from sherlock.api.client import SherlockClient

    monkeypatch.setenv("SHERLOCK_API_URL", "https://staging.example.test")

    assert SherlockClient("token").base_url == "https://staging.example.test/api/v0"
