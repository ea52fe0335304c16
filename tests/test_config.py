import logging

import pytest

from modinfo import ConfigurationError, FormatError
from modinfo.config import ModInfoConfig, configure_logging, load_config


def test_defaults(monkeypatch):
    for key in ("MODINFO_ENVIRONMENT", "MODINFO_DEBUG", "MODINFO_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    config = load_config()
    assert config.environment == "development"
    assert config.debug is False
    assert config.effective_log_level() == logging.INFO


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("MODINFO_LOG_LEVEL", "warning")
    monkeypatch.setenv("MODINFO_ENVIRONMENT", "production")
    config = load_config()
    assert config.log_level == "WARNING"
    assert config.environment == "production"


def test_debug_forces_debug_level():
    assert ModInfoConfig(debug=True, log_level="ERROR").effective_log_level() == logging.DEBUG


def test_invalid_environment_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("MODINFO_ENVIRONMENT", "qa")
    with pytest.raises(ConfigurationError) as exc_info:
        load_config()
    assert exc_info.value.error_code == "CONFIGURATION_ERROR"
    assert exc_info.value.details["config_key"] == "environment"
    assert exc_info.value.details["config_value"] == "qa"


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    root.handlers = []
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging_uses_given_config(root_logger):
    configure_logging(ModInfoConfig(log_level="WARNING"))
    assert root_logger.level == logging.WARNING
    assert root_logger.handlers


def test_format_error_payload():
    err = FormatError(4, "expected 2 or 3 columns; got 1")
    payload = err.to_dict()
    assert payload["error_code"] == "FORMAT_ERROR"
    assert payload["message"] == "could not parse build info: line 4: expected 2 or 3 columns; got 1"
    assert payload["details"] == {"line": 4, "cause": "expected 2 or 3 columns; got 1"}
    assert "timestamp" in payload


def test_get_config_is_cached():
    from modinfo.config import get_config
    assert get_config() is get_config()
