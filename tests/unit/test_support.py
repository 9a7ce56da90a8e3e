"""Tests for settings, logging and retry utilities."""

import asyncio
import json
import logging

import pytest

from baybayin.config import DEFAULT_SETTINGS, ENDPOINT_ENV_VAR, load_settings
from baybayin.errors import ConfigError
from baybayin.utils.log import JSONFormatter, log_with_context, setup_logging
from baybayin.utils.retry import RetryConfig, with_retry


def test_load_default_settings():
    """Test the repository settings load over the defaults."""
    settings = load_settings()

    assert settings["defaults"]["font"] == "Baybayin Simple"
    assert settings["defaults"]["canceller"] == "+"
    assert set(settings) >= set(DEFAULT_SETTINGS)


def test_load_settings_override(tmp_path):
    """Test partial files are merged with defaults."""
    path = tmp_path / "settings.yaml"
    path.write_text("defaults:\n  font: Tawbid Ukit\nlogging:\n  level: DEBUG\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings["defaults"]["font"] == "Tawbid Ukit"
    assert settings["defaults"]["canceller"] == "+"
    assert settings["logging"]["level"] == "DEBUG"
    assert settings["logging"]["format"] == "pretty"


def test_load_settings_does_not_mutate_defaults(tmp_path):
    """Test merging leaves the built-in defaults untouched."""
    path = tmp_path / "settings.yaml"
    path.write_text("translate:\n  timeout: 1\n", encoding="utf-8")

    load_settings(path)

    assert DEFAULT_SETTINGS["translate"]["timeout"] == 30


def test_load_settings_missing_file(tmp_path):
    """Test an explicit missing path is an error."""
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "missing.yaml")


def test_load_settings_invalid_yaml(tmp_path):
    """Test malformed YAML."""
    path = tmp_path / "settings.yaml"
    path.write_text("defaults: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(path)


def test_load_settings_not_mapping(tmp_path):
    """Test a YAML list is rejected."""
    path = tmp_path / "settings.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_settings(path)


def test_endpoint_env_override(monkeypatch):
    """Test the endpoint environment variable."""
    monkeypatch.setenv(ENDPOINT_ENV_VAR, "http://env.test/translate")
    assert load_settings()["translate"]["endpoint"] == "http://env.test/translate"


def test_json_formatter_includes_context():
    """Test JSON log lines carry extra fields."""
    record = logging.LogRecord("baybayin.test", logging.INFO, __file__, 1, "converted", None, None)
    record.extra_fields = {"rows": 3}

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["message"] == "converted"
    assert data["rows"] == 3
    assert data["timestamp"].endswith("Z")


def test_setup_logging_file(tmp_path):
    """Test file logging writes JSON lines."""
    log_file = tmp_path / "logs" / "baybayin.log"
    logger = setup_logging(level="DEBUG", format_type="json", log_file=log_file)

    log_with_context(logger, "info", "batch done", rows=2, font="Tawbid Ukit")
    for handler in logger.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    data = json.loads(line)
    assert data["message"] == "batch done"
    assert data["rows"] == 2
    assert data["font"] == "Tawbid Ukit"


def test_setup_logging_replaces_handlers():
    """Test repeated setup does not stack handlers."""
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_retry_backoff():
    """Test exponential backoff is capped."""
    config = RetryConfig(max_retries=5, backoff_start=1.0, backoff_max=5.0)

    assert config.get_backoff(0) == 1.0
    assert config.get_backoff(1) == 2.0
    assert config.get_backoff(2) == 4.0
    assert config.get_backoff(3) == 5.0


def test_retry_only_retryable():
    """Test non-retryable exceptions propagate immediately."""
    config = RetryConfig(max_retries=3, retryable_exceptions=(ConnectionError,))

    assert config.should_retry(0, ConnectionError())
    assert not config.should_retry(0, ValueError())
    assert not config.should_retry(3, ConnectionError())


def test_with_retry_succeeds_after_failures():
    """Test with_retry returns once the call succeeds."""
    calls = []

    async def flaky() -> str:
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError("try again")
        return "ok"

    config = RetryConfig(max_retries=3, backoff_start=0.0)

    assert asyncio.run(with_retry(flaky, config)) == "ok"
    assert len(calls) == 3
