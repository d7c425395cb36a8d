"""Tests for configuration and logging setup."""

import json
import logging

import pytest

from moneymoney.bridge.factories import create_osascript_executor
from moneymoney.config import DEFAULT_OSASCRIPT_PATH, ClientConfig
from moneymoney.logging import JsonFormatter, get_logger, setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "MONEYMONEY_OSASCRIPT",
        "MONEYMONEY_TIMEOUT",
        "MONEYMONEY_CHECK_RUNNING",
        "MONEYMONEY_EXPERIMENTAL",
        "MONEYMONEY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_config_defaults(clean_env):
    """Test defaults when no environment variables are set."""
    config = ClientConfig.from_env()

    assert config.osascript_path == DEFAULT_OSASCRIPT_PATH
    assert config.timeout_seconds == 60.0
    assert config.check_running is True
    assert config.experimental is False
    assert config.log_level == "WARNING"


def test_config_from_env(clean_env):
    """Test every setting can be overridden from the environment."""
    clean_env.setenv("MONEYMONEY_OSASCRIPT", "/opt/bin/osascript")
    clean_env.setenv("MONEYMONEY_TIMEOUT", "5.5")
    clean_env.setenv("MONEYMONEY_CHECK_RUNNING", "no")
    clean_env.setenv("MONEYMONEY_EXPERIMENTAL", "TRUE")
    clean_env.setenv("MONEYMONEY_LOG_LEVEL", "DEBUG")

    config = ClientConfig.from_env()

    assert config.osascript_path == "/opt/bin/osascript"
    assert config.timeout_seconds == 5.5
    assert config.check_running is False
    assert config.experimental is True
    assert config.log_level == "DEBUG"


def test_executor_factory_uses_config():
    """Test the factory passes config through to the executor."""
    config = ClientConfig(osascript_path="/x/osascript", timeout_seconds=None, check_running=False)

    executor = create_osascript_executor(config)

    assert executor.osascript_path == "/x/osascript"
    assert executor.timeout is None
    assert executor.check_running is False


def test_setup_logging_configures_package_logger():
    """Test the package logger gets exactly one handler at the given level."""
    setup_logging("debug")
    setup_logging("INFO")

    logger = logging.getLogger("moneymoney")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_setup_logging_unknown_level_falls_back():
    """Test unknown level names fall back to WARNING."""
    setup_logging("CHATTY")

    assert logging.getLogger("moneymoney").level == logging.WARNING


def test_json_formatter():
    """Test JSON output includes the operation when given."""
    record = logging.LogRecord("moneymoney.test", logging.INFO, __file__, 1, "sent %s", ("x",), None)
    record.operation = "export accounts"

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "sent x"
    assert data["level"] == "INFO"
    assert data["logger"] == "moneymoney.test"
    assert data["operation"] == "export accounts"


def test_get_logger():
    """Test get_logger returns named loggers."""
    assert get_logger("moneymoney.bridge").name == "moneymoney.bridge"
