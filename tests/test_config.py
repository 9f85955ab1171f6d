"""Tests for environment-driven configuration."""

import logging
from unittest.mock import patch

import pytest

import config
from config import configure_logging, get_config


ENV_VARS = [
    "VERTICA_HOST",
    "VERTICA_PORT",
    "VERTICA_DATABASE",
    "VERTICA_USERNAME",
    "VERTICA_PASSWORD",
    "VERTICA_SCHEMA",
    "TWEET_LIMIT",
    "USE_MOCK_DATA",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    with patch.object(config, "load_dotenv"):
        yield


def test_defaults():
    cfg = get_config()

    assert cfg.vertica_host == "localhost"
    assert cfg.vertica_port == 5433
    assert cfg.vertica_database is None
    assert cfg.vertica_username is None
    assert cfg.vertica_schema == "public"
    assert cfg.tweet_limit == 1000
    assert cfg.default_use_mock is True
    assert cfg.log_level == "INFO"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("VERTICA_HOST", "vertica.example.com")
    monkeypatch.setenv("VERTICA_PORT", "15433")
    monkeypatch.setenv("VERTICA_DATABASE", "sentiment")
    monkeypatch.setenv("VERTICA_USERNAME", "dbadmin")
    monkeypatch.setenv("VERTICA_PASSWORD", "  secret  ")
    monkeypatch.setenv("VERTICA_SCHEMA", "superbowl")
    monkeypatch.setenv("TWEET_LIMIT", "200")
    monkeypatch.setenv("USE_MOCK_DATA", "FALSE")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    cfg = get_config()

    assert cfg.vertica_host == "vertica.example.com"
    assert cfg.vertica_port == 15433
    assert cfg.vertica_password == "secret"
    assert cfg.fq_schema == '"superbowl"'
    assert cfg.tweet_limit == 200
    assert cfg.default_use_mock is False
    assert cfg.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("VERTICA_SCHEMA", "   ")
    assert get_config().vertica_schema == "public"


def test_non_integer_port(monkeypatch):
    monkeypatch.setenv("VERTICA_PORT", "fifty")
    with pytest.raises(ValueError, match="VERTICA_PORT"):
        get_config()


def test_configure_logging_quiets_driver():
    with patch.object(config.logging, "basicConfig") as basic:
        configure_logging(get_config())

    basic.assert_called_once_with(level="INFO", format=config.LOG_FORMAT)
    assert logging.getLogger("vertica_python").level == logging.WARNING
