import importlib
import logging

import pytest

from jokeapi import config


@pytest.fixture
def reload_config(monkeypatch):
    for name in ("JOKEAPI_BASE_URL", "JOKEAPI_TIMEOUT", "JOKEAPI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    reload_config()
    assert config.BASE_URL == "https://v2.jokeapi.dev"
    assert config.TIMEOUT == 5.0
    assert config.LOG_LEVEL == "WARNING"


def test_base_url_override_strips_slash(monkeypatch, reload_config):
    monkeypatch.setenv("JOKEAPI_BASE_URL", "http://localhost:8076/")
    reload_config()
    assert config.BASE_URL == "http://localhost:8076"


def test_timeout_override(monkeypatch, reload_config):
    monkeypatch.setenv("JOKEAPI_TIMEOUT", "2.5")
    reload_config()
    assert config.TIMEOUT == 2.5


def test_invalid_timeout_falls_back(monkeypatch, reload_config, caplog):
    monkeypatch.setenv("JOKEAPI_TIMEOUT", "soon")
    with caplog.at_level(logging.WARNING, logger="jokeapi.config"):
        reload_config()
    assert config.TIMEOUT == 5.0
    assert "JOKEAPI_TIMEOUT" in caplog.text


def test_log_level_override(monkeypatch, reload_config):
    monkeypatch.setenv("JOKEAPI_LOG_LEVEL", "debug")
    reload_config()
    assert config.LOG_LEVEL == "DEBUG"


def test_invalid_log_level_falls_back(monkeypatch, reload_config, caplog):
    monkeypatch.setenv("JOKEAPI_LOG_LEVEL", "FOO")
    with caplog.at_level(logging.WARNING, logger="jokeapi.config"):
        reload_config()
    assert config.LOG_LEVEL == "WARNING"
    assert "JOKEAPI_LOG_LEVEL" in caplog.text
