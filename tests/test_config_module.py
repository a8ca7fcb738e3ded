"""Tests for :mod:`graphdiff.config`."""

from __future__ import annotations

import logging

from graphdiff import config


def test_get_env_prefers_process_environment(monkeypatch):
    """Explicit environment variables should win over any ``.env`` contents."""

    config._load_environment.cache_clear()
    monkeypatch.setenv("GRAPHDIFF_LOG_LEVEL", "debug")

    assert config.get_env("GRAPHDIFF_LOG_LEVEL") == "debug"


def test_get_env_returns_default_when_missing(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.delenv("GRAPHDIFF_DOES_NOT_EXIST", raising=False)

    assert config.get_env("GRAPHDIFF_DOES_NOT_EXIST", default="fallback") == "fallback"


def test_log_level_parses_level_names(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.setenv("GRAPHDIFF_LOG_LEVEL", " info ")

    assert config.log_level() == logging.INFO


def test_log_level_falls_back_on_unknown_name(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.setenv("GRAPHDIFF_LOG_LEVEL", "chatty")

    assert config.log_level() == logging.WARNING


def test_load_environment_reads_dotenv_only_once(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: calls.append(args))
    config._load_environment.cache_clear()

    try:
        config.get_env("GRAPHDIFF_LOG_LEVEL")
        config.get_env("GRAPHDIFF_LOG_LEVEL")
        assert len(calls) == 1
    finally:
        config._load_environment.cache_clear()
