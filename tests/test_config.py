"""Tests for environment configuration."""

from __future__ import annotations

import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_postgres_scheme_is_rewritten(monkeypatch, reload_config) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgres://user:pw@db:5432/transactions")

    assert reload_config().DATABASE_URL == "postgresql://user:pw@db:5432/transactions"


def test_limit_currency_defaults_to_usd(monkeypatch, reload_config) -> None:
    monkeypatch.delenv("DEFAULT_LIMIT_CURRENCY", raising=False)

    assert reload_config().DEFAULT_LIMIT_CURRENCY == "USD"


def test_cors_origins_parse_comma_separated_list(monkeypatch, reload_config) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.com, https://b.com")

    assert reload_config().CORS_ALLOW_ORIGINS == ["https://a.com", "https://b.com"]


def test_unknown_log_level_falls_back_to_info(monkeypatch, reload_config) -> None:
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    assert reload_config().LOG_LEVEL == "INFO"


def test_known_log_level_is_kept(monkeypatch, reload_config) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert reload_config().LOG_LEVEL == "DEBUG"
