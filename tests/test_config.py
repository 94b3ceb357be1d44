"""Tests for environment-driven widget settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from icon_finder.config import CatalogSettings, WidgetSettings, get_settings


def test_defaults_match_proxy_setup(monkeypatch):
    monkeypatch.delenv("ICON_FINDER_CATALOG__BASE_URL", raising=False)
    settings = WidgetSettings(_env_file=None)

    assert settings.catalog.base_url == "/api/streamline"
    assert settings.catalog.is_relative is True
    assert settings.catalog.family_slug == "streamline-light"
    assert settings.catalog.per_page == 100
    assert settings.catalog.request_timeout_seconds is None
    assert settings.search.debounce_seconds == 0.5


def test_nested_environment_overrides(monkeypatch):
    monkeypatch.setenv("ICON_FINDER_CATALOG__BASE_URL", "https://catalog.example/v1/")
    monkeypatch.setenv("ICON_FINDER_SEARCH__DEBOUNCE_SECONDS", "0.25")
    monkeypatch.setenv("ICON_FINDER_NOTIFICATIONS__ERROR_SECONDS", "6")

    settings = WidgetSettings(_env_file=None)

    assert settings.catalog.base_url == "https://catalog.example/v1"
    assert settings.catalog.is_relative is False
    assert settings.search.debounce_seconds == 0.25
    assert settings.notifications.error_seconds == 6


def test_blank_base_url_rejected():
    with pytest.raises(ValidationError):
        CatalogSettings(base_url="  ")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
