"""Tests for Settings loading."""

from app.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None, database_url="sqlite://")

    assert settings.admin_suggestion_limit == 3
    assert settings.discover_feed_limit is None
    assert settings.profile_search_min_similarity == 60.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ADMIN_SUGGESTION_LIMIT", "5")
    monkeypatch.setenv("DISCOVER_FEED_LIMIT", "25")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.admin_suggestion_limit == 5
    assert settings.discover_feed_limit == 25
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
