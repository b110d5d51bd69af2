"""Tests for the centralized config module."""

from pathlib import Path

import pytest

from steambot.config import get_default_config_path, get_global_env_path, get_home_dir


@pytest.fixture(autouse=True)
def _clear_cache(monkeypatch):
    """Clear lru_cache before and after each test."""
    get_home_dir.cache_clear()
    monkeypatch.delenv("STEAMBOT_HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    yield
    get_home_dir.cache_clear()


class TestGetHomeDir:
    def test_default_fallback(self):
        assert get_home_dir() == Path.home() / ".steambot"

    def test_steambot_home_override(self, monkeypatch):
        monkeypatch.setenv("STEAMBOT_HOME", "/tmp/custom-sb")
        get_home_dir.cache_clear()
        assert get_home_dir() == Path("/tmp/custom-sb")

    def test_xdg_data_home_fallback(self, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", "/tmp/xdg-data")
        get_home_dir.cache_clear()
        assert get_home_dir() == Path("/tmp/xdg-data/steambot")

    def test_steambot_home_takes_precedence_over_xdg(self, monkeypatch):
        monkeypatch.setenv("STEAMBOT_HOME", "/tmp/custom-sb")
        monkeypatch.setenv("XDG_DATA_HOME", "/tmp/xdg-data")
        get_home_dir.cache_clear()
        assert get_home_dir() == Path("/tmp/custom-sb")

    def test_cache_returns_same_object(self):
        assert get_home_dir() is get_home_dir()


class TestDerivedPaths:
    def test_global_env_path(self, monkeypatch):
        monkeypatch.setenv("STEAMBOT_HOME", "/tmp/sb")
        get_home_dir.cache_clear()
        assert get_global_env_path() == Path("/tmp/sb/.env")

    def test_default_config_path(self, monkeypatch):
        monkeypatch.setenv("STEAMBOT_HOME", "/tmp/sb")
        get_home_dir.cache_clear()
        assert get_default_config_path() == Path("/tmp/sb/config.yaml")
