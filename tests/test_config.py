"""Tests for settings loading."""

from __future__ import annotations

import pytest

from canonref.config import Settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()
        assert settings.context_verses == 5
        assert settings.deep_link_scheme == "logos4:"
        assert settings.log_level == "WARNING"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CANONREF_CONTEXT_VERSES", "3")
        monkeypatch.setenv("CANONREF_DEEP_LINK_SCHEME", "logos:")
        monkeypatch.setenv("CANONREF_LOG_LEVEL", "debug")

        settings = Settings.from_env()
        assert settings.context_verses == 3
        assert settings.deep_link_scheme == "logos:"
        assert settings.log_level == "DEBUG"

    def test_from_env_without_overrides(self, monkeypatch):
        for name in (
            "CANONREF_CONTEXT_VERSES",
            "CANONREF_DEEP_LINK_SCHEME",
            "CANONREF_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        assert Settings.from_env() == Settings()

    def test_invalid_context_verses(self, monkeypatch):
        monkeypatch.setenv("CANONREF_CONTEXT_VERSES", "five")
        with pytest.raises(ValueError, match="CANONREF_CONTEXT_VERSES"):
            Settings.from_env()
