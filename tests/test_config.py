"""Tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from devmatch.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.default_limit == 20
    assert settings.max_limit == 100
    assert settings.preview_sample_size == 6
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVMATCH_DEFAULT_LIMIT", "5")
    monkeypatch.setenv("DEVMATCH_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.default_limit == 5
    assert settings.log_level == "debug"


def test_default_limit_cannot_exceed_max(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVMATCH_DEFAULT_LIMIT", "50")
    monkeypatch.setenv("DEVMATCH_MAX_LIMIT", "10")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
