"""Tests for engine settings and their environment overrides."""

from __future__ import annotations

import logging

import pytest

from styletheme.services.settings import DEFAULT_MAX_DEPTH, EngineSettings, load_settings
from styletheme.theme import Theme


def test_load_returns_defaults_without_overrides() -> None:
    settings = load_settings()

    assert settings == EngineSettings()
    assert settings.max_depth == DEFAULT_MAX_DEPTH
    assert settings.deprecation_warnings is True
    assert settings.debug_logging is False


def test_explicit_overrides_are_applied() -> None:
    settings = load_settings(overrides={"max_depth": 8, "debug_logging": True})

    assert settings.max_depth == 8
    assert settings.debug_logging is True


def test_unknown_overrides_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="styletheme.services.settings"):
        settings = load_settings(overrides={"colour": "red"})

    assert settings == EngineSettings()
    assert "colour" in caplog.text


def test_environment_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STYLETHEME_MAX_DEPTH", "12")
    monkeypatch.setenv("STYLETHEME_DEPRECATION_WARNINGS", "off")
    monkeypatch.setenv("STYLETHEME_DEBUG_LOGGING", "YES")

    settings = load_settings(overrides={"max_depth": 4})

    assert settings.max_depth == 12
    assert settings.deprecation_warnings is False
    assert settings.debug_logging is True


@pytest.mark.parametrize("value", ["deep", "0", "-3"])
def test_invalid_depth_override_is_ignored(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, value: str
) -> None:
    monkeypatch.setenv("STYLETHEME_MAX_DEPTH", value)

    with caplog.at_level(logging.WARNING, logger="styletheme.services.settings"):
        settings = load_settings()

    assert settings.max_depth == DEFAULT_MAX_DEPTH
    assert "STYLETHEME_MAX_DEPTH" in caplog.text


def test_settings_reject_non_positive_depth() -> None:
    with pytest.raises(ValueError):
        EngineSettings(max_depth=0)


def test_theme_loads_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STYLETHEME_MAX_DEPTH", "3")

    theme = Theme()

    assert theme.settings.max_depth == 3


def test_debug_logging_promotes_resolution_logs(caplog: pytest.LogCaptureFixture) -> None:
    theme = Theme(settings=EngineSettings(debug_logging=True))
    theme.set_source("a", lambda theme, mod=None: {"foo": 1})

    with caplog.at_level(logging.INFO, logger="styletheme.theme.engine"):
        theme.get_style("a")

    records = [record for record in caplog.records if record.name == "styletheme.theme.engine"]
    assert any(record.levelno == logging.INFO and "Resolved style a" in record.getMessage() for record in records)
