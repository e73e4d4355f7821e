"""Tests for configuration adapter."""

from datetime import date

import pytest

from vis_timetables.adapters.config import AppConfig


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    for name in ("VIS_API_BASE_URL", "VIS_LANGUAGE", "VIS_DEFAULT_TRANSPORT_MODE"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig.for_testing()

    assert config.api_base_url == "http://localhost:3000"
    assert config.api_timeout_seconds == 10
    assert config.language == "hr"
    assert config.default_transport_mode == "sea"
    assert config.timezone == "Europe/Zagreb"
    assert config.user_mode == "visitor"
    assert config.banner_screen == "transport"
    assert config.carriers_file is None
    assert config.holidays_file is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given VIS_ environment variables, when loading config, then they are used."""
    monkeypatch.setenv("VIS_API_BASE_URL", "https://api.vis.hr/")
    monkeypatch.setenv("VIS_LANGUAGE", "EN")
    monkeypatch.setenv("VIS_MUNICIPALITY", "komiza")
    monkeypatch.setenv("VIS_API_TIMEOUT_SECONDS", "3")

    config = AppConfig.for_testing()

    assert config.api_base_url == "https://api.vis.hr"
    assert config.language == "en"
    assert config.municipality == "komiza"
    assert config.api_timeout_seconds == 3


def test_config_validates_language() -> None:
    """Given an unsupported language, when loading config, then validation fails."""
    with pytest.raises(ValueError, match="language must be either"):
        AppConfig.for_testing(language="de")


def test_config_validates_transport_mode() -> None:
    """Given an unknown transport mode, when loading config, then validation fails."""
    with pytest.raises(ValueError, match="default_transport_mode must be either"):
        AppConfig.for_testing(default_transport_mode="air")


def test_today_is_a_date() -> None:
    """Given a timezone, when asking for today, then a calendar date is returned."""
    config = AppConfig.for_testing(timezone="Europe/Zagreb")

    assert isinstance(config.today(), date)
