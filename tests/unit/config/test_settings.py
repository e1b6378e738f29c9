"""Unit tests for config settings and the env loader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar

import pytest

from logging_service.config.settings import EnvSettingsLoader, Settings
from logging_service.config.validation import ConfigError, MissingRequiredSettingError


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    callback: Callable[[], None] | None = None


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


@dataclass
class StrictSettings(Settings):
    _prefix: ClassVar[str] = "STRICT"

    port: int = 1

    def _validate(self) -> None:
        if self.port <= 0:
            raise ValueError("port must be positive")


class TestEnvSettingsLoader:
    def test_defaults_when_env_empty(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080

    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int_and_float(self) -> None:
        settings = EnvSettingsLoader(environ={"APP_PORT": "9000", "APP_RATIO": "0.25"}).load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    def test_loads_bool(self) -> None:
        for truthy in ("true", "1", "yes", "on"):
            assert EnvSettingsLoader(environ={"APP_DEBUG": truthy}).load(AppSettings).debug is True
        assert EnvSettingsLoader(environ={"APP_DEBUG": "off"}).load(AppSettings).debug is False

    def test_non_scalar_fields_are_not_read(self) -> None:
        settings = EnvSettingsLoader(environ={"APP_CALLBACK": "print"}).load(AppSettings)
        assert settings.callback is None

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_validation_failure_wrapped_in_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader(environ={"STRICT_PORT": "-1"}).load(StrictSettings)


class TestSettingsBase:
    def test_field_names(self) -> None:
        assert AppSettings.field_names() == {"host", "port", "ratio", "debug", "callback"}

    def test_describe_names_callables(self) -> None:
        def on_ready() -> None:
            return None

        summary = AppSettings(port=9000, callback=on_ready).describe()
        assert summary["port"] == 9000
        assert summary["callback"].endswith("on_ready")
        assert summary["debug"] is False

    def test_validate_runs_on_construction(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            StrictSettings(port=0)
