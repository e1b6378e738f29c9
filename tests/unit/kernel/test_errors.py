"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from logging_service.config.validation import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from logging_service.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidEventError,
    SerializationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "type": "BaseError",
            "code": "my_code",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_to_dict_includes_cause(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert err.to_dict()["cause"] == "ValueError: original"

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestInvalidEventError:
    def test_is_domain_error(self) -> None:
        assert issubclass(InvalidEventError, DomainError)
        assert issubclass(DomainError, BaseError)

    def test_default_code(self) -> None:
        assert InvalidEventError("bad").code == "invalid_event"

    def test_field_is_recorded_in_detail(self) -> None:
        err = InvalidEventError("event.tags cannot be empty", field="tags")
        assert err.field == "tags"
        assert err.to_dict()["detail"] == {"field": "tags"}

    def test_field_defaults_to_none(self) -> None:
        err = InvalidEventError("event must be a mapping")
        assert err.field is None
        assert err.detail == {}


class TestSerializationError:
    def test_is_infrastructure_error(self) -> None:
        assert issubclass(SerializationError, InfrastructureError)

    def test_payload_type(self) -> None:
        err = SerializationError("cannot encode", payload_type="dict")
        assert err.payload_type == "dict"
        assert err.code == "serialization_error"


class TestConfigErrors:
    def test_configuration_error_hierarchy(self) -> None:
        assert issubclass(ConfigurationError, ConfigError)
        assert issubclass(ConfigError, ApplicationError)

    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("LOGGING_SERVICE_LOG_LEVEL")
        assert err.setting_name == "LOGGING_SERVICE_LOG_LEVEL"
        assert isinstance(err, ConfigurationError)

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "unknown log level")
        assert err.value == "LOUD"
        assert "LOUD" in err.message
        with pytest.raises(ConfigurationError):
            raise err
