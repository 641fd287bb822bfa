"""Tests for the exception hierarchy and error handling helpers."""

import logging

import pytest
from pydantic import BaseModel, Field, ValidationError

from loadring.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    DeviceError,
    DeviceWriteError,
    ErrorContext,
    LoadParseError,
    LoadReadError,
    LoadRingError,
    LoadSampleError,
    format_error_for_display,
    wrap_pydantic_error,
)


class IntervalModel(BaseModel):
    poll_interval: float = Field(default=5.0, gt=0)
    cores: int = 1


class TestHierarchy:
    """Test exception types and messages."""

    @pytest.mark.unit
    def test_subclasses(self):
        assert issubclass(LoadReadError, LoadSampleError)
        assert issubclass(LoadParseError, LoadSampleError)
        assert issubclass(DeviceWriteError, DeviceError)
        assert issubclass(ConfigValidationError, ConfigurationError)
        for cls in (LoadSampleError, DeviceError, ConfigurationError):
            assert issubclass(cls, LoadRingError)

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        error = DeviceWriteError("/proc/acpi/nuc_led", "ring,0,none,off", "Permission denied")
        assert str(error) == "Failed to update LED ring at /proc/acpi/nuc_led"
        assert "Permission denied" in error.technical_message
        assert "ring,0,none,off" in error.technical_message
        assert "Suggestion:" in error.get_full_message()

    @pytest.mark.unit
    def test_technical_message_defaults_to_user_message(self):
        error = LoadRingError("boom")
        assert error.technical_message == "boom"
        assert error.get_full_message() == "boom"


class TestWrapPydanticError:
    """Test converting pydantic errors."""

    @pytest.mark.unit
    def test_single_field(self):
        with pytest.raises(ValidationError) as exc_info:
            IntervalModel.model_validate_json('{"poll_interval": 0}')
        error = wrap_pydantic_error(exc_info.value, "/etc/loadring.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "poll_interval"
        assert "seconds" in error.recovery_hint

    @pytest.mark.unit
    def test_multiple_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            IntervalModel.model_validate_json('{"poll_interval": 0, "cores": "x"}')
        error = wrap_pydantic_error(exc_info.value, "/etc/loadring.json")
        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message

    @pytest.mark.unit
    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc_info:
            IntervalModel.model_validate_json('{"poll_interval": ')
        error = wrap_pydantic_error(exc_info.value, "/etc/loadring.json")
        assert isinstance(error, ConfigFileInvalidError)


class TestErrorContext:
    """Test the logging context manager."""

    @pytest.mark.unit
    def test_suppresses_when_not_re_raising(self, caplog):
        with caplog.at_level(logging.ERROR):
            with ErrorContext("switch ring off", re_raise=False) as ctx:
                raise DeviceWriteError("/x", "ring,0,none,off")
        assert isinstance(ctx.error, DeviceWriteError)
        assert "Failed to switch ring off" in caplog.text

    @pytest.mark.unit
    def test_re_raises_by_default(self):
        with pytest.raises(ValueError):
            with ErrorContext("parse"):
                raise ValueError("bad")

    @pytest.mark.unit
    def test_no_error(self):
        with ErrorContext("noop") as ctx:
            pass
        assert ctx.error is None


class TestFormatErrorForDisplay:

    @pytest.mark.unit
    def test_custom_error(self):
        error = LoadReadError("/proc/loadavg", "gone")
        message, hint = format_error_for_display(error)
        assert message == "Cannot read load average from /proc/loadavg"
        assert "load_avg_path" in hint

    @pytest.mark.unit
    def test_standard_error(self):
        assert format_error_for_display(ValueError("bad")) == ("ValueError: bad", None)
