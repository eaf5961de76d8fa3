"""Tests for domain/exceptions."""

import pytest

from calltree.domain.exceptions import CallTreeError, ConfigurationError, TraceFormatError


class TestCallTreeError:
    """Tests for the root exception."""

    def test_is_exception(self) -> None:
        assert issubclass(CallTreeError, Exception)

    def test_io_errors_are_not_call_tree_errors(self) -> None:
        assert not issubclass(OSError, CallTreeError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_is_call_tree_error(self) -> None:
        assert issubclass(ConfigurationError, CallTreeError)

    def test_attributes(self) -> None:
        err = ConfigurationError("edge_class_map", "bad key")
        assert err.field == "edge_class_map"
        assert err.reason == "bad key"

    def test_message_format(self) -> None:
        err = ConfigurationError("max_depth", "negative")
        assert str(err) == "Invalid configuration 'max_depth': negative"

    def test_empty_field_raises(self) -> None:
        with pytest.raises(ValueError, match="field must not be empty"):
            ConfigurationError("", "reason")

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            ConfigurationError("field", "")


class TestTraceFormatError:
    """Tests for TraceFormatError."""

    def test_is_call_tree_error(self) -> None:
        assert issubclass(TraceFormatError, CallTreeError)

    def test_message_format(self) -> None:
        err = TraceFormatError(3, "bad", "no marker")
        assert str(err) == "Malformed trace line 3 ('bad'): no marker"
        assert err.line_no == 3
        assert err.line == "bad"

    def test_invalid_line_no_raises(self) -> None:
        with pytest.raises(ValueError, match="line_no must be >= 1"):
            TraceFormatError(0, "bad", "reason")

    def test_can_catch_as_call_tree_error(self) -> None:
        with pytest.raises(CallTreeError) as exc_info:
            raise TraceFormatError(1, "x", "reason")
        assert isinstance(exc_info.value, TraceFormatError)
