"""Error class hierarchy tests."""

import pytest

from pytimespan._errors import (
    InvalidArgumentError,
    OutOfRangeError,
    ParseError,
    TimeSpanError,
    TypeMismatchError,
)


class TestTimeSpanErrorBase:
    def test_str_returns_user_message(self):
        err = TimeSpanError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = TimeSpanError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = TimeSpanError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = TimeSpanError("user msg", wrapped=cause)
        assert err.wrapped is cause


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        ParseError,
        OutOfRangeError,
        TypeMismatchError,
        InvalidArgumentError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_base(self, cls):
        assert issubclass(cls, TimeSpanError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_catchable_as_base(self, cls):
        with pytest.raises(TimeSpanError):
            raise cls("test")

    @pytest.mark.parametrize("cls", [ParseError, OutOfRangeError, InvalidArgumentError])
    def test_value_errors(self, cls):
        assert issubclass(cls, ValueError)

    def test_type_mismatch_is_type_error(self):
        assert issubclass(TypeMismatchError, TypeError)
