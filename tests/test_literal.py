"""Duration literal grammar tests."""

from datetime import timedelta

import pytest

from pytimespan import parse_duration_literal
from pytimespan._errors import OutOfRangeError, ParseError


class TestClockForm:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("09:30", timedelta(hours=9, minutes=30)),
            ("9:30:15", timedelta(hours=9, minutes=30, seconds=15)),
            ("1.02:30:00", timedelta(days=1, hours=2, minutes=30)),
            ("02:30:15.5", timedelta(hours=2, minutes=30, seconds=15, microseconds=500000)),
            ("00:00:00.1234567", timedelta(microseconds=123456)),
            ("-1:00", timedelta(hours=-1)),
            ("3", timedelta(days=3)),
            ("-2", timedelta(days=-2)),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_duration_literal(text) == expected

    @pytest.mark.parametrize(
        "text", ["24:00", "12:60", "12:30:60", "00:00:00.12345678", "1.5:00:00.1.2"]
    )
    def test_out_of_range_components(self, text):
        with pytest.raises(ParseError):
            parse_duration_literal(text)


class TestUnitForm:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1h30m", timedelta(minutes=90)),
            ("1h 30m", timedelta(minutes=90)),
            ("90s", timedelta(seconds=90)),
            ("250ms", timedelta(milliseconds=250)),
            ("10us", timedelta(microseconds=10)),
            ("1500ns", timedelta(microseconds=1)),
            ("2d", timedelta(days=2)),
            ("-1d", timedelta(days=-1)),
            ("0s", timedelta(0)),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_duration_literal(text) == expected


class TestInvalid:
    @pytest.mark.parametrize("text", ["", "   ", "abc", "1.5h", "1x", "::"])
    def test_malformed(self, text):
        with pytest.raises(ParseError):
            parse_duration_literal(text)

    def test_none(self):
        with pytest.raises(ParseError):
            parse_duration_literal(None)

    def test_too_large(self):
        with pytest.raises(OutOfRangeError):
            parse_duration_literal("99999999999d")

    def test_wraps_lark_error(self):
        with pytest.raises(ParseError) as excinfo:
            parse_duration_literal("abc")
        assert excinfo.value.wrapped is not None
        assert "abc" in excinfo.value.internal()
