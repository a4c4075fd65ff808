"""Verbose duration rendering tests."""

from datetime import timedelta

import pytest

from pytimespan import UNBOUNDED, FormatOptions, NumberFormat, format_verbose

FINE = FormatOptions(minimum_increment=timedelta(microseconds=1))


class TestSentinels:
    def test_zero(self):
        assert format_verbose(timedelta(0)) == ""

    def test_negative(self):
        assert format_verbose(timedelta(seconds=-5)) == ""

    def test_unbounded(self):
        assert format_verbose(UNBOUNDED) == "?"


class TestBuckets:
    @pytest.mark.parametrize(
        "duration,expected",
        [
            (timedelta(days=3), "3 days"),
            (timedelta(days=2.5), "2.5 days"),
            (timedelta(hours=54), "2.2 days"),
            (timedelta(days=2), "48 hours"),
            (timedelta(hours=25), "25 hours"),
            (timedelta(hours=2), "2 hours"),
            (timedelta(minutes=66), "1.1 hours"),
            (timedelta(minutes=62), "62 minutes"),
            (timedelta(minutes=20), "20 minutes"),
            (timedelta(minutes=10), "10 minutes"),
            (timedelta(seconds=100), "1.7 minutes"),
            (timedelta(seconds=91), "1.6 minutes"),
            (timedelta(seconds=90), "90 seconds"),
            (timedelta(seconds=30), "30 seconds"),
            (timedelta(milliseconds=1500), "2 seconds"),
            (timedelta(seconds=1), "1 second"),
        ],
    )
    def test_default_minimum(self, duration, expected):
        assert format_verbose(duration) == expected

    def test_first_bucket_wins(self):
        # 25 hours is 1.0 days after rounding, so it falls through to hours.
        assert format_verbose(timedelta(hours=25)) == "25 hours"


class TestMinimumIncrement:
    def test_below_one_second_forced_to_one_second(self):
        assert format_verbose(timedelta(milliseconds=500)) == "1 second"

    def test_one_millisecond_forced_to_one_second(self):
        assert format_verbose(timedelta(milliseconds=1)) == "1 second"

    def test_day_floor(self):
        options = FormatOptions(minimum_increment=timedelta(days=1))
        assert format_verbose(timedelta(hours=12), options) == "0.5 days"

    def test_day_floor_rounds_to_zero(self):
        options = FormatOptions(minimum_increment=timedelta(days=1))
        assert format_verbose(timedelta(hours=1), options) == "0 days"

    def test_hour_floor(self):
        options = FormatOptions(minimum_increment=timedelta(hours=1))
        assert format_verbose(timedelta(minutes=30), options) == "0.5 hours"

    def test_minute_floor(self):
        options = FormatOptions(minimum_increment=timedelta(minutes=1))
        assert format_verbose(timedelta(seconds=30), options) == "0.5 minutes"

    def test_above_floor_not_forced(self):
        options = FormatOptions(minimum_increment=timedelta(minutes=1))
        assert format_verbose(timedelta(seconds=70), options) == "70 seconds"


class TestMilliseconds:
    def test_exactly_one(self):
        assert format_verbose(timedelta(milliseconds=1), FINE) == "1 millisecond"

    def test_ceiling(self):
        assert format_verbose(timedelta(microseconds=1500), FINE) == "2 milliseconds"

    def test_whole_milliseconds(self):
        assert format_verbose(timedelta(milliseconds=500), FINE) == "500 milliseconds"

    def test_fraction(self):
        assert format_verbose(timedelta(microseconds=250), FINE) == "0.250 milliseconds"


class TestNumberFormat:
    def test_decimal_separator(self):
        options = FormatOptions(number_format=NumberFormat(decimal_separator=","))
        assert format_verbose(timedelta(days=2.5), options) == "2,5 days"

    def test_fraction_separator(self):
        options = FormatOptions(
            minimum_increment=timedelta(microseconds=1),
            number_format=NumberFormat(decimal_separator=",", group_separator="."),
        )
        assert format_verbose(timedelta(microseconds=250), options) == "0,250 milliseconds"

    def test_grouping(self):
        numbers = NumberFormat(decimal_separator=",", group_separator=".")
        assert numbers.grouped(1234567, 0) == "1.234.567"

    def test_general_drops_trailing_zero(self):
        assert NumberFormat().general(25.0) == "25"
        assert NumberFormat().general(1.6) == "1.6"
