"""Verbose duration rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta

from pytimespan._constants import (
    ONE_DAY,
    ONE_HOUR,
    ONE_MILLISECOND,
    ONE_MINUTE,
    ONE_SECOND,
    UNBOUNDED,
)
from pytimespan._utils import is_precise_equal

__all__ = ["FormatOptions", "NumberFormat", "format_verbose"]


@dataclass(frozen=True)
class NumberFormat:
    """Separators used when rendering numbers."""

    decimal_separator: str = "."
    group_separator: str = ","

    def general(self, value: float) -> str:
        """Shortest round-trip form, without a trailing ``.0``."""
        text = str(int(value)) if value.is_integer() else repr(value)
        return text.replace(".", self.decimal_separator)

    def grouped(self, value: float, decimals: int) -> str:
        """Fixed decimals with thousands grouping."""
        text = f"{value:,.{decimals}f}"
        return (
            text.replace(",", "\0")
            .replace(".", self.decimal_separator)
            .replace("\0", self.group_separator)
        )


@dataclass(frozen=True)
class FormatOptions:
    """Configuration for :func:`format_verbose`.

    ``minimum_increment`` is the smallest step the caller cares about; a
    duration at or below it is forced into the bucket of the increment's
    own unit.
    """

    minimum_increment: timedelta = ONE_SECOND
    number_format: NumberFormat = field(default_factory=NumberFormat)


def format_verbose(duration: timedelta, options: FormatOptions | None = None) -> str:
    """Render a duration as a concise human string.

    Returns ``"?"`` for the unbounded sentinel and ``""`` for zero or
    negative durations. Otherwise the first matching bucket wins, from days
    down to milliseconds.

    Examples:
        >>> format_verbose(timedelta(hours=25))
        '25 hours'
        >>> format_verbose(timedelta(milliseconds=1500))
        '2 seconds'
    """
    if duration == UNBOUNDED:
        return "?"
    if duration <= timedelta(0):
        return ""

    options = options or FormatOptions()
    minimum = options.minimum_increment
    numbers = options.number_format
    at_floor = duration <= minimum

    days = round(10 * (duration / ONE_DAY)) / 10
    if days > 2 or (at_floor and minimum >= ONE_DAY):
        return f"{numbers.general(days)} days"

    hours = round(10 * (duration / ONE_HOUR)) / 10
    if hours > 1 or (at_floor and minimum >= ONE_HOUR):
        return f"{numbers.general(hours)} hours"

    minutes = duration / ONE_MINUTE
    if minutes > 1.5 or (at_floor and minimum >= ONE_MINUTE):
        shown = math.ceil(minutes) if minutes > 10 else math.ceil(minutes * 10) / 10
        return f"{numbers.general(float(shown))} minutes"

    seconds = duration / ONE_SECOND
    if is_precise_equal(seconds, 1) or (at_floor and minimum >= ONE_SECOND):
        return "1 second"
    if seconds > 1:
        return f"{math.ceil(seconds)} seconds"

    millis = duration / ONE_MILLISECOND
    if is_precise_equal(millis, 1):
        return "1 millisecond"
    if millis > 1:
        return f"{numbers.grouped(math.ceil(millis), 0)} milliseconds"
    return f"{numbers.grouped(millis, 3)} milliseconds"
