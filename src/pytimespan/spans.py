"""Duration and instant helpers: calendar anchors, scaling, range checks."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from pytimespan._constants import ONE_DAY, ONE_MILLISECOND
from pytimespan._errors import (
    ERR_MSG_DIVISOR_ZERO,
    ERR_MSG_DURATION_OUT_OF_RANGE,
    InvalidArgumentError,
    OutOfRangeError,
)

__all__ = [
    "delta",
    "divide_by",
    "first_of_the_month",
    "is_in_range",
    "multiply_by",
    "to_alphanumeric",
    "to_datetime",
    "to_milliseconds",
    "to_oa_date",
]

_MAX_OFFSET = datetime.max - datetime.min


def first_of_the_month(date: datetime) -> datetime:
    """Midnight on the first day of ``date``'s month."""
    return datetime(date.year, date.month, 1)


def to_datetime(duration: timedelta) -> datetime:
    """The instant ``duration`` after ``0001-01-01T00:00:00``."""
    if duration < timedelta(0) or duration > _MAX_OFFSET:
        raise OutOfRangeError(
            ERR_MSG_DURATION_OUT_OF_RANGE,
            f"{duration!r} is outside [0, {_MAX_OFFSET!r}]",
        )
    return datetime.min + duration


def to_oa_date(duration: timedelta) -> float:
    """Fractional day count of ``duration``."""
    return duration / ONE_DAY


def to_milliseconds(instant: datetime) -> float:
    """Milliseconds elapsed since ``0001-01-01T00:00:00``."""
    return (instant.replace(tzinfo=None) - datetime.min) / ONE_MILLISECOND


def to_alphanumeric(date: datetime) -> str:
    """Compact sortable stamp in ``yyyyMMddZHHmmssT`` layout."""
    return (
        f"{date.year:04d}{date.month:02d}{date.day:02d}"
        f"Z{date.hour:02d}{date.minute:02d}{date.second:02d}T"
    )


def delta(
    from_time: datetime,
    to_time: datetime | None = None,
    *,
    now: Callable[[], datetime] = datetime.now,
) -> timedelta:
    """Elapsed time from ``from_time`` to ``to_time`` (default: ``now()``)."""
    to = to_time if to_time is not None else now()
    return to - from_time


def divide_by(duration: timedelta, divisor: int) -> timedelta:
    """Divide a duration, truncating toward zero at microsecond resolution."""
    if divisor == 0:
        raise InvalidArgumentError(ERR_MSG_DIVISOR_ZERO, "divisor: cannot be zero")
    micros = duration // timedelta(microseconds=1)
    quotient = abs(micros) // abs(divisor)
    if (micros < 0) != (divisor < 0):
        quotient = -quotient
    return timedelta(microseconds=quotient)


def multiply_by(duration: timedelta, factor: int) -> timedelta:
    """Scale a duration by an integer factor."""
    try:
        return duration * factor
    except OverflowError as e:
        raise OutOfRangeError(
            ERR_MSG_DURATION_OUT_OF_RANGE,
            f"{duration!r} * {factor} is not representable",
            wrapped=e,
        ) from e


def is_in_range(duration: timedelta, low: timedelta, high: timedelta) -> bool:
    """Whether ``low <= duration < high``."""
    return low <= duration < high
