"""Digit-group arithmetic, float comparison, and validation helpers."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from pytimespan._constants import DIGIT_GROUP_FACTOR
from pytimespan._errors import (
    ERR_MSG_INVALID_FACTOR,
    ERR_MSG_INVALID_NUMERIC_TIME,
    InvalidArgumentError,
    OutOfRangeError,
    ParseError,
)

PRECISE_REL_TOL = 1e-12
PRECISE_ABS_TOL = 1e-12


def reduce(value: int, factor: int = DIGIT_GROUP_FACTOR) -> tuple[int, int]:
    """Split off the least-significant digit group of ``value``.

    Returns ``(remainder, quotient)`` so successive groups can be peeled
    by feeding the quotient back in.
    """
    if factor <= 0:
        raise OutOfRangeError(
            ERR_MSG_INVALID_FACTOR,
            f"factor {factor} is not positive",
        )
    remainder = value % factor
    return remainder, (value - remainder) // factor


def is_precise_equal(a: float, b: float) -> bool:
    """Compare two floats for equality within machine-level tolerance."""
    return a == b or math.isclose(a, b, rel_tol=PRECISE_REL_TOL, abs_tol=PRECISE_ABS_TOL)


def parse_digits(text: str) -> int:
    """Parse a non-empty run of ASCII digits."""
    if text is None:
        raise InvalidArgumentError("numeric time text is required", "text is None")
    stripped = text.strip()
    if not stripped or not (stripped.isascii() and stripped.isdigit()):
        raise ParseError(
            ERR_MSG_INVALID_NUMERIC_TIME,
            f"numeric time text must be digits only: {text!r}",
        )
    return int(stripped)


def duration_components(duration: timedelta) -> tuple[int, int, int, int, int]:
    """Break a duration into signed (days, hours, minutes, seconds, microseconds).

    Every component carries the sign of the whole duration, so
    ``-90 minutes`` yields ``(0, -1, -30, 0, 0)``.
    """
    sign = -1 if duration < timedelta(0) else 1
    magnitude = -duration if sign < 0 else duration
    seconds, microseconds = magnitude.seconds, magnitude.microseconds
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return (
        sign * magnitude.days,
        sign * hours,
        sign * minutes,
        sign * seconds,
        sign * microseconds,
    )


def saturating_add(instant: datetime, duration: timedelta) -> datetime:
    """Add ``duration`` to ``instant``, clamping at the representable bounds."""
    try:
        return instant + duration
    except OverflowError:
        bound = datetime.max if duration > timedelta(0) else datetime.min
        return bound.replace(tzinfo=instant.tzinfo)
