"""Numeric time codec.

Packs a time of day into the decimal digits of an integer (``9``, ``930``,
``93015``) and converts between that packing, durations, and Unix epoch
relative values.

Only the overall magnitude of a packed value is checked against its format's
bound; the minute and second digit groups are never checked against 60, so
``decode(199, NumericTimeFormat.HOURS_MINUTES)`` is one hour and 99 minutes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime, time, timedelta, timezone

from pytimespan._constants import (
    EPOCH,
    HOURS_BOUND,
    HOURS_MINUTES_BOUND,
    HOURS_MINUTES_SECONDS_BOUND,
    INT32_MAX,
    INT32_MIN,
    UINT8_MAX,
    UINT16_MAX,
)
from pytimespan._errors import (
    ERR_MSG_INSTANT_OUT_OF_RANGE,
    ERR_MSG_NUMERIC_TIME_OUT_OF_RANGE,
    ERR_MSG_UNEXPECTED_INPUT_KIND,
    InvalidArgumentError,
    OutOfRangeError,
    TypeMismatchError,
)
from pytimespan._utils import duration_components, parse_digits, reduce

__all__ = [
    "ByteInput",
    "IntInput",
    "NumericTimeFormat",
    "NumericTimeInput",
    "TextInput",
    "UShortInput",
    "compose_with_date",
    "decode",
    "decode_input",
    "decode_text",
    "decode_unknown",
    "encode_hours",
    "encode_hours_minutes",
    "encode_hours_minutes_seconds",
    "from_components",
    "from_hours_minutes",
    "from_unix_duration",
    "from_unix_millis",
    "to_unix_duration",
    "to_unix_millis",
]


class NumericTimeFormat(enum.StrEnum):
    """How many two-digit groups a packed numeric time carries."""

    HOURS = "hours"
    HOURS_MINUTES = "hours_minutes"
    HOURS_MINUTES_SECONDS = "hours_minutes_seconds"


FORMAT_BOUNDS: dict[NumericTimeFormat, int] = {
    NumericTimeFormat.HOURS: HOURS_BOUND,
    NumericTimeFormat.HOURS_MINUTES: HOURS_MINUTES_BOUND,
    NumericTimeFormat.HOURS_MINUTES_SECONDS: HOURS_MINUTES_SECONDS_BOUND,
}


def _check_domain(kind: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise OutOfRangeError(
            ERR_MSG_NUMERIC_TIME_OUT_OF_RANGE,
            f"{kind} value {value} outside [{low}, {high}]",
        )


@dataclass(frozen=True)
class TextInput:
    """Numeric time given as digit text."""

    value: str


@dataclass(frozen=True)
class IntInput:
    """Numeric time given as a 32-bit signed integer."""

    value: int

    def __post_init__(self) -> None:
        _check_domain("int", self.value, INT32_MIN, INT32_MAX)


@dataclass(frozen=True)
class UShortInput:
    """Numeric time given as a 16-bit unsigned integer."""

    value: int

    def __post_init__(self) -> None:
        _check_domain("ushort", self.value, 0, UINT16_MAX)


@dataclass(frozen=True)
class ByteInput:
    """Numeric time given as an 8-bit unsigned integer."""

    value: int

    def __post_init__(self) -> None:
        _check_domain("byte", self.value, 0, UINT8_MAX)


NumericTimeInput = TextInput | IntInput | UShortInput | ByteInput

# Input kind each format expects when strict kind assertion is requested.
_EXPECTED_INPUT: dict[NumericTimeFormat, type] = {
    NumericTimeFormat.HOURS_MINUTES_SECONDS: IntInput,
    NumericTimeFormat.HOURS_MINUTES: UShortInput,
    NumericTimeFormat.HOURS: ByteInput,
}


def from_components(hours: int, minutes: int, seconds: int) -> timedelta:
    """Build a duration from hour, minute and second counts."""
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def decode(value: int, fmt: NumericTimeFormat) -> timedelta:
    """Decode a packed numeric time into a duration.

    Digit groups are peeled two at a time from the right: seconds (for
    ``HOURS_MINUTES_SECONDS``), then minutes (for either minutes format),
    and whatever remains is hours.

    Raises:
        OutOfRangeError: If ``value`` is outside ``[0, bound)`` for ``fmt``.
    """
    fmt = NumericTimeFormat(fmt)
    bound = FORMAT_BOUNDS[fmt]
    if value < 0 or value >= bound:
        raise OutOfRangeError(
            ERR_MSG_NUMERIC_TIME_OUT_OF_RANGE,
            f"{value} is outside [0, {bound}) for {fmt.value}",
        )

    rest = value
    seconds = minutes = 0
    if fmt is NumericTimeFormat.HOURS_MINUTES_SECONDS:
        seconds, rest = reduce(rest)
    if fmt is not NumericTimeFormat.HOURS:
        minutes, rest = reduce(rest)
    hours, _ = reduce(rest)
    return from_components(hours, minutes, seconds)


def decode_text(text: str, fmt: NumericTimeFormat) -> timedelta:
    """Decode digit text in a known format."""
    return decode(parse_digits(text), fmt)


def decode_unknown(text: str) -> timedelta:
    """Decode digit text whose format is implied by its length.

    More than four digits is hours-minutes-seconds, three or four digits is
    hours-minutes, anything shorter is hours. ``"930"`` and ``"0930"`` are
    both half past nine.

    Raises:
        ParseError: If ``text`` is empty or not all digits.
        OutOfRangeError: If the value exceeds the implied format's bound.
    """
    value = parse_digits(text)
    length = len(text.strip())
    if length > 4:
        return decode(value, NumericTimeFormat.HOURS_MINUTES_SECONDS)
    if length > 2:
        return decode(value, NumericTimeFormat.HOURS_MINUTES)
    return decode(value, NumericTimeFormat.HOURS)


def decode_input(
    value: NumericTimeInput,
    expected: NumericTimeFormat,
    *,
    strict: bool = False,
) -> timedelta:
    """Decode a tagged numeric time input in the expected format.

    Text is always accepted. With ``strict=True`` an integer input must be
    the kind the format expects: ``IntInput`` for hours-minutes-seconds,
    ``UShortInput`` for hours-minutes, ``ByteInput`` for hours.

    Raises:
        TypeMismatchError: If ``strict`` and the input kind does not match.
        InvalidArgumentError: If ``value`` is not a numeric time input.
    """
    expected = NumericTimeFormat(expected)
    if isinstance(value, TextInput):
        return decode_text(value.value, expected)
    if not isinstance(value, (IntInput, UShortInput, ByteInput)):
        raise InvalidArgumentError(
            "value is not a numeric time input",
            f"cannot decode numeric time from {type(value).__name__}",
        )

    wanted = _EXPECTED_INPUT[expected]
    if strict and not isinstance(value, wanted):
        raise TypeMismatchError(
            ERR_MSG_UNEXPECTED_INPUT_KIND,
            f"expected {wanted.__name__} for {expected.value}, got {type(value).__name__}",
        )
    return decode(value.value, expected)


def compose_with_date(duration: timedelta, date: date_type | None = None) -> datetime:
    """Place a duration's clock components on a calendar date.

    The date's own time of day and the duration's sub-second part are
    discarded. Without a date, ``0001-01-01`` is used.
    """
    if date is None:
        date = datetime.min
    _, hours, minutes, seconds, _ = duration_components(duration)
    try:
        return datetime(date.year, date.month, date.day, hours, minutes, seconds)
    except ValueError as e:
        raise OutOfRangeError(
            ERR_MSG_NUMERIC_TIME_OUT_OF_RANGE,
            f"cannot place {duration!r} on {date!r}",
            wrapped=e,
        ) from e


def from_hours_minutes(value: int | None, date: date_type | None = None) -> timedelta | datetime:
    """Decode an hours-minutes value, composing it with ``date`` when given."""
    if value is None:
        raise InvalidArgumentError("numeric time is required", "value is None")
    duration = decode(value, NumericTimeFormat.HOURS_MINUTES)
    if date is None:
        return duration
    return compose_with_date(duration, date)


def _time_of_day(value: timedelta | datetime | time) -> timedelta:
    if isinstance(value, datetime):
        value = value.time()
    if isinstance(value, time):
        return timedelta(
            hours=value.hour,
            minutes=value.minute,
            seconds=value.second,
            microseconds=value.microsecond,
        )
    return value


def encode_hours(value: timedelta | datetime | time) -> int:
    """The whole hours of the time of day, the inverse of an ``HOURS`` decode."""
    _, hours, _, _, _ = duration_components(_time_of_day(value))
    return hours


def encode_hours_minutes(value: timedelta | datetime | time) -> int:
    """Pack the hour and minute components as ``hours * 100 + minutes``."""
    _, hours, minutes, _, _ = duration_components(_time_of_day(value))
    return hours * 100 + minutes


def encode_hours_minutes_seconds(value: timedelta | datetime | time) -> int:
    """Pack the clock components as ``hours * 10000 + minutes * 100 + seconds``."""
    _, hours, minutes, seconds, _ = duration_components(_time_of_day(value))
    return hours * 10000 + minutes * 100 + seconds


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def to_unix_duration(instant: datetime) -> timedelta:
    """Elapsed time from the epoch to ``instant`` (naive instants are UTC)."""
    return _as_utc(instant) - EPOCH


def from_unix_duration(duration: timedelta) -> datetime:
    """The UTC instant ``duration`` after the epoch."""
    try:
        return EPOCH + duration
    except OverflowError as e:
        raise OutOfRangeError(
            ERR_MSG_INSTANT_OUT_OF_RANGE,
            f"epoch + {duration!r} is not representable",
            wrapped=e,
        ) from e


def to_unix_millis(instant: datetime) -> int:
    """Milliseconds since the epoch, rounding half to even."""
    micros = to_unix_duration(instant) // timedelta(microseconds=1)
    millis, rest = divmod(micros, 1000)
    if rest > 500 or (rest == 500 and millis % 2 == 1):
        millis += 1
    return millis


def from_unix_millis(millis: int) -> datetime:
    """The UTC instant ``millis`` milliseconds after the epoch."""
    try:
        return from_unix_duration(timedelta(milliseconds=millis))
    except OverflowError as e:
        raise OutOfRangeError(
            ERR_MSG_INSTANT_OUT_OF_RANGE,
            f"{millis} ms is not a representable duration",
            wrapped=e,
        ) from e
