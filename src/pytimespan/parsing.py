"""Free-form date, date-time and date-range text parsing.

Calendar dates are read by ``dateutil``; the time part of a date-time is
either packed numeric time (``930``) or a duration literal (``09:30``,
``1h30m``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

from pytimespan._constants import EXACT_MONTH_PATTERN, ISO_DATE_PATTERN, TIME_DIGITS_PATTERN
from pytimespan._errors import (
    ERR_MSG_INSTANT_OUT_OF_RANGE,
    ERR_MSG_INVALID_DATE,
    OutOfRangeError,
    ParseError,
)
from pytimespan._literal import parse_duration_literal
from pytimespan._utils import saturating_add
from pytimespan.numeric import decode_unknown

logger = logging.getLogger(__name__)

__all__ = ["ParseOptions", "TimeRange", "parse_date", "parse_instant", "parse_range", "parse_time"]


@dataclass(frozen=True)
class ParseOptions:
    """Calendar parsing preferences forwarded to ``dateutil``.

    Fields missing from the text are taken from January 1st of the year
    ``now()`` returns, so ``"March 2024"`` is always 2024-03-01.
    """

    dayfirst: bool = False
    yearfirst: bool = False
    now: Callable[[], datetime] = datetime.now


@dataclass(frozen=True)
class TimeRange:
    """A (start, end) pair of instants. ``start <= end`` is not enforced."""

    start: datetime
    end: datetime


_DEFAULT_OPTIONS = ParseOptions()


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def parse_date(text: str, options: ParseOptions | None = None) -> datetime:
    """Parse calendar date text.

    Raises:
        ParseError: If ``text`` is not a recognizable date.
    """
    options = options or _DEFAULT_OPTIONS
    try:
        return dateutil_parser.parse(
            text.strip(),
            default=datetime(options.now().year, 1, 1),
            dayfirst=options.dayfirst,
            yearfirst=options.yearfirst,
        )
    except (ValueError, OverflowError) as e:
        raise ParseError(
            ERR_MSG_INVALID_DATE,
            f"cannot parse date: {text!r}",
            wrapped=e,
        ) from e


def parse_time(text: str) -> timedelta:
    """Parse the time part of a date-time: packed digits or a duration literal."""
    stripped = text.strip()
    if TIME_DIGITS_PATTERN.match(stripped):
        return decode_unknown(stripped)
    return parse_duration_literal(stripped)


def parse_instant(
    date_text: str | None,
    time_text: str | None,
    default: datetime,
    options: ParseOptions | None = None,
) -> datetime:
    """Combine date text and time text into an instant.

    A blank or unparseable date yields ``default``. A malformed time is an
    error. The time is added to the date, clamping at ``datetime.min`` and
    ``datetime.max``.

    Raises:
        ParseError: If ``time_text`` is not valid time text.
        OutOfRangeError: If packed numeric time exceeds its bound.
    """
    if _is_blank(date_text):
        return default
    try:
        result = parse_date(date_text, options)
    except ParseError as e:
        logger.debug("Falling back to default instant: %s", e.internal())
        return default

    if _is_blank(time_text):
        return result

    offset = parse_time(time_text)
    if offset == timedelta(0):
        return result
    return saturating_add(result, offset)


def _split_range(text: str) -> tuple[str, str]:
    """Split at the first hyphen that is not inside a ``YYYY-MM-DD`` date."""
    dates = [m.span() for m in ISO_DATE_PATTERN.finditer(text)]
    for index, char in enumerate(text):
        if char != "-":
            continue
        if any(start <= index < end for start, end in dates):
            continue
        return text[:index].strip(), text[index + 1 :].strip()
    return text.strip(), ""


def parse_range(
    text: str | None,
    default_start: datetime = datetime.min,
    default_end: datetime = datetime.max,
    options: ParseOptions | None = None,
) -> TimeRange:
    """Interpret range text as a :class:`TimeRange`.

    Accepted shapes:

    * blank: ``(default_start, default_end)``;
    * ``YYYY/M``: the first of that month through ``default_start`` plus one
      month;
    * ``<date>``, ``<date>-<date>``, ``-<date>`` or ``<date>-``: each
      non-blank side overrides its default.

    Raises:
        ParseError: If a non-blank side is not a recognizable date.
        OutOfRangeError: If the month arithmetic leaves the calendar.
    """
    if _is_blank(text):
        return TimeRange(default_start, default_end)

    source = text.strip()
    exact_month = EXACT_MONTH_PATTERN.match(source)
    if exact_month:
        start = _first_of_month(exact_month.group("year"), exact_month.group("month"))
        try:
            end = default_start + relativedelta(months=1)
        except (ValueError, OverflowError) as e:
            raise OutOfRangeError(
                ERR_MSG_INSTANT_OUT_OF_RANGE,
                f"{default_start!r} plus one month is not representable",
                wrapped=e,
            ) from e
        logger.debug("Exact month %r resolved to %s - %s", source, start, end)
        return TimeRange(start, end)

    left, right = _split_range(source)
    start = parse_date(left, options) if left else default_start
    end = parse_date(right, options) if right else default_end
    return TimeRange(start, end)


def _first_of_month(year: str, month: str) -> datetime:
    try:
        return datetime(int(year), int(month), 1)
    except ValueError as e:
        raise ParseError(
            ERR_MSG_INVALID_DATE,
            f"no such month: {year}/{month}",
            wrapped=e,
        ) from e
