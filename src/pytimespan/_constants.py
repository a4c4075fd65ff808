"""Process-wide constants for numeric time and duration handling."""

import re
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""Unix epoch, 1970-01-01T00:00:00 UTC."""

UNBOUNDED = timedelta.max
"""Sentinel duration for an unknown or unbounded remaining time."""

DIGIT_GROUP_FACTOR = 100
"""Each packed numeric time field occupies two decimal digits."""

HOURS_BOUND = 24
HOURS_MINUTES_BOUND = 2400
HOURS_MINUTES_SECONDS_BOUND = 240000

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT16_MAX = 2**16 - 1
UINT8_MAX = 2**8 - 1

TIME_DIGITS_PATTERN = re.compile(r"^(\d?\d)(?:(\d\d)(\d\d)?)?$", re.ASCII)
"""One to six digits: hours, optional minutes, optional seconds."""

EXACT_MONTH_PATTERN = re.compile(r"^(?P<year>\d{4})/(?P<month>\d{1,2})$", re.ASCII)
"""Year and month only, e.g. ``2024/3``."""

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{1,2}-\d{1,2}", re.ASCII)
"""Hyphenated calendar date whose hyphens never separate a range."""

ONE_MILLISECOND = timedelta(milliseconds=1)
ONE_SECOND = timedelta(seconds=1)
ONE_MINUTE = timedelta(minutes=1)
ONE_HOUR = timedelta(hours=1)
ONE_DAY = timedelta(days=1)
