"""pytimespan - Interpret numeric time, date-range text, and verbose durations."""

from __future__ import annotations

from pytimespan._constants import EPOCH, UNBOUNDED
from pytimespan._errors import (
    InvalidArgumentError,
    OutOfRangeError,
    ParseError,
    TimeSpanError,
    TypeMismatchError,
)
from pytimespan._literal import parse_duration_literal
from pytimespan.formatting import FormatOptions, NumberFormat, format_verbose
from pytimespan.numeric import (
    ByteInput,
    IntInput,
    NumericTimeFormat,
    NumericTimeInput,
    TextInput,
    UShortInput,
    compose_with_date,
    decode,
    decode_input,
    decode_text,
    decode_unknown,
    encode_hours,
    encode_hours_minutes,
    encode_hours_minutes_seconds,
    from_components,
    from_hours_minutes,
    from_unix_duration,
    from_unix_millis,
    to_unix_duration,
    to_unix_millis,
)
from pytimespan.parsing import ParseOptions, TimeRange, parse_date, parse_instant, parse_range
from pytimespan.spans import (
    delta,
    divide_by,
    first_of_the_month,
    is_in_range,
    multiply_by,
    to_alphanumeric,
    to_datetime,
    to_milliseconds,
    to_oa_date,
)
from pytimespan.timing import (
    Stopwatch,
    elapsed_time_string,
    measure,
    remaining_time,
    remaining_time_string,
)

__version__ = "0.1.0"

__all__ = [
    "EPOCH",
    "UNBOUNDED",
    "ByteInput",
    "FormatOptions",
    "IntInput",
    "InvalidArgumentError",
    "NumberFormat",
    "NumericTimeFormat",
    "NumericTimeInput",
    "OutOfRangeError",
    "ParseError",
    "ParseOptions",
    "Stopwatch",
    "TextInput",
    "TimeRange",
    "TimeSpanError",
    "TypeMismatchError",
    "UShortInput",
    "compose_with_date",
    "decode",
    "decode_input",
    "decode_text",
    "decode_unknown",
    "delta",
    "divide_by",
    "elapsed_time_string",
    "encode_hours",
    "encode_hours_minutes",
    "encode_hours_minutes_seconds",
    "format_verbose",
    "from_components",
    "from_hours_minutes",
    "from_unix_duration",
    "first_of_the_month",
    "from_unix_millis",
    "is_in_range",
    "measure",
    "multiply_by",
    "parse_date",
    "parse_duration_literal",
    "parse_instant",
    "parse_range",
    "remaining_time",
    "remaining_time_string",
    "to_alphanumeric",
    "to_datetime",
    "to_milliseconds",
    "to_oa_date",
    "to_unix_duration",
    "to_unix_millis",
]
