"""Duration literal parsing - Lark grammar plus a Transformer to timedelta.

Two spellings are accepted:

* clock form ``[-][d.]h:mm[:ss[.fffffff]]`` or a bare day count ``[-]d``;
* unit form ``1h30m``, ``90s``, ``250ms``, ``10us``, ``5ns`` (also ``2d``).
"""

from __future__ import annotations

from datetime import timedelta

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError, VisitError

from pytimespan._errors import (
    ERR_MSG_DURATION_OUT_OF_RANGE,
    ERR_MSG_INVALID_DURATION,
    OutOfRangeError,
    ParseError,
    TimeSpanError,
)

MAX_FRACTION_DIGITS = 7
"""Sub-second digits allowed in clock form (100ns resolution)."""

DURATION_GRAMMAR = r"""
start: SIGN? _body

_body: clock
     | days
     | units

clock: day_prefix? INT ":" INT (":" INT fraction?)?
day_prefix: INT "."
fraction: "." INT
days: INT
units: unit+
unit: INT UNIT

SIGN: "-"
UNIT: "ms" | "us" | "µs" | "ns" | "d" | "h" | "m" | "s"

%import common.INT
%import common.WS_INLINE
%ignore WS_INLINE
"""

_NANOS_PER_UNIT: dict[str, int] = {
    "d": 86_400_000_000_000,
    "h": 3_600_000_000_000,
    "m": 60_000_000_000,
    "s": 1_000_000_000,
    "ms": 1_000_000,
    "us": 1_000,
    "µs": 1_000,
    "ns": 1,
}

_parser = Lark(DURATION_GRAMMAR, parser="lalr")


def _invalid(detail: str) -> ParseError:
    return ParseError(ERR_MSG_INVALID_DURATION, detail)


@v_args(inline=True)
class _DurationBuilder(Transformer):
    """Folds a duration literal parse tree into a timedelta."""

    def start(self, *children):
        if len(children) == 2:
            return -children[1]
        return children[0]

    def days(self, count):
        return timedelta(days=int(count))

    def day_prefix(self, count):
        return timedelta(days=int(count))

    def fraction(self, digits):
        if len(digits) > MAX_FRACTION_DIGITS:
            raise _invalid(f"fraction {str(digits)!r} has more than {MAX_FRACTION_DIGITS} digits")
        # Digits beyond microseconds are truncated.
        return timedelta(microseconds=int(str(digits).ljust(6, "0")[:6]))

    def clock(self, *children):
        extra = [c for c in children if isinstance(c, timedelta)]
        fields = [int(c) for c in children if isinstance(c, Token)]
        hours, minutes = fields[0], fields[1]
        seconds = fields[2] if len(fields) > 2 else 0

        if hours > 23:
            raise _invalid(f"hours component {hours} exceeds 23")
        if minutes > 59:
            raise _invalid(f"minutes component {minutes} exceeds 59")
        if seconds > 59:
            raise _invalid(f"seconds component {seconds} exceeds 59")

        return sum(extra, timedelta(hours=hours, minutes=minutes, seconds=seconds))

    def unit(self, count, unit):
        return int(count) * _NANOS_PER_UNIT[str(unit)]

    def units(self, *nanos):
        return timedelta(microseconds=sum(nanos) // 1000)


def parse_duration_literal(text: str) -> timedelta:
    """Parse a duration literal into a timedelta.

    Raises:
        ParseError: If ``text`` is not a valid literal.
        OutOfRangeError: If the literal exceeds the representable duration.
    """
    if text is None or not text.strip():
        raise _invalid("duration literal is empty")
    try:
        tree = _parser.parse(text.strip())
        return _DurationBuilder().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, TimeSpanError):
            raise e.orig_exc from e
        if isinstance(e.orig_exc, OverflowError):
            raise OutOfRangeError(
                ERR_MSG_DURATION_OUT_OF_RANGE,
                f"duration literal {text!r} is not representable",
                wrapped=e.orig_exc,
            ) from e
        raise
    except LarkError as e:
        raise ParseError(
            ERR_MSG_INVALID_DURATION,
            f"cannot parse duration literal: {text!r}",
            wrapped=e,
        ) from e
